from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures consumed by the composition root.


class EntryDecl(BaseModel):
    # One ordered mutation applied after the store is constructed.
    model_config = ConfigDict(extra="forbid")
    op: Literal["add", "set", "unset"]
    key: str
    value: Any = None

    @model_validator(mode="after")
    def _value_only_for_writes(self) -> EntryDecl:
        # unset carries no payload; reject a value to avoid silently dropping it.
        if self.op == "unset" and "value" in self.model_fields_set:
            raise ValueError("store.entries: 'unset' does not take a value")
        return self


class StoreConfig(BaseModel):
    # Initial mapping plus optional ordered mutations.
    model_config = ConfigDict(extra="forbid")
    elements: dict[str, Any] = Field(default_factory=dict)
    entries: list[EntryDecl] = Field(default_factory=list)


class LoggingConfig(BaseModel):
    # Log sink selector: only one sink is active at a time.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["none", "stdout", "jsonl"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        # For jsonl sink, a path is required to avoid silent defaults.
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class StoreAppConfig(BaseModel):
    # Top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: Literal[1]
    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
