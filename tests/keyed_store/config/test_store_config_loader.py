from __future__ import annotations

from pathlib import Path

import pytest

from keyed_store.config.loader import ConfigError, load_config, load_yaml_config, parse_config
from keyed_store.config.models import StoreAppConfig


def _write(tmp_path: Path, lines: list[str]) -> Path:
    path = tmp_path / "store.yml"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_load_config_happy_path(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        [
            "version: 1",
            "store:",
            "  elements:",
            "    ' db.host ': localhost",
            "    db.port: 5432",
            "  entries:",
            "    - {op: add, key: cache.ttl, value: 30}",
            "    - {op: unset, key: db.port}",
            "logging:",
            "  sink: jsonl",
            "  path: logs/store.jsonl",
        ],
    )
    config = load_config(path)

    assert isinstance(config, StoreAppConfig)
    # Keys are kept raw here; normalization belongs to the store.
    assert list(config.store.elements) == [" db.host ", "db.port"]
    assert [entry.op for entry in config.store.entries] == ["add", "unset"]
    assert config.store.entries[0].value == 30
    assert config.logging.sink == "jsonl"
    assert config.logging.path == "logs/store.jsonl"


def test_minimal_config_uses_defaults() -> None:
    config = parse_config({"version": 1})
    assert config.store.elements == {}
    assert config.store.entries == []
    assert config.logging.sink == "none"


def test_root_must_be_mapping(tmp_path: Path) -> None:
    path = _write(tmp_path, ["- a", "- b"])
    with pytest.raises(ConfigError, match="Config root must be a mapping"):
        load_yaml_config(path)


def test_malformed_yaml_is_config_error(tmp_path: Path) -> None:
    path = _write(tmp_path, ["version: [1"])
    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"version": 2},
        {"version": 1, "extra": True},
        {"version": 1, "store": {"elements": {}, "unknown": 1}},
        {"version": 1, "store": {"entries": [{"op": "drop", "key": "a"}]}},
        {"version": 1, "store": {"entries": [{"op": "unset", "key": "a", "value": 1}]}},
        {"version": 1, "logging": {"sink": "jsonl"}},
        {"version": 1, "logging": {"sink": "syslog"}},
    ],
)
def test_invalid_configs_fail_fast(raw: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        parse_config(raw)


def test_validation_error_is_chained() -> None:
    with pytest.raises(ConfigError) as excinfo:
        parse_config({"version": 3})
    assert excinfo.value.__cause__ is not None


def test_missing_file_is_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="cannot be read"):
        load_config(tmp_path / "absent.yml")
