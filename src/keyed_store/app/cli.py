from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from keyed_store.adapters.file_io import SUPPORTED_FORMATS, write_snapshot
from keyed_store.config.loader import ConfigError, load_config
from keyed_store.config.models import LoggingConfig, StoreAppConfig
from keyed_store.integration.errors import KeyedStoreError, NotFoundError
from keyed_store.integration.keyed_store import KeyedStore
from keyed_store.kernel.composition_root import build_log_sink, build_store_from_config
from keyed_store.observability.adapters.logging import JsonlLogSink, LogSink

EXIT_OK = 0
EXIT_MISS = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="keyed-store", description="Inspect a keyed store built from YAML config")
    parser.add_argument("--config", required=True, help="Path to YAML config")
    parser.add_argument("--log-path", help="Override logging to a JSONL file at this path")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("keys", help="Print stored keys as a JSON list")
    commands.add_parser("dump", help="Print the full mapping as a JSON object")

    get = commands.add_parser("get", help="Print the value stored under KEY (exact match)")
    get.add_argument("key")

    has = commands.add_parser("has", help="Exit 0 when KEY is stored (exact match), 1 otherwise")
    has.add_argument("key")

    export = commands.add_parser("export", help="Write a snapshot of the store to a file")
    export.add_argument("--output", required=True, help="Snapshot file path")
    export.add_argument("--format", choices=SUPPORTED_FORMATS, default="json")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_logging_override(config: StoreAppConfig, args: argparse.Namespace) -> None:
    # --log-path always selects the JSONL sink and takes precedence over config.
    if args.log_path is not None:
        config.logging = LoggingConfig(sink="jsonl", path=args.log_path)


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        print(f"keyed-store: {exc}", file=sys.stderr)
        return EXIT_ERROR
    apply_logging_override(config, args)

    # stdout carries command results, so the stdout log sink is routed to stderr.
    log_sink: LogSink | None = None
    try:
        log_sink = build_log_sink(config.logging, stream=sys.stderr)
        store = build_store_from_config(config, log_sink=log_sink)
        return _dispatch(store, args)
    except (KeyedStoreError, OSError) as exc:
        print(f"keyed-store: {exc}", file=sys.stderr)
        return EXIT_ERROR
    finally:
        if isinstance(log_sink, JsonlLogSink):
            log_sink.close()


def _dispatch(store: KeyedStore[Any], args: argparse.Namespace) -> int:
    if args.command == "keys":
        _print_json(store.keys())
        return EXIT_OK

    if args.command == "dump":
        _print_json(store.dump())
        return EXIT_OK

    if args.command == "get":
        try:
            value = store.get(args.key)
        except NotFoundError as exc:
            print(f"keyed-store: {exc}", file=sys.stderr)
            return EXIT_MISS
        _print_json(value)
        return EXIT_OK

    if args.command == "has":
        found = store.has(args.key)
        print("true" if found else "false")
        return EXIT_OK if found else EXIT_MISS

    if args.command == "export":
        path = write_snapshot(store, Path(args.output), fmt=args.format)
        print(str(path))
        return EXIT_OK

    raise ValueError(f"Unsupported command: {args.command}")


def _print_json(payload: object) -> None:
    print(json.dumps(payload, ensure_ascii=False, default=str))
