from .cli import build_parser, parse_args, run

__all__ = ["build_parser", "parse_args", "run"]
