from .composition_root import build_log_sink, build_store_from_config

__all__ = ["build_log_sink", "build_store_from_config"]
