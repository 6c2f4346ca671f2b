from .logging import JsonlLogSink, LogSink, StdoutLogSink, log_to_dict

__all__ = ["JsonlLogSink", "LogSink", "StdoutLogSink", "log_to_dict"]
