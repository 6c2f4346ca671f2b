from .adapters import JsonlLogSink, LogSink, StdoutLogSink
from .domain import LogMessage

__all__ = [
    "LogMessage",
    "LogSink",
    "StdoutLogSink",
    "JsonlLogSink",
]
