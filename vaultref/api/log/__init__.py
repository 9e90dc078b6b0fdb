"""Unified logfile for vaultref.

Single shared logfile at $VAULTREF_HOME/logfile with format:
[TIMESTAMP] [DOMAIN] LEVEL: message
"""

from .append_log import append_log
from .make_log_sink import LogSink, make_log_sink

__all__ = ["LogSink", "append_log", "make_log_sink"]
