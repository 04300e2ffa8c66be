"""
tintlog: leveled, ANSI color coded text logger.

Public API:
    ColorLogger       : the logger
    init_logger       : singleton initialization
    get_logger        : access singleton
    LoggerOptions     : display options
    Variant           : display variants (compact, nocolor, raw, time)
    CallSite          : resolved call-site locator and trace
    StackFilter       : optional stack-trace filtering collaborator
    is_valid_level    : level name validation
    build_event_table : named operation table for event buses
    wire_eventbus     : register a logger on an event bus
    traced            : function tracing decorator
"""

from tintlog._version import __version__, __app_name__
from tintlog.callsite import CallSite, StackFilter
from tintlog.levels import LOG_LEVELS, is_valid_level
from tintlog.logger import ColorLogger, init_logger, get_logger
from tintlog.options import LoggerOptions
from tintlog.variants import Variant
from tintlog.bindings import build_event_table, wire_eventbus
from tintlog.trace import traced

__all__ = [
    "__version__", "__app_name__",
    "ColorLogger", "init_logger", "get_logger",
    "LoggerOptions", "Variant", "CallSite", "StackFilter",
    "LOG_LEVELS", "is_valid_level",
    "build_event_table", "wire_eventbus",
    "traced",
]
