"""
ColorLogger: leveled, ANSI color coded text logger.

Central engine: gates each call on the current threshold, renders the
decorated string, writes it to the sink, and returns it.

Output format:
    <color>[Tag] [L] [Time] [file:line] message<trace><reset>

Level and color:
    fatal    light red
    error    red
    warn     yellow
    info     green
    debug    blue
    verbose  purple
    trace    light cyan

Every level method has four extra forms on ``logger.ext``:
``<level>_compact``, ``<level>_nocolor``, ``<level>_raw`` and
``<level>_time`` (see variants.py).

Passing an exception as a message renders its message followed by its
traceback. ``trace()`` always appends the current stack.
"""

import dataclasses
import json
import sys
from datetime import datetime
from typing import Any, Mapping, Optional, Pattern, TextIO, Union

from colorama import just_fix_windows_console

from . import levels
from .callsite import CallSite, StackFilter, resolve_call_site
from .config import resolve_logger_config
from .options import LoggerOptions, merge_options
from .variants import OperationTable, RenderRequest, Variant


OptionsArg = Union[Mapping[str, Any], LoggerOptions, None]


class ColorLogger:
    """Leveled logger with color, tag, level, time and call-site decoration.

    The logger writes with ``print(..., file=sink)``; the sink defaults to
    whatever ``sys.stdout`` is at write time.

    Usage::

        logger = ColorLogger({'show_level': True})
        logger.warn('disk almost full')         # returns the rendered string
        logger.ext.info_compact({'a': 1})
        logger.set_log_level('error')
        logger.info('dropped')                  # returns None
    """

    def __init__(
        self,
        options: OptionsArg = None,
        *,
        file: TextIO = None,
        stack_filter: Optional[StackFilter] = None,
        self_pattern: Union[str, Pattern, None] = None,
    ):
        if options is not None and not isinstance(options, (Mapping, LoggerOptions)):
            raise TypeError(f"'options' is not a mapping: {type(options).__name__}")

        self._options = LoggerOptions()
        self._level = levels.LOG_LEVELS[levels.DEFAULT_LEVEL]
        self.file = file
        self.stack_filter = stack_filter
        self.self_pattern = self_pattern
        self.ext = OperationTable(self._output)

        self.set_options(options)

    # -------------------------------------------------------------------------
    # Level and options
    # -------------------------------------------------------------------------

    def get_log_level(self) -> str:
        """Current threshold name."""
        return levels.name_of(self._level)

    def set_log_level(self, level: Any) -> bool:
        """Set the threshold by name.

        Unknown names leave the threshold unchanged, write a diagnostic
        to the sink and return False.
        """
        rank = levels.rank_of(level)
        if rank is None:
            print(f"tintlog - set_log_level - unknown log level: {level}", file=self.sink)
            return False
        self._level = rank
        return True

    def is_level_enabled(self, level: Any) -> bool:
        """True if a message at `level` would be emitted. False for unknown names."""
        return levels.is_enabled(self._level, levels.rank_of(level))

    @staticmethod
    def is_valid_level(level: Any) -> bool:
        """True if `level` is one of the nine level names."""
        return levels.is_valid_level(level)

    def get_options(self) -> LoggerOptions:
        """Independent copy of the current options."""
        return self._options.copy()

    def set_options(self, options: OptionsArg = None) -> None:
        """Merge recognized, correctly typed fields from `options`.

        Raises:
            TypeError: if `options` is not a mapping or LoggerOptions
        """
        merge_options(self._options, options)

    @property
    def sink(self) -> TextIO:
        return self.file if self.file is not None else sys.stdout

    # -------------------------------------------------------------------------
    # Logging methods
    # -------------------------------------------------------------------------

    def fatal(self, *msg: Any) -> Optional[str]:
        """Log at fatal (light red)."""
        return self._output('fatal', Variant.NORMAL, *msg)

    def error(self, *msg: Any) -> Optional[str]:
        """Log at error (red)."""
        return self._output('error', Variant.NORMAL, *msg)

    def warn(self, *msg: Any) -> Optional[str]:
        """Log at warn (yellow)."""
        return self._output('warn', Variant.NORMAL, *msg)

    def info(self, *msg: Any) -> Optional[str]:
        """Log at info (green)."""
        return self._output('info', Variant.NORMAL, *msg)

    def debug(self, *msg: Any) -> Optional[str]:
        """Log at debug (blue)."""
        return self._output('debug', Variant.NORMAL, *msg)

    def verbose(self, *msg: Any) -> Optional[str]:
        """Log at verbose (purple)."""
        return self._output('verbose', Variant.NORMAL, *msg)

    def trace(self, *msg: Any) -> Optional[str]:
        """Log at trace (light cyan), followed by the caller's stack."""
        return self._output('trace', Variant.NORMAL, *msg)

    def log(self, level: str, *msg: Any, variant: Variant = Variant.NORMAL) -> Optional[str]:
        """Log at a level given by name, optionally in a display variant.

        Raises:
            ValueError: if `level` is not one of the seven severities
        """
        if level not in levels.SEVERITIES:
            raise ValueError(f"unknown log level: {level!r}")
        return self.ext[level, variant](*msg)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _output(self, level: str, variant: Variant, *msg: Any) -> Optional[str]:
        return self.render(RenderRequest.for_variant(level, variant, msg))

    def render(self, request: RenderRequest) -> Optional[str]:
        """Render one request, write it if the console is enabled, and return it.

        Returns None when the request's level is below the threshold.
        """
        if not levels.is_enabled(self._level, levels.rank_of(request.level)):
            return None

        opts = self._options

        if request.raw:
            if opts.console_enabled:
                print(*request.messages, file=self.sink)
            return ' '.join(str(m) for m in request.messages)

        text = [self._format_message(m, request.compact) for m in request.messages]

        color = '' if opts.no_color or request.no_color else levels.LEVEL_COLORS[request.level]
        tag = f'[{opts.tag}] ' if opts.tag else ''
        level_tag = f'{levels.LEVEL_MARKERS[request.level]} ' if opts.show_level else ''
        now = f'[{timestamp()}] ' if request.time or opts.show_date else ''

        info = ''
        trace = ''
        site: Optional[CallSite] = None

        if opts.show_info:
            site = self._call_site()
            info = f'[{site.locator}] '

        if request.level == 'trace':
            if site is None:
                site = self._call_site()
            trace = f'\n{site.trace}\n'

        reset = levels.RESET if color else ''
        body = "\n".join(text)
        log = f"{color}{tag}{level_tag}{now}{info}{body}{trace}{reset}"

        if opts.console_enabled:
            print(log, file=self.sink)

        return log

    def _format_message(self, message: Any, compact: bool) -> str:
        if isinstance(message, BaseException):
            return f'{message}\n{self._call_site(message).trace}'
        if dataclasses.is_dataclass(message) and not isinstance(message, type):
            message = dataclasses.asdict(message)
        if isinstance(message, (dict, list, tuple)):
            if compact:
                return json.dumps(message, separators=(',', ':'), default=str)
            return json.dumps(message, indent=3, default=str)
        return str(message)

    def _call_site(self, error: Optional[BaseException] = None) -> CallSite:
        return resolve_call_site(error, self.self_pattern, self.stack_filter)


def timestamp(now: Optional[datetime] = None) -> str:
    """Local time as YYYY-MM-DDTHH:MM:SS.mZ; milliseconds are not padded."""
    d = now or datetime.now()
    return (f'{d.year}-{d.month:02d}-{d.day:02d}'
            f'T{d.hour:02d}:{d.minute:02d}:{d.second:02d}.{d.microsecond // 1000}Z')


# =============================================================================
# Module-level singleton
# =============================================================================

_logger: Optional[ColorLogger] = None


def init_logger(level: Optional[str] = None, options: OptionsArg = None, *,
                file: TextIO = None, start_dir: Optional[str] = None,
                use_config: bool = True) -> ColorLogger:
    """Initialize the module-level ColorLogger singleton.

    Call once at program startup. Explicit arguments win over the
    project config (.tintlog.json), which wins over the global config
    (~/.tintlog/config.json).

    Args:
        level: Threshold name (default: configured level, else 'info')
        options: Partial options mapping, or LoggerOptions whose non-default
            fields are applied
        file: Sink stream (default: sys.stdout at write time)
        start_dir: Directory to start the .tintlog.json search from
        use_config: Set False to ignore config files

    Returns:
        The initialized ColorLogger instance
    """
    global _logger

    just_fix_windows_console()

    if options is not None and not isinstance(options, (Mapping, LoggerOptions)):
        raise TypeError(f"'options' is not a mapping: {type(options).__name__}")
    if isinstance(options, LoggerOptions):
        # Only fields changed from the defaults count as explicit
        defaults = LoggerOptions().to_dict()
        options = {k: v for k, v in options.to_dict().items() if v != defaults[k]}

    if use_config:
        cfg_level, cfg_options = resolve_logger_config(level, options, start_dir)
    else:
        cfg_level, cfg_options = level, dict(options or {})

    logger = ColorLogger(cfg_options, file=file)
    if cfg_level is not None:
        logger.set_log_level(cfg_level)

    _logger = logger
    return _logger


def get_logger() -> ColorLogger:
    """Get the module-level ColorLogger, creating a default if needed."""
    global _logger
    if _logger is None:
        _logger = ColorLogger()
    return _logger
