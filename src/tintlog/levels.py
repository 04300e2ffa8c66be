"""
Log level registry for the color logger.

Nine named severities on a fixed integer scale. The emit rule is:

    current_rank <= requested_rank  →  message is shown

Level assignments:
    ←── louder ─────────────── default ─────────────── quieter ──→
    0     1      2      3        4     5     6      7      8
    all   trace  debug  verbose  info  warn  error  fatal  off

`off` sits above every emitting level so nothing passes it; `all` sits
below every level so everything passes.
"""

from typing import Any, Dict, Optional

from colorama import Fore, Style


LOG_LEVELS: Dict[str, int] = {
    'off': 8,
    'fatal': 7,
    'error': 6,
    'warn': 5,
    'info': 4,
    'verbose': 3,
    'debug': 2,
    'trace': 1,
    'all': 0,
}

LOG_LEVEL_NAMES: Dict[int, str] = {rank: name for name, rank in LOG_LEVELS.items()}

# Levels that have a logging method (off / all are thresholds only)
SEVERITIES = ('fatal', 'error', 'warn', 'info', 'debug', 'verbose', 'trace')

# ANSI escape sequences per level
LEVEL_COLORS: Dict[str, str] = {
    'fatal': Style.BRIGHT + Fore.RED,       # light red
    'error': Fore.RED,                      # red
    'warn': Fore.YELLOW,                    # yellow
    'info': Fore.GREEN,                     # green
    'debug': Fore.BLUE,                     # blue
    'verbose': Fore.MAGENTA,                # purple
    'trace': Style.BRIGHT + Fore.CYAN,      # light cyan
}

LEVEL_MARKERS: Dict[str, str] = {
    'fatal': '[F]',
    'error': '[E]',
    'warn': '[W]',
    'info': '[I]',
    'debug': '[D]',
    'verbose': '[V]',
    'trace': '[T]',
}

RESET = Style.RESET_ALL

DEFAULT_LEVEL = 'info'


def rank_of(name: Any) -> Optional[int]:
    """Return the rank for a level name, or None if it is not a level."""
    if not isinstance(name, str):
        return None
    return LOG_LEVELS.get(name)


def name_of(rank: Any) -> Optional[str]:
    """Return the level name for a rank, or None for unknown ranks."""
    if not _is_int(rank):
        return None
    return LOG_LEVEL_NAMES.get(rank)


def is_valid_level(level: Any) -> bool:
    """True iff `level` is a string naming one of the nine levels."""
    return rank_of(level) is not None


def is_enabled(current_rank: Any, requested_rank: Any) -> bool:
    """True if a message at `requested_rank` passes the `current_rank` threshold.

    Both ranks must be real integers; anything else degrades to False.
    """
    return _is_int(current_rank) and _is_int(requested_rank) and current_rank <= requested_rank


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a rank
    return isinstance(value, int) and not isinstance(value, bool)
