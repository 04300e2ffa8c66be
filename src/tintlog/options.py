"""
Logger display options.

The options object is owned by one ColorLogger. It changes only through
merge_options(): recognized fields with the right type overwrite the
current value, anything else is ignored.
"""

import copy
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union


@dataclass
class LoggerOptions:
    """Display options for a ColorLogger.

    Attributes:
        console_enabled: Write rendered messages to the sink
        no_color: Never emit ANSI color codes
        show_date: Prefix each message with a timestamp
        show_info: Prefix each message with the caller's file:line
        show_level: Prefix each message with a level marker ([W], [E], ...)
        tag: Custom tag prefixed to every message
    """
    console_enabled: bool = True
    no_color: bool = False
    show_date: bool = False
    show_info: bool = False
    show_level: bool = False
    tag: Optional[str] = None

    def copy(self) -> 'LoggerOptions':
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# Field name -> accepted type
OPTION_TYPES = {
    'console_enabled': bool,
    'no_color': bool,
    'show_date': bool,
    'show_info': bool,
    'show_level': bool,
    'tag': str,
}


def merge_options(target: LoggerOptions,
                  options: Union[Mapping[str, Any], LoggerOptions, None]) -> LoggerOptions:
    """Merge a partial options mapping into `target` in place.

    Args:
        target: Options to update
        options: Mapping of field names to values, or another
            LoggerOptions (all of its fields are taken), or None

    Returns:
        `target`, for chaining

    Raises:
        TypeError: if `options` is not a mapping or LoggerOptions
    """
    if options is None:
        return target
    if isinstance(options, LoggerOptions):
        options = options.to_dict()
    if not isinstance(options, Mapping):
        raise TypeError(f"'options' is not a mapping: {type(options).__name__}")

    for name, expected in OPTION_TYPES.items():
        value = options.get(name)
        if isinstance(value, expected):
            setattr(target, name, value)
    return target
