"""
Event-bus bindings for ColorLogger.

Exposes a logger's operations as named events so a publish/subscribe
bus can drive it. The bus itself is not part of tintlog; anything with
an ``on(name, callback)`` method works.

Event names (optionally prefixed with ``<prepend>:``):

    log:<level>                 fatal, error, warn, info, debug, verbose, trace
    log:<level>:<variant>       compact, nocolor, raw, time
    log:level:get               get_log_level
    log:level:set               set_log_level
    log:level:is:enabled        is_level_enabled
    log:level:is:valid          is_valid_level
    log:options:get             get_options
    log:options:set             set_options

Usage::

    wire_eventbus(bus, ColorLogger(), {'event_prepend': 'app'})
    bus.trigger('app:log:warn', 'low disk')
"""

from typing import Any, Callable, Dict, Mapping, Optional

from .levels import SEVERITIES
from .variants import Variant


def build_event_table(logger, prepend: Optional[str] = None) -> Dict[str, Callable[..., Any]]:
    """Map event names to the logger's bound operations.

    Args:
        logger: ColorLogger to expose
        prepend: Optional prefix; every name becomes ``<prepend>:log:...``

    Returns:
        New dict of event name -> callable
    """
    prefix = f'{prepend}:' if prepend else ''
    table: Dict[str, Callable[..., Any]] = {}

    for level in SEVERITIES:
        for variant in Variant:
            suffix = f':{variant.value}' if variant.value else ''
            table[f'{prefix}log:{level}{suffix}'] = logger.ext[level, variant]

    table[f'{prefix}log:level:get'] = logger.get_log_level
    table[f'{prefix}log:level:is:enabled'] = logger.is_level_enabled
    table[f'{prefix}log:level:is:valid'] = logger.is_valid_level
    table[f'{prefix}log:level:set'] = logger.set_log_level
    table[f'{prefix}log:options:get'] = logger.get_options
    table[f'{prefix}log:options:set'] = logger.set_options
    return table


def wire_eventbus(eventbus, logger,
                  plugin_options: Optional[Mapping[str, Any]] = None) -> Dict[str, Callable[..., Any]]:
    """Register every logger operation on `eventbus`.

    `plugin_options` are applied to the logger as options; its
    ``event_prepend`` string, if present, prefixes every event name.

    Returns:
        The event table that was registered
    """
    prepend = None
    if isinstance(plugin_options, Mapping):
        logger.set_options(plugin_options)
        if isinstance(plugin_options.get('event_prepend'), str):
            prepend = plugin_options['event_prepend']

    table = build_event_table(logger, prepend)
    for name, callback in table.items():
        eventbus.on(name, callback)
    return table
