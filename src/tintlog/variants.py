"""
Display variants and the (severity x variant) operation table.

Every severity method exists in five forms:

    NORMAL   warn(...)              decorated, pretty JSON
    COMPACT  ext.warn_compact(...)  objects serialized without indentation
    NOCOLOR  ext.warn_nocolor(...)  no ANSI color even if enabled globally
    RAW      ext.warn_raw(...)      messages passed to the sink untouched
    TIME     ext.warn_time(...)     timestamp forced on
"""

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Tuple

from .levels import SEVERITIES


class Variant(Enum):
    NORMAL = ''
    COMPACT = 'compact'
    NOCOLOR = 'nocolor'
    RAW = 'raw'
    TIME = 'time'

    @property
    def compact(self) -> bool:
        return self is Variant.COMPACT

    @property
    def no_color(self) -> bool:
        return self in (Variant.NOCOLOR, Variant.RAW)

    @property
    def raw(self) -> bool:
        return self is Variant.RAW

    @property
    def time(self) -> bool:
        return self is Variant.TIME


@dataclass
class RenderRequest:
    """One log call: severity, display flags, and the messages."""
    level: str
    messages: Tuple[Any, ...] = ()
    compact: bool = False
    no_color: bool = False
    raw: bool = False
    time: bool = False

    @classmethod
    def for_variant(cls, level: str, variant: Variant,
                    messages: Tuple[Any, ...]) -> 'RenderRequest':
        return cls(level=level, messages=messages,
                   compact=variant.compact, no_color=variant.no_color,
                   raw=variant.raw, time=variant.time)


class OperationTable:
    """Fixed table of render operations keyed by (severity, variant).

    Built once per logger. Entries are also reachable by attribute name
    ``<severity>_<variant>`` (e.g. ``table.warn_raw``) and plain
    ``<severity>`` for the NORMAL variant.

    Usage::

        table = OperationTable(render)
        table['warn', Variant.RAW]('message')
        table.warn_raw('message')
    """

    def __init__(self, render: Callable[..., Any]):
        ops: Dict[Tuple[str, Variant], Callable[..., Any]] = {}
        for level in SEVERITIES:
            for variant in Variant:
                ops[(level, variant)] = functools.partial(render, level, variant)
        self._ops = ops
        self._by_name = {self.op_name(level, variant): op
                         for (level, variant), op in ops.items()}

    @staticmethod
    def op_name(level: str, variant: Variant) -> str:
        """Attribute name for an entry: 'warn' or 'warn_compact'."""
        return f'{level}_{variant.value}' if variant.value else level

    def __getitem__(self, key: Tuple[str, Variant]) -> Callable[..., Any]:
        return self._ops[key]

    def __getattr__(self, name: str) -> Callable[..., Any]:
        try:
            return self.__dict__['_by_name'][name]
        except KeyError:
            raise AttributeError(name) from None

    def __iter__(self) -> Iterator[Tuple[str, Variant]]:
        return iter(self._ops)

    def __len__(self) -> int:
        return len(self._ops)

    def __contains__(self, key: object) -> bool:
        return key in self._ops

    def names(self) -> List[str]:
        """All attribute names in table order."""
        return list(self._by_name)
