"""
Call-site resolution for log messages.

Turns a captured call stack (or an exception's traceback) into:
  - a short locator, e.g. ``app.py:42:9`` (the column is present when the
    interpreter records one)
  - a trace remainder, the locator frame and the frames below it, one per
    line

Frames that belong to the logger itself are skipped so the locator
points at the caller rather than at tintlog internals. The identifying
pattern is configurable because it depends on where the package lives.

Stack text format (most recent call first, one line per frame):

    File "/path/to/app.py", line 42, col 9, in handler
    File "/path/to/main.py", line 7, in <module>
"""

import re
import traceback
from dataclasses import dataclass
from typing import Any, Optional, Pattern, Protocol, Union


NO_STACK_TRACE = 'no stack trace'

# Any module inside the tintlog package directory
DEFAULT_SELF_PATTERN = re.compile(r'[\\/]tintlog[\\/][\w.]+\.py"')

# File "<path>", line <n>[, col <c>] -> basename:n[:c]
_LOCATOR_PATTERN = re.compile(
    r'File "(?:[^"]*[\\/])?([\w\-.<>]+)", line (\d+)(?:, col (\d+))?')


@dataclass
class CallSite:
    """Where a log call came from.

    Attributes:
        locator: ``file:line[:col]`` of the first frame outside the logger,
            or ``'no stack trace'``
        trace: The locator frame and the frames below it, newline separated
    """
    locator: str = NO_STACK_TRACE
    trace: str = ''


class StackFilter(Protocol):
    """Optional collaborator that knows how to filter stack traces.

    ``filter`` receives the stack text (and the exception it came from,
    if any) and returns a CallSite, or None to decline. Any exception it raises makes the resolver
    fall back to local parsing.
    """

    def filter(self, stack: str,
               error: Optional[BaseException] = None) -> Optional[CallSite]:
        ...


def format_frames(frames: traceback.StackSummary) -> str:
    """Render frames as stack text, most recent call first.

    ``colno`` is 0-based and only set on 3.11+; it is written 1-based.
    """
    lines = []
    for f in reversed(frames):
        colno = getattr(f, 'colno', None)
        col = f', col {colno + 1}' if colno is not None else ''
        lines.append(f'  File "{f.filename}", line {f.lineno}{col}, in {f.name}')
    return '\n'.join(lines)


def capture_stack() -> str:
    """Capture the current call stack as text."""
    return format_frames(traceback.extract_stack())


def parse_stack(stack: str,
                self_pattern: Union[str, Pattern, None] = None) -> CallSite:
    """Pull the first non-logger ``file:line`` out of stack text.

    Lines matching `self_pattern` are dropped everywhere. The first
    remaining line with a file/line shape becomes the locator; every
    remaining line after it forms the trace.

    Args:
        stack: Stack text, one frame per line
        self_pattern: Regex identifying the logger's own frames
            (default: DEFAULT_SELF_PATTERN)

    Returns:
        CallSite with locator and trace
    """
    pattern = _compile(self_pattern)
    lines = stack.split('\n')

    info = NO_STACK_TRACE
    start = len(lines)
    for i, line in enumerate(lines):
        if pattern.search(line):
            continue
        matched = _LOCATOR_PATTERN.search(line)
        if matched is not None:
            info = ':'.join(g for g in matched.groups() if g is not None)
            start = i
            break

    trace = [line for line in lines[start:] if not pattern.search(line)]
    return CallSite(locator=info, trace='\n'.join(trace))


def resolve_call_site(error: Any = None,
                      self_pattern: Union[str, Pattern, None] = None,
                      stack_filter: Optional[StackFilter] = None) -> CallSite:
    """Resolve the call site for `error`, or for the current stack.

    When `error` is not an exception the current stack is captured.
    A `stack_filter` collaborator is asked first; if it is missing,
    declines, or fails, the stack text is parsed locally.
    """
    if isinstance(error, BaseException):
        if error.__traceback__ is None:
            return CallSite()
        stack = format_frames(traceback.extract_tb(error.__traceback__))
    else:
        error = None
        stack = capture_stack()

    if stack_filter is not None:
        try:
            parsed = stack_filter.filter(stack, error)
        except Exception:
            parsed = None
        if parsed is not None:
            return parsed

    return parse_stack(stack, self_pattern)


def _compile(pattern: Union[str, Pattern, None]) -> Pattern:
    if pattern is None:
        return DEFAULT_SELF_PATTERN
    if isinstance(pattern, str):
        return re.compile(pattern)
    return pattern
