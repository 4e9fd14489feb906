"""
Command-line switch collection.

Switches look like ``/Fjane``: the marker, a one-character code and an
optional attached value. Values are queued per code in the order they were
supplied and read back exactly once with :meth:`OptionMap.yank`.

    >>> options = OptionMap.collect(['/Fblah', '/Hblah2', '/Fblah3'])
    >>> options.yank('F'), options.yank('F'), options.yank('F')
    ('blah', 'blah3', None)
"""

from collections import deque
from enum import Enum
from typing import Deque, Dict, Iterable, Optional, Union

from .models import SWITCH_MARKER


def _key(code: Union[str, Enum]) -> str:
    return code.value if isinstance(code, Enum) else code


class OptionMap:
    """Maps switch codes to the queue of values supplied for them."""

    def __init__(self):
        self._values: Dict[str, Deque[str]] = {}

    @classmethod
    def collect(cls, raw_args: Iterable[str]) -> 'OptionMap':
        """Sort raw arguments into per-code queues, ignoring anything else."""
        options = cls()
        for arg in raw_args:
            if len(arg) < 2 or arg[0] != SWITCH_MARKER:
                continue
            options._values.setdefault(arg[1], deque()).append(arg[2:])
        return options

    def yank(self, code: Union[str, Enum]) -> Optional[str]:
        """Remove and return the oldest value queued for ``code``."""
        queue = self._values.get(_key(code))
        if not queue:
            return None
        return queue.popleft()

    def has(self, code: Union[str, Enum]) -> bool:
        """Whether ``code`` was supplied at all, consumed or not."""
        return _key(code) in self._values

    def last(self, code: Union[str, Enum]) -> Optional[str]:
        """The most recently supplied value for ``code``, without consuming it."""
        queue = self._values.get(_key(code))
        if not queue:
            return None
        return queue[-1]

    def is_empty(self) -> bool:
        return not self._values

    def __contains__(self, code: Union[str, Enum]) -> bool:
        return self.has(code)

    def __repr__(self) -> str:
        body = ', '.join(f"{code!r}: {list(values)!r}" for code, values in self._values.items())
        return f"OptionMap({{{body}}})"
