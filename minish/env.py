"""The shell's environment: an ordered collection of variables."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple


class Environment:
    """Shell variables in insertion order.

    A variable may exist without a value (``export NAME``); such a
    variable has the value ``None``.
    """

    def __init__(self) -> None:
        self._vars: Dict[str, Optional[str]] = {}

    @classmethod
    def from_strings(cls, entries: Iterable[str]) -> "Environment":
        """Build an environment from ``KEY=value`` strings.

        Entries without ``=`` are ignored; the value is everything after
        the first ``=``.
        """
        env = cls()
        for entry in entries:
            key, sep, value = entry.partition("=")
            if sep:
                env._vars[key] = value
        return env

    def get(self, name: str) -> Optional[str]:
        """Return the value of *name*, or ``None`` if unset or valueless."""
        return self._vars.get(name)

    def set(self, key: str, value: Optional[str]) -> None:
        """Add *key* at the end or update it.

        A ``None`` value never overwrites an existing value.
        """
        if key in self._vars:
            if value is not None:
                self._vars[key] = value
        else:
            self._vars[key] = value

    def unset(self, key: str) -> None:
        """Remove *key* if present."""
        self._vars.pop(key, None)

    def to_strings(self) -> List[str]:
        """Return ``KEY=value`` strings for every variable that has a value."""
        return [f"{key}={value}" for key, value in self._vars.items() if value is not None]

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __iter__(self) -> Iterator[Tuple[str, Optional[str]]]:
        """Yield ``(key, value)`` pairs in insertion order."""
        return iter(list(self._vars.items()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._vars!r})"