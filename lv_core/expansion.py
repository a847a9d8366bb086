"""Expanded/collapsed tracking for group headers."""

from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator


class ExpansionState:
    """Immutable set of expanded group keys.

    Keys are group identities, not positions, so re-sorting or paging never
    changes which groups are open. Keys of groups that no longer exist are
    kept; they simply match nothing.
    """

    __slots__ = ("_expanded",)

    def __init__(self, expanded: Iterable[str] = ()) -> None:
        self._expanded: FrozenSet[str] = frozenset(expanded)

    def toggle(self, key: str) -> "ExpansionState":
        """Return a new state with ``key`` flipped."""
        if key in self._expanded:
            return ExpansionState(self._expanded - {key})
        return ExpansionState(self._expanded | {key})

    def expand(self, key: str) -> "ExpansionState":
        return ExpansionState(self._expanded | {key})

    def collapse(self, key: str) -> "ExpansionState":
        return ExpansionState(self._expanded - {key})

    def is_expanded(self, key: str) -> bool:
        return key in self._expanded

    @property
    def expanded_keys(self) -> FrozenSet[str]:
        return self._expanded

    def __contains__(self, key: object) -> bool:
        return key in self._expanded

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._expanded))

    def __len__(self) -> int:
        return len(self._expanded)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExpansionState):
            return self._expanded == other._expanded
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._expanded)

    def __repr__(self) -> str:
        return f"ExpansionState({sorted(self._expanded)!r})"
