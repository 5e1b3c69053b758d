"""Read-only topic partition assignments of a consumer."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Optional, Tuple

AssignmentRef = int


@dataclass(frozen=True)
class Assignment:
    """A topic to consume and the partitions requested; empty means all."""

    topic: str
    partitions: Tuple[int, ...] = ()


class Assignments:
    """A set of assignments kept sorted by topic name."""

    def __init__(self, assignments: Iterable[Assignment]) -> None:
        self._items = sorted(assignments, key=lambda a: a.topic)
        self._topics = [a.topic for a in self._items]

    def topic_ref(self, topic: str) -> Optional[AssignmentRef]:
        """Return a reference to the assignment of ``topic`` or None."""
        index = bisect.bisect_left(self._topics, topic)
        if index < len(self._topics) and self._topics[index] == topic:
            return index
        return None

    def __getitem__(self, ref: AssignmentRef) -> Assignment:
        return self._items[ref]

    def __iter__(self) -> Iterator[Assignment]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Assignments({self._items!r})"


def from_map(src: Mapping[str, Iterable[int]]) -> Assignments:
    """Build assignments from topic -> partitions, sorting and deduplicating."""
    return Assignments(
        Assignment(topic, tuple(sorted(set(partitions))))
        for topic, partitions in src.items()
    )