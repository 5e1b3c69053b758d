"""Records to produce and the partitioning of messages across topic partitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Mapping, Optional, Protocol, Tuple, Union

from kafkawire.xxhash import XxHash32

DEFAULT_ACK_TIMEOUT_MILLIS = 30 * 1000
"""The default time brokers may take to acknowledge produced messages."""

Payload = Union[bytes, bytearray, memoryview, str, None]

_U32_MASK = 0xFFFFFFFF


class Hasher(Protocol):
    """A streaming hasher as used by ``DefaultPartitioner``."""

    def write(self, data: bytes) -> None: ...

    def finish(self) -> int: ...


def _as_bytes(data: Payload) -> bytes:
    if data is None:
        return b""
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _to_option(data: Payload) -> Optional[bytes]:
    raw = _as_bytes(data)
    return raw if raw else None


@dataclass(frozen=True)
class Record:
    """A message to send: a key/value pair with a target topic and partition.

    A negative partition means "unspecified"; the partitioner then picks one.
    """

    topic: str
    key: Payload = None
    value: Payload = None
    partition: int = -1

    @staticmethod
    def from_key_value(topic: str, key: Payload, value: Payload) -> "Record":
        """Create a key/value record with an unspecified partition."""
        return Record(topic=topic, key=key, value=value, partition=-1)

    @staticmethod
    def from_value(topic: str, value: Payload) -> "Record":
        """Create a key-less record with an unspecified partition."""
        return Record(topic=topic, key=None, value=value, partition=-1)

    def with_partition(self, partition: int) -> "Record":
        """Return a copy of this record targeting ``partition``."""
        return replace(self, partition=partition)


@dataclass
class ProduceMessage:
    """A message ready to be produced; empty key or value is held as None."""

    topic: str
    key: Optional[bytes] = None
    value: Optional[bytes] = None
    partition: int = -1


def to_message(record: Record) -> ProduceMessage:
    """Convert a record into a produce message, mapping empty data to None."""
    return ProduceMessage(
        topic=record.topic,
        key=_to_option(record.key),
        value=_to_option(record.value),
        partition=record.partition,
    )


class Partitions:
    """Partition information of one topic as seen by a partitioner."""

    def __init__(self, available_ids: Iterable[int], num_all_partitions: int) -> None:
        self.available_ids: Tuple[int, ...] = tuple(available_ids)
        self._num_all = num_all_partitions

    def num_available(self) -> int:
        """Number of partitions with a known leader."""
        return len(self.available_ids)

    def num_all(self) -> int:
        """Total number of partitions, including those without a leader."""
        return self._num_all

    def __repr__(self) -> str:
        return (
            f"Partitions(available_ids={list(self.available_ids)!r}, "
            f"num_all_partitions={self._num_all})"
        )


class Topics:
    """The known topics and their partitions."""

    def __init__(self, partitions: Mapping[str, Partitions]) -> None:
        self._partitions = partitions

    def partitions(self, topic: str) -> Optional[Partitions]:
        """Return the partition information of ``topic`` or None if unknown."""
        return self._partitions.get(topic)


class Partitioner(ABC):
    """Chooses or overrides the target partition of a message."""

    @abstractmethod
    def partition(self, topics: Topics, msg: ProduceMessage) -> None:
        """Inspect ``msg`` and possibly reassign its ``partition``."""


class DefaultPartitioner(Partitioner):
    """Keeps explicit partitions, hashes keys, and round-robins key-less messages.

    - A non-negative partition is left untouched.
    - A message with a key goes to ``hash(key) % num_all`` so equal keys
      always land on the same partition.
    - A message without a key cycles through the available partitions.
    """

    def __init__(self, hasher_factory: Callable[[], Hasher] = XxHash32) -> None:
        self._hasher_factory = hasher_factory
        self._counter = 0

    def partition(self, topics: Topics, msg: ProduceMessage) -> None:
        if msg.partition >= 0:
            return
        partitions = topics.partitions(msg.topic)
        if partitions is None:
            return
        if msg.key is not None:
            num_partitions = partitions.num_all()
            if num_partitions == 0:
                return
            hasher = self._hasher_factory()
            hasher.write(msg.key)
            digest = hasher.finish() & _U32_MASK
            msg.partition = digest % num_partitions
            return
        available = partitions.available_ids
        if available:
            msg.partition = available[self._counter % len(available)]
            self._counter = (self._counter + 1) & _U32_MASK