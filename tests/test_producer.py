import pytest

from kafkawire.producer import (
    DefaultPartitioner,
    Partitioner,
    Partitions,
    ProduceMessage,
    Record,
    Topics,
    to_message,
)


def topics_map():
    return {
        "foo": Partitions([0, 1, 4], 5),
        "bar": Partitions([0, 1], 2),
    }


def assert_partitioning(topics, partitioner, topic, key):
    msg = ProduceMessage(topic=topic, key=key.encode(), value=None, partition=-1)
    partitioner.partition(Topics(topics), msg)
    num_partitions = topics[topic].num_all()
    assert 0 <= msg.partition < num_partitions
    return msg.partition


def test_key_partitioning():
    h = topics_map()
    p = DefaultPartitioner()
    h1 = assert_partitioning(h, p, "foo", "foo-key")
    h2 = assert_partitioning(h, p, "foo", "foo-key")
    assert h1 == h2
    h3 = assert_partitioning(h, p, "foo", "foo-key")
    h4 = assert_partitioning(h, p, "foo", "bar-key")
    assert h3 != h4


class MyCustomHasher:
    def __init__(self):
        self.value = 0

    def write(self, data):
        self.value = data[0]

    def finish(self):
        return self.value


def test_default_partitioner_with_custom_hasher():
    p = DefaultPartitioner(MyCustomHasher)
    h = {
        "confirms": Partitions([0, 1], 2),
        "contents": Partitions([0, 1, 9], 10),
    }
    assert assert_partitioning(h, p, "confirms", "A") == 1
    assert assert_partitioning(h, p, "contents", "B") == 6


def test_round_robin_without_key():
    p = DefaultPartitioner()
    topics = Topics(topics_map())
    chosen = []
    for _ in range(4):
        msg = ProduceMessage(topic="foo")
        p.partition(topics, msg)
        chosen.append(msg.partition)
    assert chosen == [0, 1, 4, 0]


def test_explicit_partition_is_kept():
    p = DefaultPartitioner()
    msg = ProduceMessage(topic="foo", key=b"k", partition=3)
    p.partition(Topics(topics_map()), msg)
    assert msg.partition == 3


def test_unknown_topic_is_left_alone():
    p = DefaultPartitioner()
    msg = ProduceMessage(topic="nope", key=b"k")
    p.partition(Topics(topics_map()), msg)
    assert msg.partition == -1


def test_topic_without_partitions_is_left_alone():
    p = DefaultPartitioner()
    topics = Topics({"empty": Partitions([], 0)})
    keyed = ProduceMessage(topic="empty", key=b"k")
    p.partition(topics, keyed)
    assert keyed.partition == -1
    keyless = ProduceMessage(topic="empty")
    p.partition(topics, keyless)
    assert keyless.partition == -1


def test_partitions_counts():
    parts = Partitions([0, 1, 4], 5)
    assert parts.num_available() == 3
    assert parts.num_all() == 5
    assert parts.available_ids == (0, 1, 4)


def test_topics_lookup():
    topics = Topics(topics_map())
    assert topics.partitions("bar").num_all() == 2
    assert topics.partitions("missing") is None


def test_record_constructors():
    rec = Record.from_key_value("t", "k", b"v")
    assert (rec.topic, rec.key, rec.value, rec.partition) == ("t", "k", b"v", -1)
    val = Record.from_value("t", "v")
    assert val.key is None and val.partition == -1
    moved = val.with_partition(7)
    assert moved.partition == 7
    assert val.partition == -1


def test_to_message_maps_empty_to_none():
    msg = to_message(Record.from_key_value("t", "", "hello").with_partition(2))
    assert msg == ProduceMessage(topic="t", key=None, value=b"hello", partition=2)
    msg = to_message(Record.from_value("t", b""))
    assert msg.key is None and msg.value is None


def test_to_message_encodes_text_as_utf8():
    msg = to_message(Record.from_key_value("t", "ä", bytearray(b"x")))
    assert msg.key == "ä".encode("utf-8")
    assert msg.value == b"x"


def test_partitioner_is_abstract():
    with pytest.raises(TypeError):
        Partitioner()