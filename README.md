# kafkawire

Pure-Python building blocks for the Kafka wire protocol. It uses only the
standard library.

- `kafkawire.codecs` encodes and decodes the protocol's primitives in
  big-endian order. It covers `int8`, `int16`, `int32` and `int64`, strings
  with an int16 length prefix, byte strings with an int32 length prefix, and
  arrays with an int32 element count.
- `kafkawire.compression` provides the `Compression` enum (`NONE = 0`,
  `GZIP = 1`, `SNAPPY = 2`), `DEFAULT_COMPRESSION`, `gzip_compress` and
  `gzip_uncompress`.
- `kafkawire.snappy` provides raw snappy block `compress` and `uncompress`,
  plus `validate_stream`. It also has `SnappyReader`, which reads framed
  streams of length-prefixed snappy chunks.
- `kafkawire.xxhash` provides `XxHash32`, a streaming 32-bit xxHash. Feed it
  with `write(data)` and get the hash with `finish()`.
- `kafkawire.producer` provides `Record`, `ProduceMessage`, `to_message`,
  `Partitions`, `Topics`, the abstract `Partitioner` and
  `DefaultPartitioner`.
- `kafkawire.assignment` provides the read-only `Assignment` and
  `Assignments` types for consumers, and `from_map`.
- `kafkawire.errors` provides the `KafkaCode` enum of broker error codes and
  the exception hierarchy. Every exception derives from `KafkaError`.

## Install

```
pip install .
```

## Codecs

Encoders return `bytes`. Decoders read from a binary stream such as
`io.BytesIO`.

```python
import io
from kafkawire.codecs import (
    decode_int32, decode_string, decode_strings,
    encode_int32, encode_string, encode_strings,
)

assert encode_int32(5) == b"\x00\x00\x00\x05"
assert decode_int32(io.BytesIO(b"\x00\x00\x00\x05")) == 5

data = encode_string("test")          # b"\x00\x04test"
assert decode_string(io.BytesIO(data)) == "test"

blob = encode_strings(["abc", "defg"])
assert decode_strings(io.BytesIO(blob)) == ["abc", "defg"]
```

The codecs raise these errors:

- `CodecError` when an integer does not fit its type, or when a string is
  longer than 32767 bytes.
- `UnexpectedEOFError` when the input ends too early.
- `StringDecodeError` when string bytes are not valid UTF-8.

A length of zero or less decodes to an empty value: `""`, `b""` or `[]`.

## Compression

```python
from kafkawire.compression import gzip_compress, gzip_uncompress
from kafkawire.snappy import MAGIC, SnappyReader, compress, uncompress

assert gzip_uncompress(gzip_compress(b"payload")) == b"payload"
assert uncompress(compress(b"This is test")) == b"This is test"

# A framed stream is the magic header, an int32 version of 1, an int32
# compatibility of 1, and then a series of chunks, each prefixed by its
# int32 size.
chunk = compress(b"hello")
framed = (
    MAGIC
    + (1).to_bytes(4, "big")
    + (1).to_bytes(4, "big")
    + len(chunk).to_bytes(4, "big")
    + chunk
)
assert SnappyReader(framed).read_all() == b"hello"
```

`gzip_uncompress` accepts bytes or a readable binary stream. It raises
`OSError` on invalid data.

Snappy failures raise either `InvalidSnappyError` (bad header magic, wrong
version, bad chunk length, corrupt data) or `UnexpectedEOFError`.
`SnappyReader.read(size)` returns at most `size` bytes and returns `b""` at
the end of the stream.

## Partitioning

`DefaultPartitioner.partition(topics, msg)` decides the partition of each
message in this order:

1. A message whose partition is already set (zero or higher) keeps it.
2. A message for a topic missing from `topics` is left unchanged.
3. A keyed message goes to partition `hash(key) % num_all` of its topic. The
   hash is `XxHash32` with seed 0 unless you choose another. A topic with no
   partitions at all leaves the message unchanged.
4. A message without a key goes to the topic's available partitions in
   round-robin order.

```python
from kafkawire.producer import DefaultPartitioner, Partitions, Record, Topics, to_message

topics = Topics({"foo": Partitions([0, 1, 4], 5)})
partitioner = DefaultPartitioner()

msg = to_message(Record.from_key_value("foo", b"foo-key", b"value"))
partitioner.partition(topics, msg)
assert 0 <= msg.partition < 5
```

A record's key and value may be `bytes`, `str` (encoded as UTF-8) or `None`.
`to_message` turns empty data into `None`. `Record.with_partition(n)` returns
a copy of the record with the partition set to `n`.

`DefaultPartitioner` takes an optional hasher factory: any callable that
returns an object with `write(bytes)` and `finish() -> int`. To build a
partitioner of your own, subclass `Partitioner`.

## Consumer assignments

```python
from kafkawire.assignment import from_map

assignments = from_map({"b": [3, 1, 1], "a": []})
ref = assignments.topic_ref("b")
assert assignments[ref].partitions == (1, 3)
assert assignments.topic_ref("missing") is None
assert [a.topic for a in assignments] == ["a", "b"]
```

`from_map` sorts topics by name, and sorts and de-duplicates each topic's
partitions. An empty partition list means the consumer takes all partitions
of that topic.

## What it does not do

This package has no network client. It does not connect to brokers, fetch
metadata, or send produce, fetch or offset requests. It also has no
ready-made producer or consumer. It supplies the encoding, compression,
partitioning and assignment pieces that such a client builds on.

## Tests

```
pip install .[test]
pytest
```