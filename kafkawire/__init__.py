"""Kafka wire-protocol codecs, gzip and snappy compression, xxHash partitioning and consumer assignments."""

__version__ = "0.1.0"
__all__ = ["assignment", "codecs", "compression", "errors", "producer", "snappy", "xxhash"]