"""Output sinks for I/O."""

from burstnet.io.sinks.csv_sink import CsvSink

__all__ = ["CsvSink"]
