# io/recorder.py
import json
import logging
import sys
from typing import Protocol

log = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, record: dict) -> None: ...


class JsonlSink:
    def __init__(self, fp=None):
        self.fp = fp

    def write(self, record: dict) -> None:
        fp = self.fp or sys.stdout  # resolved late so redirected stdout is honored
        fp.write(json.dumps(record) + "\n")
        fp.flush()


class MemorySink:
    def __init__(self):
        self.records: list[dict] = []

    def write(self, record: dict) -> None:
        self.records.append(record)


class Recorder:
    """Fans query outputs out to sinks (renderers, files, reports)."""

    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, record: dict):
        for s in self.sinks:
            try:
                s.write(record)
            except Exception:
                # a broken sink must not starve the others
                log.exception("sink %s failed", type(s).__name__)
