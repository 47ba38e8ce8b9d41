# output/sink.py
import json
import sys
from typing import Any, List, Optional, TextIO, Tuple


class Sink:
    """Named-channel message target. The host side of the reader."""
    def emit(self, channel: str, *values: Any) -> None:
        raise NotImplementedError


class RecordingSink(Sink):
    """Keeps every message in memory; handy for tests and embedding."""
    def __init__(self):
        self.messages: List[Tuple[str, Tuple[Any, ...]]] = []

    def emit(self, channel: str, *values: Any) -> None:
        self.messages.append((channel, values))

    def channel(self, name: str) -> List[Tuple[Any, ...]]:
        return [vals for ch, vals in self.messages if ch == name]


class ConsoleSink(Sink):
    """One line per message: channel followed by its values, space separated."""
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def emit(self, channel: str, *values: Any) -> None:
        out = self.stream or sys.stdout
        out.write(" ".join([channel] + [_fmt(v) for v in values]) + "\n")


class JsonLinesSink(Sink):
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def emit(self, channel: str, *values: Any) -> None:
        out = self.stream or sys.stdout
        out.write(json.dumps({"channel": channel, "values": list(values)}) + "\n")


def _fmt(v: Any) -> str:
    # quote strings with spaces so a line splits back into the same fields
    if isinstance(v, str) and (" " in v or not v):
        return json.dumps(v)
    return str(v)


def make_sink(fmt: str, stream: Optional[TextIO] = None) -> Sink:
    return JsonLinesSink(stream) if fmt == "json" else ConsoleSink(stream)
