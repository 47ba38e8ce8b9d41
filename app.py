# app.py
import logging
from typing import Optional

from config import AppConfig
from errors import MidiReadError
from midi.parser import parse_midi_bytes, read_midi_bytes
from notes.model import ScoreSummary
from output.emitter import emit_error, emit_summary
from output.sink import Sink, make_sink
from score.aggregator import aggregate
from utils.crashlog import log_exception

log = logging.getLogger(__name__)


class App:
    """Reads MIDI files and reports each one to a sink, or a single error."""
    def __init__(self, cfg: AppConfig, sink: Optional[Sink] = None):
        self.cfg = cfg
        self.sink = sink or make_sink(cfg.output.format)

    # ---------- Loading ----------
    def read_midi_file(self, path: str) -> Optional[ScoreSummary]:
        log.info("Attempting to read MIDI file: %s", path)
        try:
            data = read_midi_bytes(path)
        except MidiReadError as e:
            self._fail(path, e)
            return None
        return self.read_midi_data(data, name=path)

    def read_midi_data(self, data: bytes, name: str = "<bytes>") -> Optional[ScoreSummary]:
        # parse and aggregate fully before emitting so a failure leaves no partial output
        try:
            summary = aggregate(parse_midi_bytes(data), workers=self.cfg.reader.workers)
        except MidiReadError as e:
            self._fail(name, e)
            return None
        log.info("MIDI file parsed successfully: %s", name)
        emit_summary(summary, self.sink)
        return summary

    def _fail(self, name: str, exc: MidiReadError):
        log.error("failed to read %s: %s", name, exc)
        if self.cfg.log.to_file:
            try:
                log_exception(f"read {name}", exc)
            except OSError as e:
                log.warning("could not write error log: %s", e)
        emit_error(str(exc), self.sink, channel=self.cfg.output.error_channel)
