# output/emitter.py
from midi.tempo import DEFAULT_TEMPO, tempo_to_bpm
from notes.model import ScoreSummary
from output.sink import Sink

NO_BPM_MESSAGE = f"No BPM found, defaulting to {tempo_to_bpm(DEFAULT_TEMPO):g}"
NOTE_EVENT_TAG = "noteEvent"
ERROR_PREFIX = "Error reading MIDI file: "


def emit_summary(summary: ScoreSummary, sink: Sink) -> None:
    """Global values first (bpm, endTick, ppq, Tracks), then one `note` per event."""
    sink.emit("bpm", summary.bpm if summary.bpm is not None else NO_BPM_MESSAGE)
    sink.emit("endTick", summary.final_tick)
    sink.emit("ppq", summary.ppq)
    sink.emit("Tracks", summary.num_tracks)
    for n in summary.notes:
        sink.emit("note", n.track, summary.instrument_for(n), NOTE_EVENT_TAG,
                  n.pitch, n.velocity, n.start_tick, n.duration, n.channel)


def emit_error(message: str, sink: Sink, channel: str = "error") -> None:
    sink.emit(channel, ERROR_PREFIX + message)
