# midi/interpreter.py
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable

from midi.events import EventKind, RawTrackEvent
from notes.model import ActiveNote, ActiveNoteKey, NoteEvent, TrackResult

log = logging.getLogger(__name__)


@dataclass
class TrackState:
    """Per-track accumulator: running tick, held notes and what was emitted so far."""
    result: TrackResult
    current_tick: int = 0
    active: Dict[ActiveNoteKey, ActiveNote] = field(default_factory=dict)


def step(state: TrackState, ev: RawTrackEvent) -> TrackState:
    """Apply one event. Delta times are trusted as-is, never resynced."""
    state.current_tick += ev.delta_time
    res = state.result

    if ev.kind is EventKind.PROGRAM_CHANGE:
        res.programs[ev.channel] = ev.program
    elif ev.kind is EventKind.SET_TEMPO:
        if res.tempo is None:
            res.tempo = ev.tempo
    elif ev.is_note_start:
        key = (res.index, ev.channel, ev.note)
        if key in state.active:
            log.debug("track %d: note %d ch %d restarted at %d before release",
                      res.index, ev.note, ev.channel, state.current_tick)
        # last note-on wins
        state.active[key] = ActiveNote(ev.note, ev.velocity, state.current_tick, ev.channel)
    elif ev.is_note_end:
        on = state.active.pop((res.index, ev.channel, ev.note), None)
        if on is None:
            res.unmatched_offs += 1
        else:
            res.notes.append(NoteEvent(
                track=res.index,
                pitch=on.pitch,
                velocity=on.velocity,
                start_tick=on.start_tick,
                duration=state.current_tick - on.start_tick,
                channel=on.channel,
            ))
    return state


def interpret_track(events: Iterable[RawTrackEvent], track_index: int) -> TrackResult:
    state = TrackState(TrackResult(index=track_index))
    for ev in events:
        state = step(state, ev)

    res = state.result
    res.end_tick = state.current_tick
    # unterminated notes never reach the output
    res.dropped = len(state.active)
    if res.dropped or res.unmatched_offs:
        log.debug("track %d: dropped %d unterminated notes, ignored %d unmatched offs",
                  track_index, res.dropped, res.unmatched_offs)
    return res
