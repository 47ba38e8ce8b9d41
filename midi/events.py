# midi/events.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EventKind(Enum):
    NOTE_ON = "note_on"
    NOTE_OFF = "note_off"
    PROGRAM_CHANGE = "program_change"
    SET_TEMPO = "set_tempo"
    OTHER = "other"


_KINDS = {k.value: k for k in EventKind if k is not EventKind.OTHER}


@dataclass(frozen=True)
class RawTrackEvent:
    delta_time: int
    kind: EventKind
    channel: Optional[int] = None
    note: Optional[int] = None
    velocity: Optional[int] = None
    program: Optional[int] = None
    tempo: Optional[int] = None  # microseconds per beat

    @property
    def is_note_start(self) -> bool:
        return self.kind is EventKind.NOTE_ON and (self.velocity or 0) > 0

    @property
    def is_note_end(self) -> bool:
        # note_on with velocity 0 is the usual running-status note-off
        return self.kind is EventKind.NOTE_OFF or (self.kind is EventKind.NOTE_ON and not self.velocity)

    @classmethod
    def from_message(cls, msg) -> "RawTrackEvent":
        """Build from a mido Message / MetaMessage."""
        kind = _KINDS.get(msg.type, EventKind.OTHER)
        dt = msg.time
        if kind in (EventKind.NOTE_ON, EventKind.NOTE_OFF):
            return cls(dt, kind, channel=msg.channel, note=msg.note, velocity=msg.velocity)
        if kind is EventKind.PROGRAM_CHANGE:
            return cls(dt, kind, channel=msg.channel, program=msg.program)
        if kind is EventKind.SET_TEMPO:
            return cls(dt, kind, tempo=msg.tempo)
        return cls(dt, kind)

