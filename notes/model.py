# notes/model.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from notes.instruments import instrument_name

ProgramMap = Dict[int, int]          # channel -> last program number
ActiveNoteKey = Tuple[int, int, int]  # (track, channel, note)


@dataclass
class ActiveNote:
    pitch: int
    velocity: int
    start_tick: int
    channel: int


@dataclass(frozen=True)
class NoteEvent:
    track: int
    pitch: int      # MIDI note number
    velocity: int   # from the note-on
    start_tick: int
    duration: int   # ticks, may be 0
    channel: int

    @property
    def end_tick(self) -> int:
        return self.start_tick + self.duration

    def as_tuple(self) -> Tuple[int, int, int, int, int, int]:
        return (self.track, self.pitch, self.velocity, self.start_tick, self.duration, self.channel)


@dataclass
class TrackResult:
    """Everything one pass over a track produces."""
    index: int
    notes: List[NoteEvent] = field(default_factory=list)
    programs: ProgramMap = field(default_factory=dict)
    end_tick: int = 0
    tempo: Optional[int] = None   # first set_tempo in this track, microseconds per beat
    dropped: int = 0              # note-ons never terminated
    unmatched_offs: int = 0


@dataclass
class ScoreSummary:
    ppq: int
    num_tracks: int
    bpm: Optional[float] = None
    final_tick: int = 0
    notes: List[NoteEvent] = field(default_factory=list)
    programs: List[ProgramMap] = field(default_factory=list)

    def program_for(self, note: NoteEvent) -> Optional[int]:
        if 0 <= note.track < len(self.programs):
            return self.programs[note.track].get(note.channel)
        return None

    def instrument_for(self, note: NoteEvent) -> str:
        return instrument_name(self.program_for(note))
