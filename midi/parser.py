# midi/parser.py
import io
import logging
import struct
from dataclasses import dataclass, field
from typing import List

import mido
from mido.midifiles.meta import KeySignatureError

from errors import MalformedInput, SourceNotFound, SourceUnreadable
from midi.events import RawTrackEvent

log = logging.getLogger(__name__)

# what mido raises on a bad header, a truncated chunk, an out-of-range data byte
# or a meta event it cannot decode
_MIDO_PARSE_ERRORS = (OSError, EOFError, ValueError, KeyError, IndexError, struct.error, KeySignatureError)


@dataclass
class MidiSource:
    """Header values plus every track as a list of RawTrackEvent."""
    ppq: int
    num_tracks: int
    tracks: List[List[RawTrackEvent]] = field(default_factory=list)


def from_midifile(mid: mido.MidiFile) -> MidiSource:
    tpb = mid.ticks_per_beat
    # top bit of the division word set means SMPTE frames, not ticks per beat
    if not isinstance(tpb, int) or tpb < 1 or tpb & 0x8000:
        raise MalformedInput(f"unsupported time division {tpb!r} (ticks per beat required)")
    tracks = [[RawTrackEvent.from_message(msg) for msg in track] for track in mid.tracks]
    return MidiSource(ppq=tpb, num_tracks=len(mid.tracks), tracks=tracks)


def parse_midi_bytes(data: bytes) -> MidiSource:
    try:
        mid = mido.MidiFile(file=io.BytesIO(data))
    except _MIDO_PARSE_ERRORS as e:
        raise MalformedInput(str(e) or type(e).__name__) from e
    src = from_midifile(mid)
    log.debug("parsed %d bytes: type %s, %d tracks, ppq %d", len(data), mid.type, src.num_tracks, src.ppq)
    return src


def read_midi_bytes(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except FileNotFoundError as e:
        raise SourceNotFound(f"no such file: {path}") from e
    except OSError as e:
        raise SourceUnreadable(f"cannot read {path}: {e.strerror or e}") from e


def load_midi(path: str) -> MidiSource:
    return parse_midi_bytes(read_midi_bytes(path))
