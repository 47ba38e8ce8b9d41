"""Synthesize small Standard MIDI Files in memory with mido."""

import io
from typing import Iterable, List, Optional, Tuple

import mido

from midi.events import EventKind, RawTrackEvent


def build_track(notes: Iterable[Tuple[int, int, int, int]], channel: int = 0,
                program: Optional[int] = None, tempo: Optional[int] = None) -> mido.MidiTrack:
    """Build one track from absolute note tuples (onset_tick, pitch, duration_ticks, velocity)."""
    events: List[Tuple[int, mido.Message]] = []
    for onset, pitch, dur, vel in notes:
        events.append((onset, mido.Message("note_on", channel=channel, note=pitch, velocity=vel, time=0)))
        events.append((onset + dur, mido.Message("note_off", channel=channel, note=pitch, velocity=0, time=0)))
    events.sort(key=lambda item: (item[0], 0 if item[1].type == "note_off" else 1))

    track = mido.MidiTrack()
    if tempo is not None:
        track.append(mido.MetaMessage("set_tempo", tempo=tempo, time=0))
    if program is not None:
        track.append(mido.Message("program_change", channel=channel, program=program, time=0))
    last_tick = 0
    for tick, msg in events:
        msg.time = tick - last_tick
        track.append(msg)
        last_tick = tick
    return track


def midi_bytes(*tracks: mido.MidiTrack, ppq: int = 480) -> bytes:
    mid = mido.MidiFile(type=1, ticks_per_beat=ppq)
    mid.tracks.extend(tracks)
    buf = io.BytesIO()
    mid.save(file=buf)
    return buf.getvalue()


def raw_track(*msgs) -> mido.MidiTrack:
    track = mido.MidiTrack()
    track.extend(msgs)
    return track


# RawTrackEvent shorthands for feeding the interpreter directly
def note_on(dt: int, note: int, velocity: int, channel: int = 0) -> RawTrackEvent:
    return RawTrackEvent(dt, EventKind.NOTE_ON, channel=channel, note=note, velocity=velocity)


def note_off(dt: int, note: int, velocity: int = 0, channel: int = 0) -> RawTrackEvent:
    return RawTrackEvent(dt, EventKind.NOTE_OFF, channel=channel, note=note, velocity=velocity)


def program_change(dt: int, program: int, channel: int = 0) -> RawTrackEvent:
    return RawTrackEvent(dt, EventKind.PROGRAM_CHANGE, channel=channel, program=program)


def set_tempo(dt: int, tempo: int) -> RawTrackEvent:
    return RawTrackEvent(dt, EventKind.SET_TEMPO, tempo=tempo)


def other(dt: int) -> RawTrackEvent:
    return RawTrackEvent(dt, EventKind.OTHER)
