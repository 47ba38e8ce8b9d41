# score/aggregator.py
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from midi.interpreter import interpret_track
from midi.parser import MidiSource, load_midi, parse_midi_bytes
from midi.tempo import tempo_to_bpm
from notes.model import ScoreSummary, TrackResult

log = logging.getLogger(__name__)


def _interpret_all(source: MidiSource, workers: int) -> List[TrackResult]:
    jobs = list(enumerate(source.tracks))
    if workers <= 1 or len(jobs) < 2:
        return [interpret_track(events, i) for i, events in jobs]
    # map() hands results back in submission (track) order
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda job: interpret_track(job[1], job[0]), jobs))


def aggregate(source: MidiSource, workers: int = 1) -> ScoreSummary:
    """Fold every track's result into one summary, in track order."""
    results = _interpret_all(source, workers)

    bpm: Optional[float] = None
    summary = ScoreSummary(ppq=source.ppq, num_tracks=source.num_tracks)
    for res in results:
        if bpm is None and res.tempo is not None:
            bpm = tempo_to_bpm(res.tempo)
            log.debug("tempo %d us/beat from track %d -> %.3f bpm", res.tempo, res.index, bpm)
        summary.final_tick = max(summary.final_tick, res.end_tick)
        summary.notes.extend(res.notes)
        summary.programs.append(res.programs)
    summary.bpm = bpm

    log.info("%d tracks, %d notes, end tick %d, ppq %d",
             summary.num_tracks, len(summary.notes), summary.final_tick, summary.ppq)
    return summary


def read_score(data: bytes, workers: int = 1) -> ScoreSummary:
    return aggregate(parse_midi_bytes(data), workers=workers)


def read_score_file(path: str, workers: int = 1) -> ScoreSummary:
    return aggregate(load_midi(path), workers=workers)
