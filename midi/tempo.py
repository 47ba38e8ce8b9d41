# midi/tempo.py
import mido
from errors import InvalidTempo

DEFAULT_TEMPO = 500000  # 120 bpm


def tempo_to_bpm(microseconds_per_beat) -> float:
    """60,000,000 / microseconds-per-beat. Non-positive tempo is fatal."""
    if microseconds_per_beat is None or microseconds_per_beat <= 0:
        raise InvalidTempo(microseconds_per_beat)
    return float(mido.tempo2bpm(microseconds_per_beat))
