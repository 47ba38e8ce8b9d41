import pytest

from errors import InvalidTempo, MidiReadError
from midi.tempo import DEFAULT_TEMPO, tempo_to_bpm


def test_default_tempo_is_120_bpm():
    assert tempo_to_bpm(500000) == 120.0
    assert tempo_to_bpm(DEFAULT_TEMPO) == 120.0


def test_fractional_bpm():
    assert tempo_to_bpm(600000) == pytest.approx(100.0)
    assert tempo_to_bpm(454545) == pytest.approx(132.00013, rel=1e-6)


@pytest.mark.parametrize("tempo", [0, -1, -500000])
def test_non_positive_tempo_is_fatal(tempo):
    with pytest.raises(InvalidTempo) as exc:
        tempo_to_bpm(tempo)
    assert exc.value.tempo == tempo
    assert isinstance(exc.value, MidiReadError)
    assert isinstance(exc.value, ValueError)
