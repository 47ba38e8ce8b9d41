# errors.py


class MidiReadError(Exception):
    """Fatal failure while reading a MIDI file. Nothing partial is reported."""


class MalformedInput(MidiReadError):
    pass


class SourceNotFound(MidiReadError, FileNotFoundError):
    pass


class SourceUnreadable(MidiReadError):
    pass


class InvalidTempo(MidiReadError, ValueError):
    def __init__(self, tempo):
        super().__init__(f"invalid tempo: {tempo} microseconds per beat")
        self.tempo = tempo
