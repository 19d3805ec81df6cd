from __future__ import annotations

"""Pitch parsing: note name plus octave (e.g. 'C#4', 'E♭3')."""

import re
from dataclasses import dataclass
from typing import List

from .note import Note
from .note_utils import (
    Bias,
    InvalidPitchError,
    natural_pitch_class,
    parse_adjustment,
    pitch_class_to_letter,
)

_PITCH_RE = re.compile(r"^([A-G])([#♯𝄪b♭𝄫]*)(-?[0-9]+)$")


@dataclass(frozen=True)
class Pitch:
    pitch_class: int
    octave: int

    @classmethod
    def parse(cls, text: str) -> "Pitch":
        """Parse a pitch string like 'C4', 'Db3', 'G♯5' or 'B𝄫2'.

        The pitch class wraps into 0..11 without moving the octave, so
        'B#3' is pitch class 0 in octave 3.
        """
        m = _PITCH_RE.match(text.strip())
        if m is None:
            raise InvalidPitchError(f"Invalid pitch string: {text!r}")
        letter, suffix, octave = m.groups()
        pc = natural_pitch_class(letter) + parse_adjustment(suffix)
        return cls(pitch_class=pc % 12, octave=int(octave))

    def note(self, bias: Bias) -> Note:
        return Note(pitch_class_to_letter(self.pitch_class, bias), self.pitch_class)

    def to_string(self, bias: Bias) -> str:
        return f"{self.note(bias)}{self.octave}"


def chromatic(start: Pitch, n: int) -> List[Pitch]:
    """`n` ascending semitones from `start`, carrying into the next octave after B."""
    out: List[Pitch] = []
    for i in range(n):
        steps = start.pitch_class + i
        out.append(Pitch(pitch_class=steps % 12, octave=start.octave + steps // 12))
    return out
