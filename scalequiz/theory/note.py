from __future__ import annotations

"""Spelled notes: a natural letter plus a pitch class."""

from dataclasses import dataclass
from enum import IntEnum
from typing import List

from .note_utils import (
    Bias,
    accidental_glyph,
    natural_pitch_class,
    parse_adjustment,
    pitch_class_to_letter,
    spelled_adjustment,
)


class Interval(IntEnum):
    """Simple intervals, valued by their size in semitones."""

    UNISON = 0
    MINOR_SECOND = 1
    MAJOR_SECOND = 2
    MINOR_THIRD = 3
    MAJOR_THIRD = 4
    PERFECT_FOURTH = 5
    TRITONE = 6
    PERFECT_FIFTH = 7
    MINOR_SIXTH = 8
    MAJOR_SIXTH = 9
    MINOR_SEVENTH = 10
    MAJOR_SEVENTH = 11


@dataclass(frozen=True)
class Note:
    """A pitch class (0..11) spelled with one of the seven natural letters.

    The accidental is not stored; it follows from how far the pitch class
    sits from the letter's natural pitch class.
    """

    letter: str
    pitch_class: int

    def __post_init__(self) -> None:
        natural_pitch_class(self.letter)  # validates the letter
        object.__setattr__(self, "pitch_class", self.pitch_class % 12)

    @classmethod
    def parse(cls, text: str) -> "Note":
        """Parse 'C', 'F#', 'Bb', 'E♭', 'G𝄪' ... into a Note."""
        if not text:
            raise ValueError("Empty note name")
        letter, suffix = text[0], text[1:]
        pc = natural_pitch_class(letter) + parse_adjustment(suffix)
        return cls(letter, pc)

    @property
    def adjustment(self) -> int:
        return spelled_adjustment(self.letter, self.pitch_class)

    def transpose(self, semitones: int, letter: str) -> "Note":
        """Move by `semitones` and spell the result with `letter`."""
        return Note(letter, self.pitch_class + semitones)

    def incr(self, interval: Interval, bias: Bias) -> "Note":
        """Move up by `interval`, choosing the letter from `bias` alone."""
        pc = (self.pitch_class + int(interval)) % 12
        return Note(pitch_class_to_letter(pc, bias), pc)

    def __str__(self) -> str:
        return f"{self.letter}{accidental_glyph(self.adjustment)}"


CIRCLE_OF_FIFTHS_NAMES = (
    "C", "F", "Bb", "Eb", "Ab", "Db", "Gb", "F#", "B", "E", "A", "D", "G",
)


def circle_of_fifths() -> List[Note]:
    """The 13 quiz tonics, flats first then sharps (G♭ and F♯ both present)."""
    return [Note.parse(name) for name in CIRCLE_OF_FIFTHS_NAMES]
