# scalequiz/theory/note_utils.py
from __future__ import annotations

"""Letter, pitch-class and accidental tables for 12-TET spelling.

All tables are module-level and read-only; the helpers below are the only
places that translate between letters, pitch classes and accidental text.
"""

from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Tuple


class TheoryError(ValueError):
    """Base class for music theory parse/spelling errors."""


class InvalidNoteLetterError(TheoryError):
    def __init__(self, letter: str) -> None:
        super().__init__(f"Invalid note letter: {letter!r}")
        self.letter = letter


class InvalidAccidentalError(TheoryError):
    def __init__(self, suffix: str) -> None:
        super().__init__(f"Invalid accidental: {suffix!r}")
        self.suffix = suffix


class InvalidPitchError(TheoryError):
    pass


class InvalidScaleTypeError(TheoryError):
    pass


class Bias(Enum):
    """Which side to lean on when spelling a pitch class without context."""

    FLAT = "flat"
    SHARP = "sharp"


ALPHABET: Tuple[str, ...] = ("A", "B", "C", "D", "E", "F", "G")

NATURAL_PC: Mapping[str, int] = MappingProxyType(
    {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
)

ACCIDENTALS: Mapping[str, int] = MappingProxyType({
    "": 0,
    "#": 1, "♯": 1,
    "##": 2, "♯♯": 2, "𝄪": 2,
    "b": -1, "♭": -1,
    "bb": -2, "♭♭": -2, "𝄫": -2,
})

_GLYPHS: Mapping[int, str] = MappingProxyType({2: "𝄪", 1: "♯", 0: "", -1: "♭", -2: "𝄫"})

# pitch class -> letter, nearest natural at or below (sharp) / at or above (flat)
_SHARP_LETTERS = ("C", "C", "D", "D", "E", "F", "F", "G", "G", "A", "A", "B")
_FLAT_LETTERS = ("C", "D", "D", "E", "E", "F", "G", "G", "A", "A", "B", "B")


def natural_pitch_class(letter: str) -> int:
    """Semitones from C for a natural letter (C=0 ... B=11)."""
    try:
        return NATURAL_PC[letter]
    except KeyError:
        raise InvalidNoteLetterError(letter) from None


def base_letters(letter: str) -> List[str]:
    """The seven letters in alphabet order starting at `letter`.

    >>> base_letters("D")
    ['D', 'E', 'F', 'G', 'A', 'B', 'C']
    """
    if letter not in ALPHABET:
        raise InvalidNoteLetterError(letter)
    start = ALPHABET.index(letter)
    return [ALPHABET[(start + i) % len(ALPHABET)] for i in range(len(ALPHABET))]


def parse_adjustment(suffix: str) -> int:
    """Map an accidental suffix ('', '#', 'bb', '♭', '𝄪', ...) to -2..2."""
    try:
        return ACCIDENTALS[suffix]
    except KeyError:
        raise InvalidAccidentalError(suffix) from None


def pitch_class_to_letter(pc: int, bias: Bias) -> str:
    letters = _SHARP_LETTERS if bias is Bias.SHARP else _FLAT_LETTERS
    return letters[pc % 12]


def spelled_adjustment(letter: str, pc: int) -> int:
    """Signed semitone distance from the letter's natural pitch class to `pc`.

    Folded into -6..5 so spellings across the B/C and E/F boundaries
    (B♯, C♭, E♯, F♭) come out as single accidentals.
    """
    diff = (pc - natural_pitch_class(letter)) % 12
    if diff >= 6:
        diff -= 12
    return diff


def accidental_glyph(adjustment: int) -> str:
    try:
        return _GLYPHS[adjustment]
    except KeyError:
        raise ValueError(f"No accidental glyph for adjustment {adjustment}") from None
