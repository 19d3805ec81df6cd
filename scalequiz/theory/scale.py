from __future__ import annotations

from typing import Tuple

from .note import Note
from .note_utils import base_letters
from .scales import ScaleType, degree_offset


class Scale:
    """A concrete tonic+mode (e.g. E♭ Dorian), spelled diatonically.

    Each of the seven degrees takes the next letter after the previous one,
    so every natural letter is used exactly once and accidentals fall out of
    the gap between the letter and the required pitch class.
    """

    __slots__ = ("_tonic", "_scale_type", "_notes")

    def __init__(self, tonic: Note, scale_type: ScaleType = ScaleType.MAJOR) -> None:
        notes = []
        for j, letter in enumerate(base_letters(tonic.letter)):
            notes.append(tonic.transpose(degree_offset(scale_type, j), letter))
        self._tonic = tonic
        self._scale_type = scale_type
        self._notes: Tuple[Note, ...] = tuple(notes)

    @property
    def tonic(self) -> Note:
        return self._notes[0]

    @property
    def scale_type(self) -> ScaleType:
        return self._scale_type

    @property
    def notes(self) -> Tuple[Note, ...]:
        return self._notes

    def pitch_classes(self) -> Tuple[int, ...]:
        return tuple(n.pitch_class for n in self._notes)

    def transpose(self, new_tonic: Note) -> "Scale":
        return Scale(new_tonic, self._scale_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scale):
            return NotImplemented
        return self._tonic == other._tonic and self._scale_type is other._scale_type

    def __hash__(self) -> int:
        return hash((self._tonic, self._scale_type))

    def __str__(self) -> str:
        return " ".join(str(n) for n in self._notes)

    def __repr__(self) -> str:
        return f"Scale({self._tonic!s}, {self._scale_type.label})"
