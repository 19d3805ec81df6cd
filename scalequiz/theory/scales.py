from __future__ import annotations

"""Scale types and their step patterns for 12-TET.

Provides the seven diatonic modes, their step patterns and utilities to map
diatonic degrees to pitch-class offsets.
"""

from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Tuple

from .note_utils import InvalidScaleTypeError


class ScaleType(Enum):
    """The seven diatonic modes, in quiz order.

    Declaration order is the order choices are shown in, and therefore the
    order that decides which digit answers a question.
    """

    MAJOR = "Major"
    MINOR = "Minor"
    DORIAN = "Dorian"
    PHRYGIAN = "Phrygian"
    LYDIAN = "Lydian"
    MIXOLYDIAN = "Mixolydian"
    LOCRIAN = "Locrian"

    @classmethod
    def all(cls) -> Tuple["ScaleType", ...]:
        return tuple(cls)

    @classmethod
    def from_label(cls, label: str) -> "ScaleType":
        wanted = label.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise InvalidScaleTypeError(f"Unknown scale type: {label!r}")

    @property
    def label(self) -> str:
        return self.value

    @property
    def pattern(self) -> Tuple[int, ...]:
        return SCALE_PATTERNS[self]

    @property
    def choice_number(self) -> int:
        """1-based position of this type in `ScaleType.all()`."""
        return ScaleType.all().index(self) + 1

    def __str__(self) -> str:
        return self.value


# Semitone steps into degrees 0..7; entry 0 is the tonic itself.
SCALE_PATTERNS: Mapping[ScaleType, Tuple[int, ...]] = MappingProxyType({
    ScaleType.MAJOR: (0, 2, 2, 1, 2, 2, 2, 1),
    ScaleType.MINOR: (0, 2, 1, 2, 2, 1, 2, 2),
    ScaleType.DORIAN: (0, 2, 1, 2, 2, 2, 1, 2),
    ScaleType.PHRYGIAN: (0, 1, 2, 2, 2, 1, 2, 2),
    ScaleType.LYDIAN: (0, 2, 2, 2, 1, 2, 2, 1),
    ScaleType.MIXOLYDIAN: (0, 2, 2, 1, 2, 2, 1, 2),
    ScaleType.LOCRIAN: (0, 1, 2, 2, 1, 2, 2, 2),
})


def degree_offset(scale_type: ScaleType, degree: int) -> int:
    """Return semitones from the tonic to a diatonic degree.

    Args:
        scale_type: The mode whose pattern is used.
        degree: 0-based degree (0..7, 7 being the octave).

    Returns:
        Cumulative semitone offset from tonic (0..12).
    """
    steps = scale_type.pattern
    if degree < 0 or degree >= len(steps):
        raise ValueError(f"degree must be 0..{len(steps) - 1}")
    return sum(steps[: degree + 1])


def build_scale_pcs(scale_type: ScaleType) -> List[int]:
    """Pitch-class offsets for the 7 diatonic degrees of `scale_type`."""
    return [degree_offset(scale_type, d) % 12 for d in range(7)]
