"""Music theory layer: notes, pitches, scale types and spelled scales."""

from .note import CIRCLE_OF_FIFTHS_NAMES, Interval, Note, circle_of_fifths  # noqa: F401
from .note_utils import (  # noqa: F401
    ALPHABET,
    Bias,
    InvalidAccidentalError,
    InvalidNoteLetterError,
    InvalidPitchError,
    InvalidScaleTypeError,
    TheoryError,
)
from .pitch import Pitch, chromatic  # noqa: F401
from .scale import Scale  # noqa: F401
from .scales import ScaleType  # noqa: F401
