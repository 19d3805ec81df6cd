"""scalequiz package initialization.

A terminal quiz for recognising scale types, built on a small spelling-aware
music theory layer (`scalequiz.theory`).
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
