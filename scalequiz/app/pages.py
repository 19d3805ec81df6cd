from __future__ import annotations

"""Quiz pages and the key-press transition function.

Every screen is a small frozen dataclass carrying only what it needs.
`handle` maps (page, key) to an Action without doing any I/O; the session
loop does all rendering and key reading.
"""

import random
from dataclasses import dataclass, field
from typing import List, Sequence, Union

from ..theory.note import Note, circle_of_fifths
from ..theory.scale import Scale
from ..theory.scales import ScaleType
from ..util.randomness import choose_random_scale_type, choose_random_tonic
from .explain import trace as xtrace

QUIT_KEYS = ("q", "Q")
MENU_KEYS = ("m", "M")


@dataclass(frozen=True)
class PageContext:
    """Capabilities handlers may draw on: the random source and the tonic pool."""

    rng: random.Random = field(default_factory=random.Random)
    tonic_pool: Sequence[Note] = field(default_factory=lambda: tuple(circle_of_fifths()))


@dataclass(frozen=True)
class MainMenu:
    @property
    def text(self) -> str:
        return (
            "=== Music Theory Quiz Game ===\n"
            "\n"
            "What would you like to do?\n"
            "\n"
            "[1] Scale Types\n"
            "[2] Intervals\n"
            "[3] Chords\n"
            "\n"
            "[q] Quit"
        )


@dataclass(frozen=True)
class ComingSoon:
    @property
    def text(self) -> str:
        return "coming soon...\n\npress any key to continue"


@dataclass(frozen=True)
class ScaleQuiz:
    """One question: name the type of `scale`.

    `correct_choice` is the 1-based number of the right answer as listed
    in `choice_lines()`.
    """

    scale: Scale
    correct_choice: int

    @property
    def text(self) -> str:
        return (
            "What kind of scale is this?\n"
            "\n"
            f"{self.scale}\n"
            "\n"
            + "\n".join(choice_lines())
            + "\n"
            "\n"
            "[m] Main Menu\n"
            "[q] Quit"
        )


@dataclass(frozen=True)
class QuizFeedback:
    scale: Scale
    correct: bool
    correct_choice: int

    @property
    def text(self) -> str:
        verdict = "✅ That is correct" if self.correct else "❌ That's not correct"
        return (
            f"{verdict}\n"
            "\n"
            f"{self.scale} is a {self.scale.scale_type.label} scale\n"
            "\n"
            "Press any key to continue\n"
            "[q] Quit"
        )


Page = Union[MainMenu, ComingSoon, ScaleQuiz, QuizFeedback]


@dataclass(frozen=True)
class Noop:
    pass


@dataclass(frozen=True)
class Render:
    page: Page


@dataclass(frozen=True)
class Destroy:
    pass


Action = Union[Noop, Render, Destroy]


def choice_lines() -> List[str]:
    return [f"[{i}] {t.label}" for i, t in enumerate(ScaleType.all(), start=1)]


def new_scale_quiz(context: PageContext) -> ScaleQuiz:
    """Draw a random tonic and scale type and build the question page."""
    tonic = choose_random_tonic(context.rng, context.tonic_pool)
    scale = Scale(tonic, choose_random_scale_type(context.rng))
    page = ScaleQuiz(scale=scale, correct_choice=scale.scale_type.choice_number)
    xtrace("question", {"scale": str(scale), "type": scale.scale_type.label, "answer": page.correct_choice})
    return page


def _answer(page: ScaleQuiz, key: str) -> Action:
    if len(key) != 1 or key not in "0123456789":
        return Noop()
    choice = int(key)
    correct = choice == page.correct_choice
    xtrace("answer", {"choice": choice, "expected": page.correct_choice, "correct": correct})
    return Render(QuizFeedback(scale=page.scale, correct=correct, correct_choice=page.correct_choice))


def handle(page: Page, key: str, context: PageContext) -> Action:
    """Return the action for `key` pressed while `page` is showing."""
    if isinstance(page, MainMenu):
        if key == "1":
            return Render(new_scale_quiz(context))
        if key in ("2", "3"):
            return Render(ComingSoon())
        if key in QUIT_KEYS:
            return Destroy()
        return Noop()

    if isinstance(page, ComingSoon):
        return Render(MainMenu())

    if isinstance(page, ScaleQuiz):
        if key in MENU_KEYS:
            return Render(MainMenu())
        if key in QUIT_KEYS:
            return Destroy()
        return _answer(page, key)

    if isinstance(page, QuizFeedback):
        if key in QUIT_KEYS:
            return Destroy()
        # always a fresh question, never the same one again
        return Render(new_scale_quiz(context))

    raise TypeError(f"Unknown page type: {type(page).__name__}")
