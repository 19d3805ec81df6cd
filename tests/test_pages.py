import random
import re
import unittest

from scalequiz.app.pages import (
    ComingSoon,
    Destroy,
    MainMenu,
    Noop,
    PageContext,
    QuizFeedback,
    Render,
    ScaleQuiz,
    handle,
    new_scale_quiz,
)
from scalequiz.theory import Note, Scale, ScaleType


class FixedRandom(random.Random):
    """Random source that always picks a given tonic index and scale type."""

    def __init__(self, tonic_index: int, scale_type: ScaleType) -> None:
        super().__init__(0)
        self.tonic_index = tonic_index
        self.scale_type = scale_type

    def randrange(self, *args, **kwargs):  # type: ignore[override]
        return self.tonic_index

    def choice(self, seq):  # type: ignore[override]
        return self.scale_type


def _ctx(seed: int = 7) -> PageContext:
    return PageContext(rng=random.Random(seed))


class MainMenuTests(unittest.TestCase):
    def test_one_starts_a_quiz(self) -> None:
        action = handle(MainMenu(), "1", _ctx())
        self.assertIsInstance(action, Render)
        self.assertIsInstance(action.page, ScaleQuiz)

    def test_two_and_three_are_coming_soon(self) -> None:
        for key in ("2", "3"):
            self.assertEqual(handle(MainMenu(), key, _ctx()), Render(ComingSoon()))

    def test_quit(self) -> None:
        for key in ("q", "Q"):
            self.assertIsInstance(handle(MainMenu(), key, _ctx()), Destroy)

    def test_unrecognized_keys_are_noop(self) -> None:
        page = MainMenu()
        for key in ("x", "4", "0", "m", " ", "\x1b[A", ""):
            self.assertIsInstance(handle(page, key, _ctx()), Noop)
        self.assertEqual(page, MainMenu())


class ComingSoonTests(unittest.TestCase):
    def test_any_key_returns_to_menu(self) -> None:
        for key in ("a", "q", "Q", "1", "\r"):
            self.assertEqual(handle(ComingSoon(), key, _ctx()), Render(MainMenu()))


class ScaleQuizTests(unittest.TestCase):
    def test_quiz_text_has_seven_numbered_choices_and_one_scale_line(self) -> None:
        page = handle(MainMenu(), "1", _ctx()).page
        lines = page.text.split("\n")
        choices = [ln for ln in lines if re.fullmatch(r"\[[1-9]\] \w+", ln)]
        self.assertEqual(choices, [f"[{t.choice_number}] {t.label}" for t in ScaleType.all()])
        scale_lines = [ln for ln in lines if ln == str(page.scale)]
        self.assertEqual(len(scale_lines), 1)
        self.assertIn("[m] Main Menu", lines)
        self.assertIn("[q] Quit", lines)

    def test_correct_choice_matches_enumeration_for_every_type(self) -> None:
        for t in ScaleType.all():
            page = new_scale_quiz(PageContext(rng=FixedRandom(0, t)))
            self.assertIs(page.scale.scale_type, t)
            self.assertEqual(page.correct_choice, ScaleType.all().index(t) + 1)
            self.assertIn(f"[{page.correct_choice}] {t.label}", page.text)

    def test_tonic_drawn_from_pool(self) -> None:
        pool = (Note.parse("Eb"), Note.parse("A"))
        page = new_scale_quiz(PageContext(rng=FixedRandom(1, ScaleType.DORIAN), tonic_pool=pool))
        self.assertEqual(page.scale, Scale(Note.parse("A"), ScaleType.DORIAN))

    def test_random_draws_cover_pool_and_types(self) -> None:
        ctx = _ctx(1234)
        seen_types = set()
        seen_tonics = set()
        for _ in range(500):
            page = new_scale_quiz(ctx)
            seen_types.add(page.scale.scale_type)
            seen_tonics.add(page.scale.tonic)
        self.assertEqual(seen_types, set(ScaleType.all()))
        self.assertEqual(len(seen_tonics), 13)

    def _quiz(self, t: ScaleType) -> ScaleQuiz:
        return ScaleQuiz(scale=Scale(Note.parse("D"), t), correct_choice=t.choice_number)

    def test_right_digit_gives_correct_feedback(self) -> None:
        page = self._quiz(ScaleType.PHRYGIAN)
        action = handle(page, "4", _ctx())
        self.assertIsInstance(action, Render)
        fb = action.page
        self.assertIsInstance(fb, QuizFeedback)
        self.assertTrue(fb.correct)
        self.assertEqual(fb.scale, page.scale)
        self.assertIn("✅ That is correct", fb.text)
        self.assertIn("D E♭ F G A B♭ C is a Phrygian scale", fb.text)

    def test_wrong_and_out_of_range_digits_are_incorrect(self) -> None:
        page = self._quiz(ScaleType.MAJOR)
        for key in ("2", "7", "0", "8", "9"):
            fb = handle(page, key, _ctx()).page
            self.assertFalse(fb.correct, key)
            self.assertIn("❌ That's not correct", fb.text)
            self.assertIn("is a Major scale", fb.text)

    def test_menu_quit_and_other_keys(self) -> None:
        page = self._quiz(ScaleType.LOCRIAN)
        self.assertEqual(handle(page, "m", _ctx()), Render(MainMenu()))
        self.assertEqual(handle(page, "M", _ctx()), Render(MainMenu()))
        self.assertIsInstance(handle(page, "Q", _ctx()), Destroy)
        for key in ("x", "\r", "12", "²"):
            self.assertIsInstance(handle(page, key, _ctx()), Noop)


class FeedbackTests(unittest.TestCase):
    def test_any_key_generates_a_new_question(self) -> None:
        t = ScaleType.LYDIAN
        fb = QuizFeedback(scale=Scale(Note.parse("F"), t), correct=True, correct_choice=t.choice_number)
        action = handle(fb, " ", PageContext(rng=FixedRandom(9, ScaleType.MINOR)))
        self.assertIsInstance(action, Render)
        self.assertIsInstance(action.page, ScaleQuiz)
        self.assertEqual(action.page.scale, Scale(Note.parse("E"), ScaleType.MINOR))

    def test_feedback_text_layout(self) -> None:
        t = ScaleType.MIXOLYDIAN
        fb = QuizFeedback(scale=Scale(Note.parse("G"), t), correct=False, correct_choice=t.choice_number)
        self.assertEqual(
            fb.text.split("\n"),
            [
                "❌ That's not correct",
                "",
                "G A B C D E F is a Mixolydian scale",
                "",
                "Press any key to continue",
                "[q] Quit",
            ],
        )

    def test_quit_from_feedback(self) -> None:
        fb = QuizFeedback(scale=Scale(Note.parse("C")), correct=False, correct_choice=1)
        self.assertIsInstance(handle(fb, "q", _ctx()), Destroy)


if __name__ == "__main__":
    unittest.main()
