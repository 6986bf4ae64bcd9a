"""Tests for the message-bar line prompt."""

from __future__ import annotations

import unittest

from pykilo.input import keys
from pykilo.prompt import prompt


class _Script:
    """Feeds a fixed key sequence and records what the prompt displays."""

    def __init__(self, key_sequence: list[str]) -> None:
        self._keys = list(key_sequence)
        self.shown: list[str] = []

    def read_key(self) -> str:
        return self._keys.pop(0) if self._keys else ""

    def show(self, message: str) -> None:
        self.shown.append(message)


class PromptTests(unittest.TestCase):
    def test_enter_returns_typed_text_and_clears_message(self) -> None:
        script = _Script(["a", "b", keys.ENTER])
        result = prompt("Name: {}", read_key=script.read_key, show=script.show)

        self.assertEqual(result, "ab")
        self.assertEqual(script.shown, ["Name: ", "Name: a", "Name: ab", ""])

    def test_escape_cancels(self) -> None:
        script = _Script(["a", keys.ESC])
        self.assertEqual(prompt("{}", read_key=script.read_key, show=script.show), "")
        self.assertEqual(script.shown[-1], "")

    def test_enter_on_empty_input_cancels(self) -> None:
        script = _Script([keys.ENTER])
        self.assertEqual(prompt("{}", read_key=script.read_key, show=script.show), "")

    def test_end_of_input_cancels(self) -> None:
        script = _Script(["x"])
        self.assertEqual(prompt("{}", read_key=script.read_key, show=script.show), "")

    def test_backspace_edits_and_tokens_are_ignored(self) -> None:
        script = _Script(["a", "b", keys.BACKSPACE, keys.UP, keys.BACKSPACE, keys.BACKSPACE, "c", keys.ENTER])
        self.assertEqual(prompt("{}", read_key=script.read_key, show=script.show), "c")

    def test_tab_is_kept_in_input(self) -> None:
        script = _Script(["a", keys.TAB, "b", keys.ENTER])
        self.assertEqual(prompt("{}", read_key=script.read_key, show=script.show), "a\tb")

    def test_callback_sees_every_non_terminating_key(self) -> None:
        seen: list[tuple[str, str]] = []
        script = _Script(["f", keys.DOWN, "o", keys.ENTER])

        prompt(
            "Search: {}",
            read_key=script.read_key,
            show=script.show,
            callback=lambda text, key: seen.append((text, key)),
        )

        self.assertEqual(seen, [("f", "f"), ("f", keys.DOWN), ("fo", "o")])


if __name__ == "__main__":
    unittest.main()
