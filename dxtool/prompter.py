"""Interactive selection prompts on a text terminal."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_SEPARATORS = re.compile(r"[,\s]+")


class Prompter:
    """Asks the user to choose among options, reading answers line by line.

    An answer is either an option's number or its text. An empty answer
    to a single choice selects the highlighted option.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("no answer given")
        return line.strip()

    def _show(self, question: str, options: list[str], highlighted: int | None) -> None:
        self.stdout.write(f"? {question}\n")
        for number, option in enumerate(options, start=1):
            marker = ">" if highlighted == number - 1 else " "
            self.stdout.write(f"{marker} {number}) {option}\n")

    @staticmethod
    def _pick(answer: str, options: list[str]) -> str | None:
        if answer.isdigit():
            index = int(answer)
            if 1 <= index <= len(options):
                return options[index - 1]
        if answer in options:
            return answer
        return None

    def _select(self, question: str, options: list[str], highlighted: int) -> str:
        if not options:
            raise ValueError("please provide options to select from")
        while True:
            self._show(question, options, highlighted)
            answer = self._ask("Choose an option: ")
            if not answer:
                return options[highlighted]
            choice = self._pick(answer, options)
            if choice is not None:
                return choice
            self.stdout.write(f"Sorry, your reply was invalid: {answer!r} is not an option\n")

    def select_from_options(self, question: str, options: list[str]) -> str:
        """Return one option chosen by the user."""
        return self._select(question, list(options), 0)

    def select_multiple_from_options(self, question: str, options: list[str]) -> list[str]:
        """Return the options chosen by the user, in option order; at least one is required."""
        options = list(options)
        if not options:
            raise ValueError("please provide options to select from")
        while True:
            self._show(question, options, None)
            answer = self._ask("Choose options (separated by commas): ")
            tokens = [t for t in _SEPARATORS.split(answer) if t]
            if not tokens:
                self.stdout.write("Sorry, your reply was invalid: Value is required\n")
                continue
            picks = [self._pick(token, options) for token in tokens]
            if None in picks:
                self.stdout.write(f"Sorry, your reply was invalid: {answer!r}\n")
                continue
            chosen = set(picks)
            return [option for option in options if option in chosen]

    def select_from_options_with_default(
        self, question: str, default_value: str, options: list[str]
    ) -> str:
        """Return one option chosen by the user; an empty answer picks the default."""
        options = list(options)
        highlighted = options.index(default_value) if default_value in options else 0
        return self._select(question, options, highlighted)