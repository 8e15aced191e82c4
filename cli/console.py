"""Console input and output for interactive games."""

import time

import typer
from rich.console import Console

from holdem_sim import config
from holdem_sim.collaborators import InputSource, OutputSink


class ConsoleInput(InputSource):
    """Reads the human player's answers from the terminal, retrying bad input."""

    def __init__(self, console: Console):
        self.console = console

    def prompt_choice(self, option_a: str, option_b: str) -> str:
        while True:
            response = typer.prompt(f"[{option_a}/{option_b}]").strip()
            if response.upper() == option_a.upper():
                return option_a
            if response.upper() == option_b.upper():
                return option_b
            self.console.print(f"You didn't pick {option_a} or {option_b}! Please try again: ",
                               markup=False)

    def prompt_integer(self, max_inclusive: int) -> int:
        while True:
            response = typer.prompt(f"[0-{max_inclusive}]").strip()
            try:
                value = int(response)
            except ValueError:
                value = -1
            if 0 <= value <= max_inclusive:
                return value
            self.console.print(f"Please type a number less than or equal to {max_inclusive}: ",
                               markup=False)


class ConsoleOutput(OutputSink):
    """Prints narration, optionally typing it out one character at a time."""

    def __init__(
        self,
        console: Console,
        char_delay_ms: int = config.CHAR_DELAY_MS,
        punctuation_delay_ms: int = config.PUNCTUATION_DELAY_MS,
        new_line_delay_ms: int = config.NEW_LINE_DELAY_MS,
    ):
        self.console = console
        self.char_delay = char_delay_ms / 1000
        self.punctuation_delay = punctuation_delay_ms / 1000
        self.new_line_delay = new_line_delay_ms / 1000

    @property
    def paced(self) -> bool:
        return bool(self.char_delay or self.punctuation_delay)

    def display(self, text: str) -> None:
        if not self.paced:
            self.console.print(text, markup=False, highlight=False)
        else:
            for ch in text:
                self.console.print(ch, end="", markup=False, highlight=False)
                # Spaces move at the same speed as letters
                time.sleep(self.char_delay if ch.isalpha() or ch == " " else self.punctuation_delay)
            self.console.print()

        if self.new_line_delay:
            time.sleep(self.new_line_delay)
