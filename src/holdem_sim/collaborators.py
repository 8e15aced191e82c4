"""Pluggable input, output and randomness for the simulator.

The betting engine and session only talk to these interfaces, so a game can
run against the console, a scripted test double or nothing at all.
"""

import random
from abc import ABC, abstractmethod
from typing import List, MutableSequence, Optional


class InputSource(ABC):
    """Answers the questions asked of the human player."""

    @abstractmethod
    def prompt_choice(self, option_a: str, option_b: str) -> str:
        """Ask until the answer is one of two options (case-insensitive).

        Returns:
            The chosen option, as given in the arguments.
        """

    @abstractmethod
    def prompt_integer(self, max_inclusive: int) -> int:
        """Ask until the answer is an integer between 0 and ``max_inclusive``."""


class OutputSink(ABC):
    """Receives narration for the human player."""

    @abstractmethod
    def display(self, text: str) -> None:
        """Show one line of narration."""


class RandomSource(ABC):
    """Source of every random choice made during a game."""

    @abstractmethod
    def shuffle(self, seq: MutableSequence) -> None:
        """Shuffle a sequence in place."""

    @abstractmethod
    def uniform(self) -> float:
        """Return a float in [0, 1)."""

    @abstractmethod
    def pick(self, n: int) -> int:
        """Return an int in [0, n)."""


class StdRandomSource(RandomSource):
    """RandomSource backed by ``random.Random``."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def shuffle(self, seq: MutableSequence) -> None:
        self._random.shuffle(seq)

    def uniform(self) -> float:
        return self._random.random()

    def pick(self, n: int) -> int:
        if n < 1:
            raise ValueError(f"Cannot pick from {n} options")
        return self._random.randrange(n)


class NullOutput(OutputSink):
    """Discards all narration."""

    def display(self, text: str) -> None:
        pass


class RecordingOutput(OutputSink):
    """Collects narration lines in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def display(self, text: str) -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def __contains__(self, fragment: str) -> bool:
        return any(fragment in line for line in self.lines)
