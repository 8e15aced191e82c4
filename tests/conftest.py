"""Shared fixtures and test doubles."""

import random
from collections import deque
from typing import Iterable, List, Optional, Sequence

import pytest

from holdem_sim.collaborators import InputSource, RandomSource, RecordingOutput
from holdem_sim.models.card import Card
from holdem_sim.models.player import Player
from holdem_sim.models.simulation import RoundState
from holdem_sim.agents.base import SeatAgent
from holdem_sim.agents.decision import Decision, DecisionType


def cards(labels: str) -> List[Card]:
    """Parse space separated card labels: cards("Ah Kd 10s")."""
    return [Card.parse(label) for label in labels.split()]


class ScriptedRandom(RandomSource):
    """Deterministic RandomSource.

    ``uniform`` and ``pick`` return queued values, falling back to 0.99 (never
    bluff) and 0. ``shuffle`` moves ``top`` cards to the front of the deck in
    the given order and seeds a shuffle of the rest, or leaves it unshuffled.
    """

    def __init__(self, uniforms: Iterable[float] = (), picks: Iterable[int] = (),
                 top: Sequence[Card] = (), seed: Optional[int] = None):
        self.uniforms = deque(uniforms)
        self.picks = deque(picks)
        self.top = list(top)
        self._random = random.Random(seed) if seed is not None else None
        self.uniform_calls = 0

    def shuffle(self, seq) -> None:
        rest = list(seq)
        for card in self.top:
            rest.remove(card)
        if self._random is not None:
            self._random.shuffle(rest)
        seq[:] = self.top + rest

    def uniform(self) -> float:
        self.uniform_calls += 1
        return self.uniforms.popleft() if self.uniforms else 0.99

    def pick(self, n: int) -> int:
        value = self.picks.popleft() if self.picks else 0
        assert 0 <= value < n
        return value


class ScriptedInput(InputSource):
    """Answers prompts from a queue."""

    def __init__(self, answers: Iterable = ()):
        self.answers = deque(answers)
        self.asked: List[str] = []

    def prompt_choice(self, option_a: str, option_b: str) -> str:
        self.asked.append(f"{option_a}/{option_b}")
        answer = str(self.answers.popleft())
        assert answer.upper() in (option_a.upper(), option_b.upper())
        return answer

    def prompt_integer(self, max_inclusive: int) -> int:
        self.asked.append(f"0-{max_inclusive}")
        answer = int(self.answers.popleft())
        assert 0 <= answer <= max_inclusive
        return answer


class ScriptedAgent(SeatAgent):
    """Seat agent that plays queued decisions and calls once they run out."""

    def __init__(self, decisions: Iterable[Decision] = ()):
        self.decisions = deque(decisions)
        self.seen: List[tuple] = []

    def decide(self, player: Player, call_cost: int, can_raise: bool,
               state: RoundState) -> Decision:
        self.seen.append((player.name, call_cost, can_raise, state.street))
        if self.decisions:
            return self.decisions.popleft()
        return Decision(DecisionType.CALL)


def raise_by(amount: int) -> Decision:
    return Decision(DecisionType.RAISE, amount)


CALL = Decision(DecisionType.CALL)
FOLD = Decision(DecisionType.FOLD)


@pytest.fixture
def output():
    return RecordingOutput()
