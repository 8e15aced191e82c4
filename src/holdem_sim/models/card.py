"""Card, Rank, and Suit models."""

from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        mapping = {
            "c": cls.CLUBS, "Clubs": cls.CLUBS, "♣": cls.CLUBS,
            "d": cls.DIAMONDS, "Diamonds": cls.DIAMONDS, "♦": cls.DIAMONDS,
            "h": cls.HEARTS, "Hearts": cls.HEARTS, "♥": cls.HEARTS,
            "s": cls.SPADES, "Spades": cls.SPADES, "♠": cls.SPADES,
        }
        if s in mapping:
            return mapping[s]
        raise ValueError(f"Unknown suit: {s}")

    @property
    def symbol(self) -> str:
        return "♣♦♥♠"[self.value]

    @property
    def letter(self) -> str:
        return "cdhs"[self.value]


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def char(self) -> str:
        return "23456789TJQKA"[self.value - 2]

    @property
    def display_name(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return self.name.capitalize()

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        if c == "10":
            return cls.TEN
        for r in cls:
            if r.char == c.upper():
                return r
        raise ValueError(f"Unknown rank: {c}")


@dataclass(frozen=True)
class Card:
    """A single playing card. Two cards with the same rank and suit are equal."""

    rank: int
    suit: int

    def __post_init__(self) -> None:
        if not Rank.TWO <= self.rank <= Rank.ACE:
            raise ValueError(f"Invalid rank: {self.rank}")
        if not Suit.CLUBS <= self.suit <= Suit.SPADES:
            raise ValueError(f"Invalid suit: {self.suit}")

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '10c', '2♣'."""
        s = s.strip()
        if len(s) == 2:
            return cls(Rank.from_char(s[0]), Suit.from_symbol(s[1]))
        elif len(s) == 3 and s[:2] == "10":
            return cls(Rank.TEN, Suit.from_symbol(s[2]))
        raise ValueError(f"Cannot parse card: {s}")

    @property
    def long_name(self) -> str:
        """Return the spoken name, e.g. 'Jack of Hearts'."""
        return f"{Rank(self.rank).display_name} of {Suit(self.suit).name.capitalize()}"

    def __repr__(self) -> str:
        return f"{Rank(self.rank).char}{Suit(self.suit).letter}"

    def __str__(self) -> str:
        return f"{Rank(self.rank).char}{Suit(self.suit).symbol}"
