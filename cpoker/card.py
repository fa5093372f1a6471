"""Playing cards, a deck of them and evaluation of five-card poker hands."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator

HAND_SIZE = 5
ACE_HIGH = 14

_ROYAL_NUMBERS = frozenset({1, 10, 11, 12, 13})
_CARD_NAMES = {1: "A", 11: "J", 12: "Q", 13: "K"}
_RANK_NAMES = {14: "A", 13: "K", 12: "Q", 11: "J"}


class EmptyDeckError(IndexError):
    """Raised when more cards are drawn than the deck holds."""


class Suit(IntEnum):
    HEART = 0
    DIAMOND = 1
    CLUB = 2
    SPADE = 3

    @property
    def symbol(self) -> str:
        """One-letter name of the suit."""
        return self.name[0]


class Hand(IntEnum):
    NO_PAIR = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        """Human-readable name of the hand."""
        return self.name.replace("_", " ").capitalize()


@dataclass(frozen=True)
class Card:
    """A playing card; numbers run from 1 (ace) to 13 (king)."""

    suit: Suit
    number: int

    def __post_init__(self) -> None:
        if not isinstance(self.suit, Suit):
            raise ValueError(f"invalid suit: {self.suit!r}")
        if not 1 <= self.number <= 13:
            raise ValueError(f"invalid number: {self.number!r}")

    def sort_key(self) -> int:
        """Key ordering cards by suit first, then by number."""
        return (int(self.suit) << 4) | self.number

    def __str__(self) -> str:
        name = _CARD_NAMES.get(self.number, str(self.number))
        return f"{self.suit.symbol}:{name}"


@dataclass(frozen=True)
class Status:
    """The category of a hand and the ranks that decide it."""

    hand: Hand
    ranks: tuple[int, ...] = ()

    def __str__(self) -> str:
        return format_status(self)


class Deck:
    """A 52-card deck; iteration starts at the top card."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards = [Card(suit, number) for suit in Suit for number in range(1, 14)]

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def shuffle(self, n: int) -> None:
        """Move a randomly chosen card to the top, n times."""
        if not self._cards:
            return
        for _ in range(n):
            card = self._cards.pop(self._rng.randrange(len(self._cards)))
            self._cards.insert(0, card)

    def draw(self) -> Card:
        """Take the top card off the deck."""
        if not self._cards:
            raise EmptyDeckError("the deck is empty")
        return self._cards.pop(0)

    def draw_hand(self) -> list[Card]:
        """Take a five-card hand off the top of the deck."""
        if len(self._cards) < HAND_SIZE:
            raise EmptyDeckError(
                f"the deck holds {len(self._cards)} cards, a hand needs {HAND_SIZE}"
            )
        return [self.draw() for _ in range(HAND_SIZE)]


def sort_cards(cards: Iterable[Card]) -> list[Card]:
    """Return the cards ordered by suit, then by number."""
    return sorted(cards, key=Card.sort_key)


def _ace_high(number: int) -> int:
    return ACE_HIGH if number == 1 else number


def evaluate(hand: Iterable[Card]) -> Status:
    """Classify a hand of five distinct cards."""
    cards = list(hand)
    if len(cards) != HAND_SIZE:
        raise ValueError(f"a hand holds {HAND_SIZE} cards, got {len(cards)}")
    if len(set(cards)) != HAND_SIZE:
        raise ValueError("a hand cannot hold the same card twice")

    numbers = Counter(card.number for card in cards)
    suits = Counter(card.suit for card in cards)
    low, high = min(numbers), max(numbers)

    category = Hand.NO_PAIR
    ranks: list[int] = []
    pairs = 0
    for number in sorted(numbers):
        count = numbers[number]
        if count == 2:
            pairs += 1
            ranks.append(_ace_high(number))
        elif count == 3:
            category = Hand.THREE_OF_A_KIND
            ranks.append(_ace_high(number))
        elif count == 4:
            category = Hand.FOUR_OF_A_KIND
            ranks.append(_ace_high(number))

    if pairs == 1:
        category = (
            Hand.FULL_HOUSE if category is Hand.THREE_OF_A_KIND else Hand.ONE_PAIR
        )
    elif pairs == 2:
        category = Hand.TWO_PAIR
        ranks.sort(reverse=True)

    royal = set(numbers) == _ROYAL_NUMBERS
    if (len(numbers) == HAND_SIZE and high - low == HAND_SIZE - 1) or royal:
        category = Hand.STRAIGHT
        ranks = [ACE_HIGH if royal else high]

    if len(suits) == 1:
        if category is Hand.STRAIGHT:
            if royal:
                category, ranks = Hand.ROYAL_FLUSH, [ACE_HIGH]
            else:
                category, ranks = Hand.STRAIGHT_FLUSH, [high]
        else:
            category, ranks = Hand.FLUSH, [ACE_HIGH if low == 1 else high]

    return Status(category, tuple(ranks))


def format_cards(cards: Iterable[Card]) -> str:
    """Cards as space-separated short names."""
    return " ".join(str(card) for card in cards)


def format_status(status: Status) -> str:
    """The hand's name followed by its deciding ranks."""
    text = status.hand.label
    if status.hand is not Hand.NO_PAIR and status.ranks:
        ranks = ",".join(_RANK_NAMES.get(rank, str(rank)) for rank in status.ranks)
        text += f" (rank: {ranks})"
    return text