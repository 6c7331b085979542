"""
Card model and two-character notation.

Conventions:
  - rank symbol first, suit symbol second: "4C", "TS", "AH"
  - rank symbols: 2 3 4 5 6 7 8 9 T J Q K A
  - suit symbols: C D H S

Both enums are IntEnums so ranks compare numerically. Declaration order is the
canonical order; DECK enumerates suits first, then ranks, and the dataclass
ordering of Card (suit, then rank) matches a card's position in DECK.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Tuple

from .errors import CardParseError


class Suit(IntEnum):
    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3

    @property
    def symbol(self) -> str:
        return "CDHS"[self.value]


class Rank(IntEnum):
    R2 = 2
    R3 = 3
    R4 = 4
    R5 = 5
    R6 = 6
    R7 = 7
    R8 = 8
    R9 = 9
    R10 = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        return "23456789TJQKA"[self.value - 2]


_SUIT_BY_SYMBOL = {s.symbol: s for s in Suit}
_RANK_BY_SYMBOL = {r.symbol: r for r in Rank}


@dataclass(frozen=True, order=True)
class Card:
    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return self.rank.symbol + self.suit.symbol

    def __repr__(self) -> str:
        return f"Card({self})"


# Full deck in canonical enumeration order (clubs 2..A, diamonds 2..A, ...)
DECK: Tuple[Card, ...] = tuple(Card(s, r) for s in Suit for r in Rank)


def parse_card(token: str) -> Card:
    """
    Parse one card token such as "4C" or "th" (case-insensitive).

    Raises:
      CardParseError if the token is not exactly a rank symbol followed by a
      suit symbol.
    """
    t = token.strip().upper()
    if len(t) != 2 or t[0] not in _RANK_BY_SYMBOL or t[1] not in _SUIT_BY_SYMBOL:
        raise CardParseError(f"Invalid card: {token!r}")
    return Card(_SUIT_BY_SYMBOL[t[1]], _RANK_BY_SYMBOL[t[0]])


def parse_cards(text: str) -> List[Card]:
    """
    Parse whitespace-separated card tokens, keeping input order and any
    duplicates. Use engine.hands.make_hand (after validation) to get a Hand.
    """
    return [parse_card(tok) for tok in text.split()]


def format_hand(cards: Iterable[Card]) -> str:
    """Render cards as space-separated notation, e.g. "2D 6S"."""
    return " ".join(str(c) for c in cards)
