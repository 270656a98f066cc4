"""A deck of standard playing cards with the usual shuffles."""

from __future__ import annotations

import copy as _copy
import random
from collections import deque
from collections.abc import Iterable, Iterator

from .cards import RANKS, SUITS, PolarStandardPlayingCard, StandardPlayingCard

Pile = list[StandardPlayingCard]
SplitDeck = tuple[Pile, Pile]

_CARD_TYPES = (StandardPlayingCard, PolarStandardPlayingCard)


class StandardDeck:
    """An ordered pile of cards; the top of the deck is the end of ``cards``."""

    def __init__(
        self,
        cards: Iterable[StandardPlayingCard] | None = None,
        card_type: type[StandardPlayingCard] = StandardPlayingCard,
        rng: random.Random | None = None,
    ) -> None:
        if card_type not in _CARD_TYPES:
            raise TypeError(
                "StandardDeck can only hold StandardPlayingCard or "
                "PolarStandardPlayingCard"
            )
        self.card_type = card_type
        self.rng = rng if rng is not None else random.Random()
        if cards is None:
            self.cards: Pile = [
                card_type(rank, suit) for suit in SUITS for rank in RANKS
            ]
        else:
            self.cards = list(cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[StandardPlayingCard]:
        """Iterate from the bottom of the deck to the top."""
        return iter(self.cards)

    def copy(self) -> StandardDeck:
        """Return a new deck holding copies of every card."""
        return StandardDeck(
            (_copy.copy(card) for card in self.cards),
            card_type=self.card_type,
            rng=self.rng,
        )

    def draw_one(self) -> StandardPlayingCard | None:
        """Take the top card, or return ``None`` if the deck is empty."""
        if not self.cards:
            return None
        return self.cards.pop()

    def draw_multiple(self, amount: int) -> Pile:
        """Take up to ``amount`` cards from the top, topmost first."""
        amount = max(0, min(amount, len(self.cards)))
        return [self.cards.pop() for _ in range(amount)]

    def split(self, mid: int) -> SplitDeck:
        """Split into (bottom ``mid`` cards, the rest) and empty the deck."""
        if not 0 <= mid <= len(self.cards):
            raise ValueError(
                f"split point {mid} outside 0..{len(self.cards)}"
            )
        bottom, top = self.cards[:mid], self.cards[mid:]
        self.cards = []
        return bottom, top

    def put_halves_together(
        self,
        halves: SplitDeck,
        kind: str,
        down_first: str = "random",
    ) -> Pile:
        """Merge two halves into one pile.

        ``kind`` is ``"cut"`` (top half goes under the bottom half),
        ``"perfect"`` (cards alternate) or ``"random"`` (each card falls
        from a randomly chosen half).  ``down_first`` is ``"bottom"``,
        ``"top"`` or ``"random"`` and picks which half starts.
        """
        first, second = deque(halves[0]), deque(halves[1])
        total = len(first) + len(second)

        if kind == "cut":
            return list(second) + list(first)

        start = 0
        if down_first == "top" or (
            down_first == "random" and self.rng.randint(0, 1) == 1
        ):
            start = 1

        out: Pile = []
        for i in range(start, total + start):
            take_first = (
                (kind == "perfect" and i % 2 == 0)
                or (kind == "random" and self.rng.randint(0, 1) == 0)
                or (down_first == "bottom" and i == 0)
                or not second
            )
            if take_first and first:
                out.append(first.popleft())
            elif second:
                out.append(second.popleft())
        return out

    def cut(self, mid: int = 26) -> None:
        """Cut the deck, moving the bottom ``mid`` cards to the top.

        A split point outside the deck cuts it in half.
        """
        if mid < 0 or mid >= len(self.cards):
            mid = len(self.cards) // 2
        self.cards = self.put_halves_together(self.split(mid), "cut")

    def riffle(
        self,
        mid: int = 26,
        down_first: str = "bottom",
        kind: str = "perfect",
    ) -> None:
        """Riffle shuffle after splitting off the bottom ``mid`` cards.

        A negative ``mid`` picks a random split point.
        """
        if mid < 0:
            mid = self.rng.randint(0, min(51, len(self.cards)))
        if down_first == "bottom" or (
            down_first == "random" and self.rng.randint(0, 1) == 0
        ):
            side = "bottom"
        else:
            side = "top"
        self.cards = self.put_halves_together(self.split(mid), kind, side)

    def randomize(self) -> None:
        """Shuffle the deck uniformly."""
        self.rng.shuffle(self.cards)