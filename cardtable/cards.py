"""Standard playing cards and their text graphics."""

from __future__ import annotations

SUITS: tuple[str, ...] = ("spade", "heart", "club", "diamond")
RANKS: tuple[int, ...] = tuple(range(1, 14))

UNKNOWN_GRAPHIC: tuple[str, ...] = ("Unknown",)

_SUIT_SYMBOLS = {"spade": "♠", "heart": "♥", "club": "♣", "diamond": "♦"}
_RANK_LABELS = {1: "A", 11: "J", 12: "Q", 13: "K"}
_RED_SUITS = frozenset({"heart", "diamond"})

_BORDER = "+-----------+"
_INNER_WIDTH = 11

_BACK: tuple[str, ...] = (
    _BORDER,
    "|:::::::::::|",
    "|:+-------+:|",
    "|:|:::::::|:|",
    "|:|:::::::|:|",
    "|:|:::::::|:|",
    "|:+-------+:|",
    "|:::::::::::|",
    _BORDER,
)


def _row(content: str = "", align: str = "<") -> str:
    return f"|{content:{align}{_INNER_WIDTH}}|"


def render_card(rank: int, suit: str) -> list[str]:
    """Return the nine-line face graphic of a card.

    Raises ``ValueError`` for a rank outside 1..13 or an unknown suit.
    """
    if rank not in RANKS or suit not in SUITS:
        raise ValueError(f"invalid rank or suit: {rank!r} of {suit!r}")
    label = _RANK_LABELS.get(rank, str(rank))
    symbol = _SUIT_SYMBOLS[suit]
    return [
        _BORDER,
        _row(label),
        _row(symbol),
        _row(),
        _row(symbol, "^"),
        _row(),
        _row(symbol, ">"),
        _row(label, ">"),
        _BORDER,
    ]


def card_back() -> list[str]:
    """Return the nine-line graphic of the back of a card."""
    return list(_BACK)


class StandardPlayingCard:
    """A card with a fixed rank (1 to 13) and suit."""

    __slots__ = ("_rank", "_suit", "_graphic")

    def __init__(self, rank: int, suit: str) -> None:
        self._rank = rank
        self._suit = suit
        try:
            self._graphic: tuple[str, ...] = tuple(render_card(rank, suit))
        except ValueError:
            self._graphic = UNKNOWN_GRAPHIC

    @property
    def rank(self) -> int:
        return self._rank

    @property
    def suit(self) -> str:
        return self._suit

    @property
    def color(self) -> str:
        """``"red"`` for hearts and diamonds, ``"black"`` otherwise."""
        return "red" if self._suit in _RED_SUITS else "black"

    @property
    def graphic(self) -> list[str]:
        """The lines of the card's face, or ``["Unknown"]`` if invalid."""
        return list(self._graphic)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StandardPlayingCard):
            return NotImplemented
        return self._rank == other._rank and self._suit == other._suit

    def __hash__(self) -> int:
        return hash((self._rank, self._suit))

    def _repr_fields(self) -> str:
        return f"rank={self._rank!r}, suit={self._suit!r}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._repr_fields()})"


class PolarStandardPlayingCard(StandardPlayingCard):
    """A standard card that can lie face up or face down."""

    __slots__ = ("face_up",)

    def __init__(self, rank: int, suit: str, face_up: bool = False) -> None:
        super().__init__(rank, suit)
        self.face_up = face_up

    def flip(self) -> None:
        """Turn the card over."""
        self.face_up = not self.face_up

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PolarStandardPlayingCard):
            return super().__eq__(other) and self.face_up == other.face_up
        if isinstance(other, StandardPlayingCard):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._rank, self._suit, self.face_up))

    def _repr_fields(self) -> str:
        return f"{super()._repr_fields()}, face_up={self.face_up!r}"