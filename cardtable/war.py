"""The card game War, played against the computer."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable, Iterator
from typing import TextIO

from .cards import StandardPlayingCard, card_back
from .deck import Pile, StandardDeck

_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_MANUAL = "start"
_AUTO = "auto"


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _make_stdin_reader() -> Callable[[], str]:
    tokens: Iterator[str] | None = None

    def read() -> str:
        nonlocal tokens
        if tokens is None:
            tokens = _stdin_tokens()
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError("no more input") from None

    return read


class War:
    """A game of War; the opponent's hand is ``opponent``, yours is ``player``.

    The top of each hand is the end of its list.  ``input_func`` returns the
    next whitespace-free word typed by the player and raises ``EOFError``
    when input runs out.
    """

    def __init__(
        self,
        input_func: Callable[[], str] | None = None,
        output: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.input_func = input_func if input_func is not None else _make_stdin_reader()
        self.output = output if output is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()
        self.opponent: Pile = []
        self.player: Pile = []
        self.game = ""

    def _write(self, text: str) -> None:
        self.output.write(text)

    def deal(self) -> None:
        """Shuffle a fresh deck and split it evenly between the hands."""
        deck = StandardDeck(rng=self.rng)
        deck.randomize()
        self.opponent, self.player = deck.split(26)

    def introduction(self) -> str:
        """Greet the player and return ``"start"`` or ``"auto"``."""
        self._write("This is the card game WAR!\n")
        while True:
            self._write(
                'Type "start" to start the game or "auto" to '
                "automatically play.\n"
            )
            answer = self.input_func()
            if answer in (_MANUAL, _AUTO):
                return answer

    def _move_cards(self, cards: Pile, winner: Pile) -> None:
        """Shuffle ``cards`` and slide them under the winner's hand."""
        self.rng.shuffle(cards)
        winner[:0] = cards
        cards.clear()

    def _go_to_war(self, stack: Pile) -> None:
        for _ in range(3):
            if len(self.opponent) > 1 and len(self.player) > 1:
                stack.append(self.opponent.pop())
                stack.append(self.player.pop())

    def make_backs(self, amount: int) -> list[str]:
        """Return the lines of ``amount`` overlapping card backs."""
        return [line[5:] * amount for line in card_back()]

    def render(self, tie: bool) -> str:
        """Return the table showing both top cards and the hand sizes."""
        opponent_card = self.opponent[-1].graphic
        player_card = self.player[-1].graphic

        if tie:
            amount = min(len(self.opponent), len(self.player), 3)
            backs = self.make_backs(amount)
        else:
            backs = [""] * len(card_back())

        def pad(index: int) -> str:
            return backs[index] if index < len(backs) else backs[-1]

        lines: list[str] = []
        for index, row in enumerate(opponent_card[:-1]):
            lines.append(row + pad(index))
        lines.append(
            f"{opponent_card[-1]}{backs[-1]}   Opponent's Deck: "
            f"{len(self.opponent)}"
        )
        for index, row in enumerate(player_card[:-1]):
            lines.append(row + pad(index))
        lines.append(
            f"{player_card[-1]}{backs[-1]}   Player's Deck: {len(self.player)}"
        )
        return "\n".join(lines) + "\n\n"

    @staticmethod
    def _player_wins(opponent: StandardPlayingCard, player: StandardPlayingCard) -> bool:
        return (opponent.rank < player.rank and opponent.rank != 1) or (
            player.rank == 1 and opponent.rank != 1
        )

    @staticmethod
    def _opponent_wins(opponent: StandardPlayingCard, player: StandardPlayingCard) -> bool:
        return opponent.rank > player.rank or (
            opponent.rank == 1 and player.rank != 1
        )

    def play_round(self) -> None:
        """Play one round, going to war as long as the top cards tie."""
        tie = False
        stack: Pile = []
        while True:
            if not self.opponent or not self.player:
                self._write("The game ended on a WAR!\n")
                return

            self._write(_CLEAR_SCREEN)
            self._write(self.render(tie))

            opponent_card = self.opponent[-1]
            player_card = self.player[-1]

            if self._player_wins(opponent_card, player_card):
                self._write("You won this round!\n\n")
                stack.append(self.opponent.pop())
                stack.append(self.player.pop())
                self._move_cards(stack, self.player)
                return
            if self._opponent_wins(opponent_card, player_card):
                self._write("You opponent won this round!\n\n")
                stack.append(self.opponent.pop())
                stack.append(self.player.pop())
                self._move_cards(stack, self.opponent)
                return

            self._write("Let's go to war!!\n\n")
            if self.game == _MANUAL:
                self.input_func()
                self._write("\n\n")
            stack.append(self.opponent.pop())
            stack.append(self.player.pop())
            self._go_to_war(stack)
            tie = True

    def play_user_game(self) -> None:
        """Play rounds on request until a hand runs out or the player stops."""
        while self.opponent and self.player:
            while True:
                self._write('Enter whether to "draw" a card or "stop" the game: ')
                answer = self.input_func()
                self._write("\n\n")
                if answer in ("draw", "d", "stop", "s"):
                    break
            if answer in ("stop", "s"):
                return
            self.play_round()

    def play_auto_game(self, limit: int = 1000) -> None:
        """Play up to ``limit`` rounds without asking the player."""
        rounds = 0
        while self.opponent and self.player and rounds < limit:
            self.play_round()
            rounds += 1

    def play_game(self) -> None:
        """Introduce, deal, play and announce the result."""
        self.game = self.introduction()
        self.deal()

        if self.game == _MANUAL:
            self.play_user_game()
        elif self.game == _AUTO:
            self.play_auto_game()

        if not self.opponent:
            self._write("YOU WON!!\n")
        if not self.player:
            self._write("YOU LOST!!\n")
        self._write("Thanks for playing!\n")


def main(argv: list[str] | None = None) -> int:
    """Play War on the terminal."""
    try:
        War().play_game()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
        return 1
    return 0