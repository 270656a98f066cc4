# cardtable

Standard 52-card playing cards and decks, with a game of War that you play
against the computer in the terminal.

## Install

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Playing War

    cardtable-war

Type `start` to play by hand, or `auto` to let the game play itself for up
to 1000 rounds.

When you play by hand, each turn you enter `draw` (or `d`) to turn over the
top card of both hands, or `stop` (or `s`) to end the game. The higher card
wins both cards, and aces rank high. When the two cards have the same rank
the game goes to war: up to three more cards from each hand go into the
pot, and the next pair of cards decides who takes all of it. During a war
in a hand-played game, type any word to carry on.

The game ends when one hand is empty, when you stop, or, in an automatic
game, after 1000 rounds. If input runs out, `cardtable-war` exits with
status 1.

## Using the library

```python
import random

from cardtable.cards import StandardPlayingCard, PolarStandardPlayingCard
from cardtable.deck import StandardDeck

card = StandardPlayingCard(11, "spade")
print(card.color)                 # "black"
print("\n".join(card.graphic))    # text graphic of the jack of spades

polar = PolarStandardPlayingCard(1, "heart", face_up=False)
polar.flip()                      # now face up

deck = StandardDeck(rng=random.Random(7))   # a fresh, ordered 52-card deck
deck.cut(21)                      # move the bottom 21 cards to the top
deck.riffle(34, "top", "random")  # an uneven riffle shuffle, top half first
deck.randomize()                  # a full shuffle
top = deck.draw_one()             # the top card, or None when empty
hand = deck.draw_multiple(5)      # up to five cards, topmost first
```

### `cardtable.cards`

- `StandardPlayingCard(rank, suit)`: ranks run from 1 (ace) to 13 (king);
  suits are `"spade"`, `"heart"`, `"club"` and `"diamond"`. The card has
  `rank`, `suit`, `color` (`"red"` or `"black"`) and `graphic`, a list of
  nine text lines. A card with an invalid rank or suit has the graphic
  `["Unknown"]`.
- `PolarStandardPlayingCard(rank, suit, face_up=False)` adds a `face_up`
  flag and `flip()`. Two polar cards are equal only if they also lie the
  same way up.
- `render_card(rank, suit)` returns a card's face graphic and raises
  `ValueError` for an invalid card; `card_back()` returns the graphic of a
  card's back.

### `cardtable.deck`

`StandardDeck(cards=None, card_type=StandardPlayingCard, rng=None)` holds
its cards in `cards`, bottom first; the top of the deck is the end of the
list. With no `cards` it builds a fresh ordered deck of `card_type`, which
must be `StandardPlayingCard` or `PolarStandardPlayingCard`. Decks support
`len()`, iteration and `copy()`.

- `split(mid)` empties the deck into a bottom half of `mid` cards and a top
  half holding the rest.
- `put_halves_together(halves, kind, down_first="random")` joins two halves
  as a `"cut"`, a `"perfect"` riffle or a `"random"` riffle; `down_first` is
  `"bottom"`, `"top"` or `"random"`.
- `cut(mid=26)` cuts the deck; a split point outside the deck cuts it in
  half.
- `riffle(mid=26, down_first="bottom", kind="perfect")` riffle shuffles; a
  negative `mid` picks a random split point.

### `cardtable.war`

`War(input_func=None, output=None, rng=None)` runs the game. By default it
reads words from standard input and writes to standard output; pass your own
`input_func`, `output` stream and `random.Random` to drive it from code.
`play_game()` plays a whole game, and `play_round()`, `play_user_game()` and
`play_auto_game(limit=1000)` play parts of one.

### `cardtable.util`

`parse_count(text)` reads the leading unsigned number of a piece of text and
raises `ValueError` if there is none. `utf8_prefix(data, length)` returns the
first `length` characters of a string, or of UTF-8 bytes without splitting a
character.

## What it does not do

War is the only game with a command. The cards and decks can serve other
games, but the package has no solitaire or other game built on them.