import copy

import pytest

from cardtable.cards import (
    RANKS,
    SUITS,
    PolarStandardPlayingCard,
    StandardPlayingCard,
    card_back,
    render_card,
)
from cardtable.util import utf8_prefix


def test_jack_of_spades_construction():
    card1 = StandardPlayingCard(11, "spade")
    assert card1.rank == 11
    assert card1.suit == "spade"
    assert card1.graphic == render_card(11, "spade")


def test_copy_of_card_is_equal():
    card1 = StandardPlayingCard(11, "spade")
    card2 = copy.copy(card1)
    assert card2.rank == 11
    assert card2.suit == "spade"
    assert card2.graphic == card1.graphic
    assert card1 == card2


def test_invalid_card_has_unknown_graphic():
    card3 = StandardPlayingCard(1324, "dsaf")
    assert card3.rank == 1324
    assert card3.suit == "dsaf"
    assert card3.graphic == ["Unknown"]


def test_cards_with_different_rank_or_suit_differ():
    assert StandardPlayingCard(11, "spade") != StandardPlayingCard(12, "spade")
    assert StandardPlayingCard(11, "spade") != StandardPlayingCard(11, "heart")


def test_equal_cards_hash_alike():
    cards = {StandardPlayingCard(5, "club"), StandardPlayingCard(5, "club")}
    assert len(cards) == 1


@pytest.mark.parametrize(
    "suit, color",
    [("heart", "red"), ("diamond", "red"), ("spade", "black"), ("club", "black")],
)
def test_color(suit, color):
    assert StandardPlayingCard(3, suit).color == color


def test_repr_mentions_rank_and_suit():
    text = repr(StandardPlayingCard(11, "spade"))
    assert "11" in text and "spade" in text


@pytest.mark.parametrize("suit", SUITS)
@pytest.mark.parametrize("rank", RANKS)
def test_render_card_shape(rank, suit):
    lines = render_card(rank, suit)
    assert len(lines) == 9
    assert lines[0] == "+-----------+"
    assert lines[-1] == "+-----------+"
    assert all(len(line) == 13 for line in lines)


def test_render_card_distinguishes_cards():
    graphics = {tuple(render_card(r, s)) for r in RANKS for s in SUITS}
    assert len(graphics) == 52


@pytest.mark.parametrize("rank, suit", [(0, "spade"), (14, "heart"), (1, "joker")])
def test_render_card_rejects_invalid(rank, suit):
    with pytest.raises(ValueError):
        render_card(rank, suit)


def test_card_back_shape_and_independence():
    back = card_back()
    assert len(back) == 9
    assert all(len(line) == 13 for line in back)
    back.append("extra")
    assert len(card_back()) == 9


def test_graphic_is_a_fresh_list():
    card = StandardPlayingCard(2, "heart")
    lines = card.graphic
    lines.clear()
    assert len(card.graphic) == 9


def test_polar_construction_and_copy():
    card1 = PolarStandardPlayingCard(11, "spade")
    card2 = copy.copy(card1)
    assert card1.rank == 11 and card1.suit == "spade"
    assert card2.rank == 11 and card2.suit == "spade"
    assert card1 == card2
    assert [utf8_prefix(line, 4) for line in card1.graphic] == [
        line[:4] for line in card2.graphic
    ]


def test_polar_invalid_card_is_unknown():
    card3 = PolarStandardPlayingCard(1324, "dsaf")
    assert card3.rank == 1324
    assert card3.suit == "dsaf"
    assert card3.graphic == ["Unknown"]


def test_polar_flipping():
    card1 = PolarStandardPlayingCard(11, "spade")
    assert card1.face_up is False
    card1.flip()
    assert card1.face_up is True
    card1.flip()
    assert card1.face_up is False
    card1.flip()
    assert card1.face_up is True


def test_polar_equality_depends_on_face():
    card1 = PolarStandardPlayingCard(11, "spade")
    card2 = PolarStandardPlayingCard(11, "spade", True)
    assert card1 != card2
    card1.flip()
    assert card1 == card2
    assert hash(card1) == hash(card2)


def test_polar_card_not_equal_to_plain_card():
    polar = PolarStandardPlayingCard(4, "diamond")
    plain = StandardPlayingCard(4, "diamond")
    assert (polar == plain) is False
    assert (plain == polar) is False


def test_polar_repr_mentions_face():
    assert "face_up=True" in repr(PolarStandardPlayingCard(1, "club", True))