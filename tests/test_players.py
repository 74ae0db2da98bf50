import pytest

from durak.cards import Card, CardSuit
from durak.deck import Deck
from durak.players import (
    AIPlayer,
    CardThrowResult,
    HumanPlayer,
    IllegalMoveError,
    UiMode,
)


def _record(signal):
    seen = []
    signal.connect(lambda *args: seen.append(args))
    return seen


def test_take_cards_extends_hand_and_notifies():
    player = AIPlayer()
    seen = _record(player.hand_changed)
    first = [Card(CardSuit.HEART, 3)]
    second = [Card(CardSuit.CLUB, 7), Card(CardSuit.SPADE, 9)]
    player.take_cards(first)
    player.take_cards(second)
    assert player.hand == tuple(first + second)
    assert seen[-1] == (tuple(first + second),)
    assert len(seen) == 2


def test_move_card_uses_identity():
    a = Card(CardSuit.HEART, 5)
    b = Card(CardSuit.HEART, 5)
    player = AIPlayer([a])
    assert player.move_card(b) is None
    assert player.move_card(a) is a
    assert player.hand == ()


def test_card_throw_result_accepted_removes_card():
    card = Card(CardSuit.DIAMOND, 4)
    other = Card(CardSuit.CLUB, 8)
    player = AIPlayer([card, other])
    seen = _record(player.hand_changed)
    assert player.card_throw_result(CardThrowResult.ACCEPTED, card) is card
    assert player.hand == (other,)
    assert seen == [((other,),)]


def test_card_throw_result_rejected_keeps_hand():
    card = Card(CardSuit.DIAMOND, 4)
    player = AIPlayer([card])
    assert player.card_throw_result(CardThrowResult.REJECTED_REQUIRES_REPEAT, card) is None
    assert player.hand == (card,)


def test_card_throw_result_without_card():
    card = Card(CardSuit.DIAMOND, 4)
    player = AIPlayer([card])
    assert player.card_throw_result(CardThrowResult.ACCEPTED, None) is None
    assert player.hand == (card,)


def test_ai_attacks_with_first_card():
    first = Card(CardSuit.SPADE, 2)
    player = AIPlayer([first, Card(CardSuit.HEART, 10)])
    seen = _record(player.attacked)
    player.on_attack_turn()
    assert seen == [(first,)]


def test_ai_with_empty_hand_does_not_attack():
    player = AIPlayer()
    seen = _record(player.attacked)
    player.on_attack_turn()
    assert seen == []


def test_ai_defends_with_first_higher_same_suit():
    attack = Card(CardSuit.HEART, 5)
    low = Card(CardSuit.HEART, 3)
    other_suit = Card(CardSuit.CLUB, 9)
    high = Card(CardSuit.HEART, 7)
    higher = Card(CardSuit.HEART, 9)
    player = AIPlayer([low, other_suit, high, higher])
    seen = _record(player.defended)
    player.on_defence_turn(attack)
    assert seen == [(high,)]
    assert seen[0][0] is high


def test_ai_cannot_defend_emits_none():
    attack = Card(CardSuit.HEART, 5)
    player = AIPlayer([Card(CardSuit.HEART, 5), Card(CardSuit.SPADE, 9)])
    seen = _record(player.defended)
    player.on_defence_turn(attack)
    assert seen == [(None,)]


def test_human_attack_click():
    card = Card(CardSuit.CLUB, 6)
    player = HumanPlayer([card])
    seen = _record(player.attacked)
    player.on_attack_turn()
    assert player.mode is UiMode.ATTACK
    player.click_card(card)
    assert seen == [(card,)]
    assert player.mode is UiMode.IDLE


def test_human_idle_click_does_nothing():
    card = Card(CardSuit.CLUB, 6)
    player = HumanPlayer([card])
    attacks = _record(player.attacked)
    defences = _record(player.defended)
    player.click_card(card)
    assert attacks == [] and defences == []
    assert player.mode is UiMode.IDLE


def test_human_click_on_card_not_in_hand():
    player = HumanPlayer([Card(CardSuit.CLUB, 6)])
    player.on_attack_turn()
    with pytest.raises(IllegalMoveError):
        player.click_card(Card(CardSuit.CLUB, 6))
    assert player.mode is UiMode.ATTACK


def test_human_defence_rejects_card_that_does_not_beat():
    attack = Card(CardSuit.HEART, 8)
    weak = Card(CardSuit.HEART, 4)
    off_suit = Card(CardSuit.SPADE, 10)
    player = HumanPlayer([weak, off_suit])
    seen = _record(player.defended)
    player.on_defence_turn(attack)
    for card in (weak, off_suit):
        with pytest.raises(IllegalMoveError):
            player.click_card(card)
    assert player.mode is UiMode.DEFENCE
    assert player.attack_card is attack
    assert seen == []


def test_human_defence_accepts_beating_card():
    attack = Card(CardSuit.HEART, 8)
    strong = Card(CardSuit.HEART, 10)
    player = HumanPlayer([strong])
    seen = _record(player.defended)
    player.on_defence_turn(attack)
    player.click_card(strong)
    assert seen == [(strong,)]
    assert player.mode is UiMode.IDLE
    assert player.attack_card is None


def test_human_takes_card_from_deck():
    card = Card(CardSuit.DIAMOND, 2)
    deck = Deck()
    deck.put_cards([card])
    player = HumanPlayer()
    seen = _record(player.took_card_from_deck)
    assert player.take_card_from_deck(deck) is card
    assert seen == [(card, player)]
    assert len(deck) == 0


def test_human_take_from_empty_deck():
    player = HumanPlayer()
    seen = _record(player.took_card_from_deck)
    assert player.take_card_from_deck(Deck()) is None
    assert seen == []


def test_once_connection_runs_only_once():
    first = Card(CardSuit.SPADE, 2)
    player = AIPlayer([first])
    seen = []
    player.attacked.connect(seen.append, once=True)
    player.on_attack_turn()
    player.on_attack_turn()
    assert seen == [first]