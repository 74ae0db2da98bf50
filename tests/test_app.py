import io

from durak.app import create_test_cards, create_test_fsm, main
from durak.cards import Card, CardSuit
from durak.fsm import Action, Event


def test_create_test_cards_layout():
    cards = create_test_cards()
    assert len(cards) == 40
    assert cards[0] == Card(CardSuit.CLUB, 1)
    assert cards[-1] == Card(CardSuit.SPADE, 10)
    for suit in (CardSuit.CLUB, CardSuit.DIAMOND, CardSuit.HEART, CardSuit.SPADE):
        ranks = [c.rank for c in cards if c.suit == suit]
        assert ranks == list(range(1, 11))


def test_create_test_fsm_flow():
    fsm = create_test_fsm()
    assert fsm.on_event(Event.GAME_STARTED) is Action.START_ROUND
    assert fsm.on_event(Event.GAME_STARTED) is Action.GIVE_CARDS
    assert fsm.on_event(Event.ROUND_STARTED) is Action.PLAYER_ATTACK
    assert fsm.on_event(Event.PLAYER_ATTACKED) is Action.NEXT_PLAYER_DEFEND
    assert fsm.on_event(Event.PLAYER_DEFENDED) is Action.PLAYER_ATTACK
    assert fsm.on_event(Event.PLAYER_ATTACKED) is Action.NEXT_PLAYER_DEFEND
    assert fsm.on_event(Event.PLAYER_CANT_DEFEND) is Action.PLAYER_ATTACK


def test_create_test_fsm_unknown_event_keeps_state():
    fsm = create_test_fsm()
    assert fsm.on_event(Event.ROUND_ENDED) is None
    assert fsm.on_event(Event.GAME_STARTED) is Action.START_ROUND


def test_main_ai_only_runs_to_the_end(capsys):
    assert main(["--ai-only", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Table:" in out
    assert out.rstrip().endswith("Game over")


def test_main_human_quits_immediately(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Your hand" in out
    assert "Table:" not in out


def test_main_human_attacks_then_input_ends(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n1\n"))
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Enter a card number, d or q" in out
    assert "Table:" in out


def test_main_human_same_seed_same_output(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    main(["--seed", "5"])
    first = capsys.readouterr().out
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    main(["--seed", "5"])
    second = capsys.readouterr().out
    assert first == second