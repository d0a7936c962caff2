"""Unit tests for the built-in players."""

import pytest
from unolite.agents import AutoPlayer, HumanPlayer
from unolite.engine import (
    Card,
    Color,
    Deck,
    EmptyDeckError,
    GameState,
    Value,
    apply_action,
    PlayCard,
    DrawCard,
)

R5 = Card(Color.RED, Value.FIVE)


class ScriptedIO:
    """Feeds canned answers to a HumanPlayer and records what it prints."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answers.pop(0)

    def write(self, line: str) -> None:
        self.output.append(line)


def _human(io: ScriptedIO, hand) -> HumanPlayer:
    player = HumanPlayer("You", read=io.read, write=io.write)
    player.hand = list(hand)
    return player


# --- Shared hand handling ---

def test_draw_cards_takes_from_top() -> None:
    deck = Deck(cards=[Card(Color.PINK, Value.ONE), Card(Color.PINK, Value.TWO)])
    player = AutoPlayer("a")
    player.draw_cards(deck)
    assert player.hand == [Card(Color.PINK, Value.TWO)]


def test_draw_cards_partial_on_empty_deck() -> None:
    deck = Deck(cards=[Card(Color.PINK, Value.ONE), Card(Color.PINK, Value.TWO)])
    player = AutoPlayer("a")
    with pytest.raises(EmptyDeckError):
        player.draw_cards(deck, 4)
    assert player.hand == [Card(Color.PINK, Value.TWO), Card(Color.PINK, Value.ONE)]


# --- AutoPlayer ---

def test_auto_plays_first_legal_card() -> None:
    player = AutoPlayer("a")
    player.hand = [
        Card(Color.PINK, Value.ONE),
        Card(Color.NONE, Value.COLOR_CHANGE),
        Card(Color.RED, Value.TWO),
    ]
    assert player.decide_turn(R5) == PlayCard(index=1)


def test_auto_plays_matching_value() -> None:
    player = AutoPlayer("a")
    player.hand = [Card(Color.PINK, Value.ONE), Card(Color.YELLOW, Value.FIVE)]
    assert player.decide_turn(R5) == PlayCard(index=1)


def test_auto_draws_without_legal_card() -> None:
    player = AutoPlayer("a")
    player.hand = [Card(Color.PINK, Value.ONE), Card(Color.YELLOW, Value.TWO)]
    assert player.decide_turn(R5) == DrawCard()


def test_auto_never_returns_illegal_index() -> None:
    player = AutoPlayer("a")
    deck = Deck()
    deck.initialize()
    player.hand = deck.cards[::7]
    for active in (R5, Card(Color.PURPLE, Value.BLOCK), Card(Color.YELLOW, Value.COLOR_CHANGE)):
        action = player.decide_turn(active)
        if isinstance(action, PlayCard):
            assert player.hand[action.index].can_play_on(active)


def test_auto_chooses_most_common_color() -> None:
    player = AutoPlayer("a")
    player.hand = [
        Card(Color.PINK, Value.ONE),
        Card(Color.YELLOW, Value.ONE),
        Card(Color.YELLOW, Value.TWO),
        Card(Color.NONE, Value.DRAW_FOUR),
        Card(Color.NONE, Value.DRAW_FOUR),
    ]
    assert player.choose_replacement_color() is Color.YELLOW


def test_auto_color_tie_prefers_earlier_color() -> None:
    player = AutoPlayer("a")
    player.hand = [Card(Color.YELLOW, Value.ONE), Card(Color.PURPLE, Value.ONE)]
    assert player.choose_replacement_color() is Color.PURPLE


def test_auto_color_with_only_wilds() -> None:
    player = AutoPlayer("a")
    player.hand = [Card(Color.NONE, Value.COLOR_CHANGE)]
    assert player.choose_replacement_color() is Color.RED


# --- HumanPlayer ---

def test_human_reprompts_until_legal_choice() -> None:
    hand = [Card(Color.PINK, Value.ONE), Card(Color.RED, Value.TWO)]
    io = ScriptedIO("abc", "9", "1", "2")
    player = _human(io, hand)

    action = player.decide_turn(R5)

    assert action == PlayCard(index=1)
    assert len(io.prompts) == 4
    assert "Invalid input. Try again." in io.output
    assert "Invalid card number. Try again." in io.output
    assert "Cannot play that card. Try again." in io.output
    assert player.hand == hand


def test_human_zero_means_draw() -> None:
    io = ScriptedIO("0")
    player = _human(io, [Card(Color.RED, Value.TWO)])
    assert player.decide_turn(R5) == DrawCard()


def test_human_shows_hand_and_top_card() -> None:
    io = ScriptedIO("1")
    player = _human(io, [Card(Color.RED, Value.TWO)])
    player.decide_turn(R5)
    assert "  1. red_2" in io.output
    assert "Top card: red_5" in io.output


def test_human_color_choice_reprompts() -> None:
    io = ScriptedIO("pink", "4", "-1", "2")
    player = _human(io, [])
    assert player.choose_replacement_color() is Color.PURPLE
    assert io.output.count("Invalid choice. Try again.") == 3


def test_human_end_of_input_propagates() -> None:
    def closed(prompt: str) -> str:
        raise EOFError

    player = HumanPlayer("You", read=closed, write=lambda line: None)
    with pytest.raises(EOFError):
        player.decide_turn(R5)


def test_human_invalid_inputs_leave_game_untouched() -> None:
    hand = [Card(Color.PINK, Value.ONE), Card(Color.NONE, Value.COLOR_CHANGE), Card(Color.RED, Value.TWO)]
    io = ScriptedIO("x", "7", "1", "2", "zz", "1")
    human = _human(io, hand)
    other = AutoPlayer("AI-1")
    other.hand = [R5]
    state = GameState(deck=Deck(), players=[human, other], active_card=R5)

    action = human.decide_turn(state.active_card)
    assert human.hand == hand
    assert state.active_card == R5

    apply_action(state, action)
    assert state.active_card == Card(Color.PINK, Value.COLOR_CHANGE)
    assert human.hand == [Card(Color.PINK, Value.ONE), Card(Color.RED, Value.TWO)]
    assert io.answers == []
