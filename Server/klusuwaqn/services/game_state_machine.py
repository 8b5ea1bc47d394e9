"""
Matching Game State Machine

Pure transition logic for the word matching game. Every function here returns a
new GameState; none of them mutate their input or touch Flask.

Phases:
    PLAYING         -> grid shown, waiting for a pick
    SHOWING_WARNING -> first wrong pick on this round
    SHOWING_FAILURE -> second wrong pick, play-through must restart
    SHOWING_SUCCESS -> correct pick, waiting for "next"
    COMPLETED       -> every word of the month has been matched

An action sent in a phase that does not accept it returns the state unchanged.
"""

import random
from dataclasses import replace
from typing import Iterable, Optional, Tuple

from ..config.game_settings import MAX_STRIKES
from ..models.game import (
    GameState, Phase, SelectSlot, AcknowledgeWarning, AdvanceRound,
    RestartRound, StartNewGame, SelectMonth
)
from ..models.word import Month, Word
from .round_generator import generate_round, shuffled


def words_for_month(catalog: Iterable[Word], month: str) -> Tuple[Word, ...]:
    """Words introduced in month, in catalog order."""
    return tuple(word for word in catalog if word.start_month == month)


def new_game(catalog: Iterable[Word], month: str, rng: Optional[random.Random] = None) -> GameState:
    """
    Start a play-through over the words of month.

    The month's words are shuffled once and the first round is generated. When
    the month has no words the state has no grid and is_empty is True.
    """
    rng = rng or random.Random()
    catalog = tuple(catalog)
    word_set = tuple(shuffled(words_for_month(catalog, month), rng))
    return _fresh_state(GameState(catalog=catalog, month=month, word_set=word_set), rng)


def _fresh_state(state: GameState, rng: random.Random) -> GameState:
    return replace(
        state,
        round_index=0,
        success_count=0,
        attempt_strikes=0,
        grid=generate_round(state.word_set, 0, rng),
        phase=Phase.PLAYING,
    )


def _select_slot(state: GameState, action: SelectSlot, rng: random.Random) -> GameState:
    if state.phase != Phase.PLAYING or state.grid is None:
        return state

    if action.image_ref == state.grid.target_image:
        return replace(
            state,
            success_count=state.success_count + 1,
            attempt_strikes=0,
            phase=Phase.SHOWING_SUCCESS,
        )

    strikes = state.attempt_strikes + 1
    if strikes >= MAX_STRIKES:
        return replace(state, attempt_strikes=strikes, phase=Phase.SHOWING_FAILURE)
    return replace(state, attempt_strikes=strikes, phase=Phase.SHOWING_WARNING)


def _acknowledge_warning(state: GameState, action: AcknowledgeWarning, rng: random.Random) -> GameState:
    if state.phase != Phase.SHOWING_WARNING:
        return state
    return replace(state, phase=Phase.PLAYING)


def _advance_round(state: GameState, action: AdvanceRound, rng: random.Random) -> GameState:
    if state.phase != Phase.SHOWING_SUCCESS:
        return state

    next_index = state.round_index + 1
    if next_index >= len(state.word_set):
        return replace(state, round_index=next_index, grid=None, phase=Phase.COMPLETED)

    return replace(
        state,
        round_index=next_index,
        attempt_strikes=0,
        grid=generate_round(state.word_set, next_index, rng),
        phase=Phase.PLAYING,
    )


def _restart_round(state: GameState, action: RestartRound, rng: random.Random) -> GameState:
    if state.phase != Phase.SHOWING_FAILURE:
        return state
    return _fresh_state(state, rng)


def _start_new_game(state: GameState, action: StartNewGame, rng: random.Random) -> GameState:
    return _fresh_state(replace(state, word_set=tuple(shuffled(state.word_set, rng))), rng)


def _select_month(state: GameState, action: SelectMonth, rng: random.Random) -> GameState:
    month = Month.parse(action.month)
    if month is None:
        return state
    return new_game(state.catalog, month.value, rng)


_TRANSITIONS = {
    SelectSlot: _select_slot,
    AcknowledgeWarning: _acknowledge_warning,
    AdvanceRound: _advance_round,
    RestartRound: _restart_round,
    StartNewGame: _start_new_game,
    SelectMonth: _select_month,
}


def reduce_game(state: GameState, action, rng: Optional[random.Random] = None) -> GameState:
    """
    Apply one action to the game.

    Args:
        state: Current game state
        action: One of SelectSlot, AcknowledgeWarning, AdvanceRound,
            RestartRound, StartNewGame or SelectMonth
        rng: Source of randomness for reshuffles and new grids

    Returns:
        GameState: The next state; the same object if the action does not apply
    """
    transition = _TRANSITIONS.get(type(action))
    if transition is None:
        return state
    return transition(state, action, rng or random.Random())
