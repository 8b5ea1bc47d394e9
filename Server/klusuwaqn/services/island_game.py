"""
Island Quiz State Machine

Pure transition logic for the Goat Island quiz. Each level asks for one animal
by its Mi'kmaq name and offers a few animal pictures to choose from.

Phases:
    PLAYING         -> quiz shown, waiting for a pick (a first wrong pick stays here)
    SHOWING_SUCCESS -> correct pick, waiting for "next"
    SHOWING_FAILURE -> second wrong pick on a level, game over
    COMPLETED       -> the last level has been cleared

An action sent in a phase that does not accept it returns the state unchanged.
"""

import random
from dataclasses import replace
from typing import Iterable, Optional, Tuple

from ..config.game_settings import ISLAND_MAX_WRONG, ISLAND_QUIZ_OPTIONS
from ..models.game import Phase, AdvanceRound, RestartRound, StartNewGame
from ..models.island import Animal, IslandLevel, IslandState, PickAnimal
from .round_generator import shuffled


def quiz_options(animals: Iterable[Animal], target: Animal, rng: random.Random,
                 count: int = ISLAND_QUIZ_OPTIONS) -> Tuple[Animal, ...]:
    """The target plus count - 1 other animals, in random order."""
    others = shuffled([animal for animal in animals if animal.id != target.id], rng)
    return tuple(shuffled([target] + others[:max(0, count - 1)], rng))


def _enter_level(state: IslandState, index: int, rng: random.Random) -> IslandState:
    if index >= len(state.levels):
        return replace(state, level_index=index, options=(), wrong_attempts=0, phase=Phase.COMPLETED)

    return replace(
        state,
        level_index=index,
        options=quiz_options(state.animals, state.levels[index].target, rng),
        wrong_attempts=0,
        phase=Phase.PLAYING,
    )


def new_island_game(levels: Iterable[IslandLevel], animals: Iterable[Animal],
                    rng: Optional[random.Random] = None) -> IslandState:
    """Start the quiz at the first level."""
    state = IslandState(levels=tuple(levels), animals=tuple(animals))
    return _enter_level(state, 0, rng or random.Random())


def _pick_animal(state: IslandState, action: PickAnimal, rng: random.Random) -> IslandState:
    level = state.current_level
    if state.phase != Phase.PLAYING or level is None:
        return state

    if action.animal_id == level.target.id:
        return replace(state, wrong_attempts=0, phase=Phase.SHOWING_SUCCESS)

    attempts = state.wrong_attempts + 1
    if attempts >= ISLAND_MAX_WRONG:
        return replace(state, wrong_attempts=attempts, phase=Phase.SHOWING_FAILURE)
    return replace(state, wrong_attempts=attempts)


def _advance_level(state: IslandState, action: AdvanceRound, rng: random.Random) -> IslandState:
    if state.phase != Phase.SHOWING_SUCCESS:
        return state
    return _enter_level(state, state.level_index + 1, rng)


def _restart(state: IslandState, action: RestartRound, rng: random.Random) -> IslandState:
    if state.phase not in (Phase.SHOWING_FAILURE, Phase.COMPLETED):
        return state
    return _enter_level(state, 0, rng)


def _start_new_game(state: IslandState, action: StartNewGame, rng: random.Random) -> IslandState:
    return _enter_level(state, 0, rng)


_TRANSITIONS = {
    PickAnimal: _pick_animal,
    AdvanceRound: _advance_level,
    RestartRound: _restart,
    StartNewGame: _start_new_game,
}


def reduce_island(state: IslandState, action, rng: Optional[random.Random] = None) -> IslandState:
    """
    Apply one action to the island quiz.

    Returns:
        IslandState: The next state; the same object if the action does not apply
    """
    transition = _TRANSITIONS.get(type(action))
    if transition is None:
        return state
    return transition(state, action, rng or random.Random())
