import random

import pytest

from conftest import make_word
from klusuwaqn.config import GRID_SIZE
from klusuwaqn.services.round_generator import blank_count, generate_round, shuffled


def word_list(size):
    return [make_word(f"Word{i}", f"English {i}") for i in range(size)]


def test_empty_word_set_returns_none():
    assert generate_round([], 0, random.Random(1)) is None


@pytest.mark.parametrize('size', [1, 2, 3, 4, 5, 6, 7, 8, 9, 12])
def test_grid_has_nine_slots_with_exactly_one_target(size):
    words = word_list(size)
    rng = random.Random(size)

    for target_index in range(size):
        grid = generate_round(words, target_index, rng)

        assert len(grid.slots) == GRID_SIZE
        assert grid.target is words[target_index]
        assert sum(1 for slot in grid.slots if slot is words[target_index]) == 1


@pytest.mark.parametrize('size', [1, 3, 6, 8, 9, 15])
def test_distractors_are_never_repeated(size):
    words = word_list(size)
    rng = random.Random(42)

    for _ in range(20):
        grid = generate_round(words, 0, rng)
        distractors = [slot.id for slot in grid.slots if slot is not None and slot is not grid.target]
        assert len(distractors) == len(set(distractors))
        assert len(distractors) == min(size - 1, GRID_SIZE - 1)


@pytest.mark.parametrize('size, blanks', [(1, 8), (3, 6), (4, 5), (6, 3), (9, 0), (20, 0)])
def test_small_word_sets_are_padded_with_blanks(size, blanks):
    assert blank_count(size) == blanks

    grid = generate_round(word_list(size), 0, random.Random(0))
    assert grid.slots.count(None) == blanks


def test_target_fields_are_copied_from_the_target_word():
    words = word_list(3)
    grid = generate_round(words, 2, random.Random(0))

    assert grid.target_text == words[2].mikmaq
    assert grid.target_image == words[2].image_path
    assert grid.target_audio == words[2].audio_path


def test_same_seed_gives_same_grid():
    words = word_list(6)

    first = generate_round(words, 1, random.Random(99))
    second = generate_round(words, 1, random.Random(99))

    assert first == second


def test_target_position_varies_between_rounds():
    words = word_list(9)
    rng = random.Random(7)

    positions = {generate_round(words, 0, rng).slots.index(words[0]) for _ in range(50)}
    assert len(positions) > 1


def test_word_sharing_the_target_image_is_not_a_distractor():
    target = make_word('Ula', image='shared.png')
    twin = make_word('Wen', image='shared.png')
    other = make_word('Net')

    grid = generate_round([target, twin, other], 0, random.Random(3))

    assert twin not in grid.slots
    assert other in grid.slots
    assert [slot.image_path for slot in grid.slots if slot is not None].count('shared.png') == 1


def test_out_of_range_target_index_raises():
    with pytest.raises(IndexError):
        generate_round(word_list(3), 3, random.Random(0))


def test_shuffled_returns_a_permutation_without_touching_input():
    items = list(range(10))
    result = shuffled(items, random.Random(5))

    assert items == list(range(10))
    assert sorted(result) == items
