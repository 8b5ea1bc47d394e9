from conftest import make_word
from klusuwaqn.services.search_service import field_score, search


def test_search_dad_finds_only_tata():
    tata = make_word("Ta'ta", 'Dad', 'January')
    nin = make_word("Ni'n", 'I', 'September')
    catalog = [tata, nin]

    assert search(catalog, 'Dad') == [tata]


def test_empty_query_returns_catalog_in_order():
    tata = make_word("Ta'ta", 'Dad', 'January')
    nin = make_word("Ni'n", 'I', 'September')
    catalog = [tata, nin]

    assert search(catalog, '') == [tata, nin]
    assert search(catalog, '   ') == [tata, nin]


def test_search_is_case_insensitive(words):
    results = search(words, 'teluisi')
    assert results[0].mikmaq == 'Teluisi'


def test_search_tolerates_a_typo(words):
    results = search(words, 'Mijisu')
    assert [w.mikmaq for w in results][:1] == ['Mijisi']


def test_search_by_month(words):
    results = search(words, 'October')
    assert {w.mikmaq for w in results} == {'Aqq', 'Mijisi', 'Wiktm'}


def test_exact_match_ranks_before_partial_match():
    love = make_word('Kesalk', 'I love', 'November')
    love_you = make_word('Kesalul', 'I love you', 'February')

    results = search([love_you, love], 'Kesalk')
    assert results[0] is love


def test_unrelated_query_returns_nothing(words):
    assert search(words, 'zzzzzz') == []


def test_threshold_controls_strictness(words):
    strict = search(words, 'Mijisu', threshold=0.0)
    loose = search(words, 'Mijisu', threshold=0.3)

    assert strict == []
    assert [w.mikmaq for w in loose][:1] == ['Mijisi']


def test_field_score_prefers_matches_near_the_start():
    assert field_score('dad', 'dad') == 0.0
    assert field_score('dad', 'my dad') > field_score('dad', 'dad is here')
    assert field_score('dad', 'zzz') == 1.0
