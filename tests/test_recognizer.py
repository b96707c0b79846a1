"""Tests for offline three-word address recognition."""

import pytest

from w3wkit.recognizer import did_you_mean, find_possible_3wa, is_possible_3wa, iter_possible_3wa


@pytest.mark.parametrize(
    "text",
    [
        "filled.count.soap",
        "  filled.count.soap\n",
        "Filled.Count.Soap",
        "début.café.élève",
        "индекс.дом.плот",
        "λέξη.τρία.σπίτι",
        "こんにちは。世界。東京",
        "नमस्ते.दुनिया.सूची",
    ],
)
def test_is_possible_3wa_accepts_address_shapes(text):
    """Three letter words with two identical delimiters, in any script."""
    assert is_possible_3wa(text)


@pytest.mark.parametrize(
    "text",
    [
        "not a 3wa",
        "not.a 3wa",
        "invalid.3wa.address",
        "1.2.3",
        "filled.count",
        "filled.count.soap.deed",
        ".filled.count.soap",
        "filled.count.soap.",
        "filled..count.soap",
        "filled.count。soap",
        "filled.co_unt.soap",
        "filled.count.so@p",
        "",
    ],
)
def test_is_possible_3wa_rejects_everything_else(text):
    """Digits, symbols, wrong arity and mixed delimiters all fail."""
    assert not is_possible_3wa(text)


def test_find_possible_3wa_single():
    assert find_possible_3wa("Please leave by my porch at filled.count.soap") == ["filled.count.soap"]


def test_find_possible_3wa_multiple_in_order():
    text = "Please leave by my porch at filled.count.soap or deed.tulip.judge"
    assert find_possible_3wa(text) == ["filled.count.soap", "deed.tulip.judge"]


def test_find_possible_3wa_none_is_empty_list():
    assert find_possible_3wa("Please leave by my porch") == []
    assert find_possible_3wa("") == []


def test_find_possible_3wa_strips_surrounding_punctuation():
    """Sentence punctuation and brackets stay out of the match."""
    text = 'Meet at (filled.count.soap), then "index.home.raft". Or ///deed.tulip.judge!'
    assert find_possible_3wa(text) == ["filled.count.soap", "index.home.raft", "deed.tulip.judge"]


def test_find_possible_3wa_preserves_casing():
    assert find_possible_3wa("from Index.Home.Raft to filled.count.soap") == ["Index.Home.Raft", "filled.count.soap"]


def test_find_possible_3wa_ignores_wrong_arity_and_digits():
    text = "one.two and a.b.c.d and 1.2.3 and word.word.word9 and v1.two.three"
    assert find_possible_3wa(text) == []


def test_find_possible_3wa_ignores_mixed_delimiters():
    assert find_possible_3wa("try filled.count。soap now") == []


def test_find_possible_3wa_non_latin():
    assert find_possible_3wa("адрес: индекс.дом.плот.") == ["индекс.дом.плот"]


def test_find_possible_3wa_is_repeatable():
    """Same text, same answer; every hit passes is_possible_3wa."""
    text = "filled.count.soap, deed.tulip.judge; index.home.raft"
    first = find_possible_3wa(text)
    assert first == find_possible_3wa(text)
    assert len(first) == 3
    assert all(is_possible_3wa(hit) for hit in first)


def test_iter_possible_3wa_is_a_one_shot_iterator():
    it = iter_possible_3wa("filled.count.soap")
    assert list(it) == ["filled.count.soap"]
    assert list(it) == []


@pytest.mark.parametrize(
    "text",
    [
        "filled count soap",
        "filled-count-soap",
        "filled.count.soap",
        "filled  count  soap",
        "filled\u3000count\u3000soap",
        "filled｡count｡soap",
    ],
)
def test_did_you_mean_accepts_uniform_separators(text):
    assert did_you_mean(text)


@pytest.mark.parametrize(
    "text",
    [
        "filledcountsoap",
        "filled count-soap",
        "filled count",
        "filled count soap deed",
        "not a 3wa",
        "filled - count - soap",
    ],
)
def test_did_you_mean_rejects(text):
    assert not did_you_mean(text)


def test_persian_words_with_zero_width_non_joiner():
    """ZWNJ inside a word is part of the word, not a boundary."""
    address = "\u06a9\u062a\u0627\u0628.\u0645\u06cc\u200c\u062e\u0648\u0627\u0647\u0645.\u062e\u0627\u0646\u0647"

    assert is_possible_3wa(address)
    assert find_possible_3wa(f"آدرس: {address} است") == [address]


def test_zero_width_non_joiner_cannot_open_a_word():
    assert not is_possible_3wa("\u200cfilled.count.soap")
