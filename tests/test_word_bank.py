"""
Tests for the seed word bank.
"""
import random

import pytest

from services.word_bank import WordBank, DEFAULT_WORDS


def test_default_catalog():
    assert len(DEFAULT_WORDS) == 30
    assert len(set(DEFAULT_WORDS)) == 30


def test_pick_random_is_member(word_bank):
    for _ in range(100):
        assert word_bank.pick_random() in word_bank


def test_same_seed_same_sequence():
    a = WordBank(rng=random.Random(7))
    b = WordBank(rng=random.Random(7))
    assert [a.pick_random() for _ in range(10)] == [b.pick_random() for _ in range(10)]


def test_catalog_is_not_mutated(word_bank):
    before = word_bank.words
    for _ in range(20):
        word_bank.pick_random()
    assert word_bank.words == before


def test_custom_words():
    bank = WordBank(["すいか"])
    assert bank.pick_random() == "すいか"
    assert len(bank) == 1


def test_empty_catalog_raises():
    with pytest.raises(ValueError):
        WordBank([])
