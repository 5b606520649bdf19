import re

import pytest

from dslab.avl_dictionary import AVLDictionary

BALANCED_ABC = "b (BF: 0)\n    |-- a (BF: 0)\n    |-- c (BF: 0)\n"


def build(words):
    dictionary = AVLDictionary()
    rotations = []
    for word in words:
        rotations.extend(dictionary.add(word, f"meaning of {word}"))
    return dictionary, rotations


def test_items_are_sorted_both_ways():
    words = ["mango", "apple", "kiwi", "banana", "cherry", "zucchini", "fig"]
    dictionary, _ = build(words)
    keys = [k for k, _ in dictionary.items()]
    assert keys == sorted(words)
    assert [k for k, _ in dictionary.reversed_items()] == sorted(words, reverse=True)
    assert len(dictionary) == len(words)


def test_balance_factors_stay_within_one():
    words = [f"w{i:03d}" for i in range(64)]
    dictionary, _ = build(words)
    factors = [int(m) for m in re.findall(r"\(BF: (-?\d+)\)", dictionary.render())]
    assert len(factors) == len(words)
    assert all(-1 <= f <= 1 for f in factors)


def test_find_reports_meaning_and_comparisons():
    dictionary, _ = build("abc")
    assert dictionary.find("b") == ("meaning of b", 1)
    assert dictionary.find("a") == ("meaning of a", 2)
    meaning, comparisons = dictionary.find("z")
    assert meaning is None
    assert comparisons == 3


def test_find_in_empty_dictionary():
    assert AVLDictionary().find("anything") == (None, 1)


def test_add_existing_word_overwrites_without_rotation():
    dictionary, _ = build("abc")
    assert dictionary.add("a", "first letter") == []
    assert dictionary.find("a")[0] == "first letter"
    assert len(dictionary) == 3


def test_update_changes_or_adds_meaning():
    dictionary, _ = build(["cat"])
    dictionary.update("cat", "a small feline")
    dictionary.update("dog", "a loyal friend")
    assert dictionary.items() == [("cat", "a small feline"), ("dog", "a loyal friend")]


def test_render_of_empty_and_single():
    dictionary = AVLDictionary()
    assert dictionary.render() == ""
    dictionary.add("solo", "alone")
    assert dictionary.render() == "solo (BF: 0)\n"