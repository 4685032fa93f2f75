"""Unit tests for the ingredient plausibility check."""

import pytest

from allergyscan.ingredients.validator import NON_INGREDIENT_TERMS, is_valid_ingredient


def test_length_bounds():
    assert is_valid_ingredient("a") is False
    assert is_valid_ingredient("ab") is True
    assert is_valid_ingredient("a" * 50) is True
    assert is_valid_ingredient("a" * 51) is False


def test_whitespace_does_not_count_towards_length():
    assert is_valid_ingredient("a b") is True
    assert is_valid_ingredient(" a ") is False


@pytest.mark.parametrize("text", ["123", "--", "(1.5)", ""])
def test_requires_letters(text):
    assert is_valid_ingredient(text) is False


@pytest.mark.parametrize("text", ["Sugar", "Wheat flour", "Skimmed milk powder", "E322", "Vitamin B12"])
def test_accepts_ingredients(text):
    assert is_valid_ingredient(text) is True


@pytest.mark.parametrize(
    "text",
    ["Ingredients", "Nutrition Facts", "May contain nuts", "Net weight 200g", "Keep refrigerated", "Total Fat"],
)
def test_rejects_label_boilerplate(text):
    assert is_valid_ingredient(text) is False


def test_stoplist_matches_inside_words():
    # "pepper" holds "per" and "pineapple" does not hold any term
    assert is_valid_ingredient("Black pepper") is False
    assert is_valid_ingredient("Pineapple") is True


def test_stoplist_terms_are_lowercase():
    assert all(term == term.lower() for term in NON_INGREDIENT_TERMS)
