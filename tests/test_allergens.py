"""Unit tests for allergen synonym lookup and matching."""

import pytest

from allergyscan.allergens import (
    ALLERGEN_SYNONYMS,
    COMMON_ALLERGENS,
    check_for_allergens,
    get_allergen_terms,
    normalize_allergy_set,
)


class TestCheckForAllergens:

    def test_substring_match(self):
        assert check_for_allergens(["Wheat Flour", "Salt"], ["wheat"]) == ["Contains wheat"]

    def test_no_match(self):
        assert check_for_allergens(["Wheat Flour", "Salt"], ["nuts"]) == []

    def test_synonym_expansion(self):
        assert check_for_allergens(["Skimmed Milk Powder"], ["milk"]) == ["Contains milk"]
        assert check_for_allergens(["Whey Powder"], ["milk"]) == ["Contains milk"]

    def test_label_casing_is_kept(self):
        assert check_for_allergens(["Wheat Flour"], ["Wheat"]) == ["Contains Wheat"]

    def test_repeated_allergy_warns_once(self):
        assert check_for_allergens(["Milk"], ["milk", "milk"]) == ["Contains milk"]
        assert check_for_allergens(["Milk"], ["Milk", "milk"]) == ["Contains Milk"]

    def test_many_matching_ingredients_warn_once(self):
        assert check_for_allergens(["Milk", "Cream", "Butter"], ["milk"]) == ["Contains milk"]

    def test_warnings_follow_allergy_order(self):
        ingredients = ["Soy Lecithin", "Milk"]
        # lecithin is listed under both soy and eggs
        assert check_for_allergens(ingredients, ["milk", "soy", "eggs"]) == [
            "Contains milk",
            "Contains soy",
            "Contains eggs",
        ]

    def test_unknown_allergy_matches_its_own_label(self):
        assert check_for_allergens(["Mango Pulp"], ["mango"]) == ["Contains mango"]
        assert check_for_allergens(["Quinoa"], ["lupin"]) == []

    def test_blank_labels_are_ignored(self):
        assert check_for_allergens(["Milk"], ["", "   "]) == []

    def test_empty_inputs(self):
        assert check_for_allergens([], ["milk"]) == []
        assert check_for_allergens(["Milk"], []) == []


def test_get_allergen_terms():
    assert "whey" in get_allergen_terms("MILK")
    assert get_allergen_terms(" Lupin ") == ("lupin",)


def test_normalize_allergy_set():
    assert normalize_allergy_set([" Milk", "milk", "", None, "Soy"]) == ["Milk", "Soy"]
    assert normalize_allergy_set(None) == []


def test_synonym_table_is_read_only():
    with pytest.raises(TypeError):
        ALLERGEN_SYNONYMS["lupin"] = ("lupin",)


def test_synonym_table_is_lowercase():
    for allergy, terms in ALLERGEN_SYNONYMS.items():
        assert allergy == allergy.lower()
        assert all(term == term.lower() for term in terms)


def test_common_allergens_are_in_table():
    assert all(label.lower() in ALLERGEN_SYNONYMS for label in COMMON_ALLERGENS)
