#!/usr/bin/env python3
"""
Test script for validation and recovery of stored collections.
Tests discarding of malformed entries, repairs, recovery notes and idempotence.
"""

import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from models import ShoppingListItem, favorites_to_dict, shopping_list_to_dicts
from services.validation_service import (
    validate_favorites, validate_shopping_list, FAVORITES_RESET_NOTE, SHOPPING_LIST_RESET_NOTE
)


def test_null_values_reset_with_note():
    """A decoded JSON null is not a collection and resets with a note"""
    print("\nTesting null values...")

    favorites = validate_favorites(None)
    assert favorites.value == {}, "Null favorites should be empty"
    assert favorites.note == FAVORITES_RESET_NOTE, "Null favorites must be reported"
    assert favorites.was_reset and favorites.needs_healing, "Null favorites must be rewritten"

    items = validate_shopping_list(None)
    assert items.value == []
    assert items.note == SHOPPING_LIST_RESET_NOTE
    assert items.was_reset

    print("[OK] Null values reset")


def test_corrupted_favorites_entries_are_dropped():
    """Entries without ingredients, of the wrong shape, or not objects are dropped"""
    print("\nTesting corrupted favorites entries...")

    raw = {"Desserts": [{"recipeName": "Cake"}, {"foo": 1}, "bad"]}
    result = validate_favorites(raw)

    assert result.value == {"Desserts": []}, f"Unexpected favorites: {result.value}"
    assert result.discarded_count == 3, f"Expected 3 discarded entries, got {result.discarded_count}"
    assert result.note == "Removed 3 invalid favorite entries.", f"Unexpected note: {result.note}"
    assert result.needs_healing, "Dropped entries must be healed in storage"

    print("[OK] Corrupted entries dropped and counted")


def test_favorites_category_checks():
    """Categories that are not lists or have empty names are dropped"""
    print("\nTesting favorites category checks...")

    raw = {
        "Soups": [{"recipeName": "Tomato Soup", "ingredients": ["tomato", "salt"]}],
        "Broken": "not a list",
        "": [{"recipeName": "Nameless Category", "ingredients": []}],
    }
    result = validate_favorites(raw)

    assert list(result.value.keys()) == ["Soups"], f"Unexpected categories: {list(result.value)}"
    assert result.value["Soups"][0].recipe_name == "Tomato Soup"
    assert result.discarded_count == 2
    assert result.note == "Removed 2 invalid favorite categories.", f"Unexpected note: {result.note}"

    print("[OK] Invalid categories dropped")


def test_recipe_field_checks():
    """recipeName must be a non-empty string and ingredients a list of strings"""
    print("\nTesting recipe field checks...")

    raw = {
        "Mains": [
            {"recipeName": "", "ingredients": ["rice"]},
            {"recipeName": "Fried Rice", "ingredients": ["rice", 2]},
            {"recipeName": "Paella", "ingredients": "rice, saffron"},
            {"recipeName": 42, "ingredients": []},
            {"recipeName": "Risotto", "ingredients": ["rice", "stock"]},
        ]
    }
    result = validate_favorites(raw)

    names = [recipe.recipe_name for recipe in result.value["Mains"]]
    assert names == ["Risotto"], f"Only Risotto should survive, got {names}"
    assert result.discarded_count == 4
    assert result.note == "Removed 4 invalid favorite entries."

    print("[OK] Recipe fields validated")


def test_legacy_recipe_without_date_added_is_kept():
    """Legacy recipes without dateAdded are accepted untouched"""
    print("\nTesting legacy recipes...")

    raw = {"Old": [{"recipeName": "Stew", "ingredients": ["beef"], "description": "Slow cooked"}]}
    result = validate_favorites(raw)

    recipe = result.value["Old"][0]
    assert recipe.date_added is None, "Missing dateAdded should stay missing"
    assert recipe.extra == {"description": "Slow cooked"}, "Other fields must be carried through"
    assert result.note is None
    assert not result.needs_healing, "Legacy data is valid and needs no rewrite"

    print("[OK] Legacy recipe kept as-is")


def test_malformed_optional_fields_are_repaired():
    """Malformed optional fields are cleared without discarding the recipe"""
    print("\nTesting optional field repairs...")

    raw = {"Mains": [{
        "recipeName": "Curry",
        "ingredients": ["chicken"],
        "dateAdded": 1700000000,
        "menuName": ["Sunday"],
        "favoritedBy": "user-1",
    }]}
    result = validate_favorites(raw)

    recipe = result.value["Mains"][0]
    assert recipe.date_added is None
    assert recipe.menu_name is None
    assert recipe.favorited_by is None
    assert result.repaired_count == 3, f"Expected 3 repairs, got {result.repaired_count}"
    assert result.discarded_count == 0
    assert result.note is None, "Repairs alone are not reported to the user"
    assert result.needs_healing, "Repairs must still be written back"

    print("[OK] Optional fields repaired")


def test_non_mapping_favorites_reset():
    """A top-level value that is not a mapping resets to empty with a note"""
    print("\nTesting favorites reset...")

    for raw in (["Cake"], "Cake", 3, True):
        result = validate_favorites(raw)
        assert result.value == {}, f"{raw!r} should reset favorites"
        assert result.note == FAVORITES_RESET_NOTE
        assert result.was_reset

    print("[OK] Non-mapping favorites reset")


def test_shopping_list_element_checks():
    """Elements must be objects with a non-empty string text"""
    print("\nTesting shopping list element checks...")

    raw = [
        {"text": "Milk"},
        {"text": 5},
        "bad",
        {"text": "   "},
        {"text": "Eggs", "checked": True},
        {"checked": True},
    ]
    result = validate_shopping_list(raw)

    assert result.value == [
        ShoppingListItem(text="Milk", checked=False),
        ShoppingListItem(text="Eggs", checked=True),
    ], f"Unexpected items: {result.value}"
    assert result.discarded_count == 4
    assert result.note == "Removed 4 invalid shopping list items."
    assert result.repaired_count == 1, "Missing checked on Milk counts as a repair"

    print("[OK] Shopping list elements validated")


def test_shopping_list_checked_repair():
    """A non-boolean checked value becomes False"""
    print("\nTesting checked repair...")

    result = validate_shopping_list([{"text": "Bread", "checked": "yes"}])
    assert result.value == [ShoppingListItem(text="Bread", checked=False)]
    assert result.repaired_count == 1
    assert result.note is None

    print("[OK] Checked state repaired")


def test_non_list_shopping_list_reset():
    """A top-level value that is not a list resets to empty with a note"""
    print("\nTesting shopping list reset...")

    result = validate_shopping_list({"text": "Milk"})
    assert result.value == []
    assert result.note == SHOPPING_LIST_RESET_NOTE
    assert result.was_reset

    print("[OK] Non-list shopping list reset")


def test_recovery_is_idempotent():
    """Validating an already validated collection changes nothing"""
    print("\nTesting recovery idempotence...")

    raw_favorites = {
        "Desserts": [{"recipeName": "Cake"}, {"recipeName": "Pie", "ingredients": ["apple"], "dateAdded": 5}],
        "Broken": {},
        "Mains": [{"recipeName": "Stew", "ingredients": ["beef"], "rating": 4}],
    }
    first = validate_favorites(raw_favorites)
    second = validate_favorites(favorites_to_dict(first.value))
    assert second.value == first.value, "Second validation must not change favorites"
    assert second.note is None
    assert not second.needs_healing

    raw_items = [{"text": "Milk"}, None, {"text": "Eggs", "checked": 1}]
    first_items = validate_shopping_list(raw_items)
    second_items = validate_shopping_list(shopping_list_to_dicts(first_items.value))
    assert second_items.value == first_items.value
    assert not second_items.needs_healing

    print("[OK] Recovery is idempotent")


if __name__ == "__main__":
    try:
        test_null_values_reset_with_note()
        test_corrupted_favorites_entries_are_dropped()
        test_favorites_category_checks()
        test_recipe_field_checks()
        test_legacy_recipe_without_date_added_is_kept()
        test_malformed_optional_fields_are_repaired()
        test_non_mapping_favorites_reset()
        test_shopping_list_element_checks()
        test_shopping_list_checked_repair()
        test_non_list_shopping_list_reset()
        test_recovery_is_idempotent()
        print("\n[SUCCESS] All validation tests passed!")
        sys.exit(0)
    except Exception as e:
        print(f"[ERROR] Validation test failed with error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
