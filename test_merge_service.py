#!/usr/bin/env python3
"""
Test script for the merge engine.
Tests existing-wins conflicts, order-preserving unions and repeat imports.
"""

import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from models import Recipe, ShoppingListItem, copy_favorites, copy_shopping_list
from services.merge_service import merge_favorites, merge_shopping_lists


def recipe(name, *ingredients):
    return Recipe(recipe_name=name, ingredients=list(ingredients))


def test_existing_recipe_wins_conflict():
    """An imported recipe with a known name never replaces the local one"""
    print("\nTesting favorites conflict...")

    existing = {"Lunch": [recipe("Soup", "a")]}
    imported = {"Lunch": [recipe("soup", "b")]}
    result = merge_favorites(existing, imported)

    assert result.merged == {"Lunch": [recipe("Soup", "a")]}, f"Unexpected merge: {result.merged}"
    assert result.new_count == 0

    print("[OK] Existing recipe kept")


def test_categories_are_unioned_in_order():
    """Existing categories keep their order; new ones follow in imported order"""
    print("\nTesting category union...")

    existing = {"Lunch": [recipe("Soup", "a")], "Dinner": [recipe("Stew", "beef")]}
    imported = {
        "Snacks": [recipe("Nuts", "almonds")],
        "Lunch": [recipe("Salad", "lettuce"), recipe("SOUP ", "x")],
        "Brunch": [],
    }
    result = merge_favorites(existing, imported)

    assert list(result.merged) == ["Lunch", "Dinner", "Snacks", "Brunch"]
    assert [r.recipe_name for r in result.merged["Lunch"]] == ["Soup", "Salad"]
    assert result.merged["Brunch"] == []
    assert result.new_count == 2, f"Expected 2 new recipes, got {result.new_count}"

    print("[OK] Categories unioned")


def test_duplicates_within_import_are_added_once():
    """Repeated names inside the imported category only add the first"""
    print("\nTesting duplicates inside an import...")

    result = merge_favorites({}, {"Desserts": [recipe("Pie", "apple"), recipe("pie", "cherry")]})

    assert result.merged == {"Desserts": [recipe("Pie", "apple")]}
    assert result.new_count == 1

    print("[OK] Import duplicates collapsed")


def test_favorites_merge_is_idempotent():
    """Merging the same import again adds nothing and changes nothing"""
    print("\nTesting favorites idempotence...")

    existing = {"Lunch": [recipe("Soup", "a")]}
    imported = {"Lunch": [recipe("Salad", "lettuce")], "Dinner": [recipe("Stew", "beef")]}

    first = merge_favorites(existing, imported)
    second = merge_favorites(first.merged, imported)
    assert second.new_count == 0
    assert second.merged == first.merged

    assert merge_favorites(existing, first.merged).merged == first.merged

    print("[OK] Favorites merge idempotent")


def test_favorites_inputs_not_mutated():
    """Neither input is changed and the result shares no objects with them"""
    print("\nTesting favorites inputs...")

    existing = {"Lunch": [recipe("Soup", "a")]}
    imported = {"Lunch": [recipe("Salad", "lettuce")], "New": [recipe("Tea", "leaves")]}
    existing_before = copy_favorites(existing)
    imported_before = copy_favorites(imported)

    result = merge_favorites(existing, imported)
    result.merged["Lunch"][1].ingredients.append("dressing")
    result.merged["New"].clear()

    assert existing == existing_before, "Existing favorites were modified"
    assert imported == imported_before, "Imported favorites were modified"

    print("[OK] Favorites inputs untouched")


def test_shopping_lists_merge_ignores_checked_state():
    """Items match on trimmed, case-insensitive text regardless of checked"""
    print("\nTesting shopping list merge...")

    existing = [ShoppingListItem("Milk", checked=True), ShoppingListItem("Eggs")]
    imported = [
        ShoppingListItem(" milk", checked=False),
        ShoppingListItem("Bread", checked=True),
        ShoppingListItem("BREAD"),
        ShoppingListItem("Eggs", checked=True),
    ]
    result = merge_shopping_lists(existing, imported)

    assert result.merged == [
        ShoppingListItem("Milk", checked=True),
        ShoppingListItem("Eggs"),
        ShoppingListItem("Bread", checked=True),
    ], f"Unexpected merge: {result.merged}"
    assert result.new_count == 1

    print("[OK] Shopping lists merged")


def test_shopping_lists_merge_is_idempotent():
    """A repeated import adds no items and existing input is untouched"""
    print("\nTesting shopping list idempotence...")

    existing = [ShoppingListItem("Milk")]
    imported = [ShoppingListItem("Flour"), ShoppingListItem("Sugar", checked=True)]
    existing_before = copy_shopping_list(existing)

    first = merge_shopping_lists(existing, imported)
    second = merge_shopping_lists(first.merged, imported)

    assert first.new_count == 2
    assert second.new_count == 0
    assert second.merged == first.merged
    assert existing == existing_before

    print("[OK] Shopping list merge idempotent")


if __name__ == "__main__":
    try:
        test_existing_recipe_wins_conflict()
        test_categories_are_unioned_in_order()
        test_duplicates_within_import_are_added_once()
        test_favorites_merge_is_idempotent()
        test_favorites_inputs_not_mutated()
        test_shopping_lists_merge_ignores_checked_state()
        test_shopping_lists_merge_is_idempotent()
        print("\n[SUCCESS] All merge tests passed!")
        sys.exit(0)
    except Exception as e:
        print(f"[ERROR] Merge test failed with error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
