"""
Merge engine for importing backups.

Merges are deterministic, order-preserving unions. Existing data always wins
an identity conflict, so an import can add entries but never overwrite or
remove local edits. Merging the same import twice adds nothing the second
time. Neither input is modified.
"""

from models import Favorites, ShoppingList, MergeResult, copy_favorites, copy_shopping_list
from utils import get_logger

logger = get_logger(__name__)


def merge_favorites(existing: Favorites, imported: Favorites) -> MergeResult[Favorites]:
    """
    Merge imported Favorites into existing ones.

    Categories are unioned: existing categories keep their order and new
    imported categories follow in imported order. Within a category an
    imported recipe is appended only when no recipe with the same name
    (case-insensitive) is already there.

    Args:
        existing: Current, validated Favorites
        imported: Validated Favorites from a backup

    Returns:
        MergeResult with the merged Favorites and the number of new recipes
    """
    merged = copy_favorites(existing)
    imported = copy_favorites(imported)
    new_count = 0

    for category, imported_recipes in imported.items():
        if category not in merged:
            merged[category] = []
        recipes = merged[category]
        known_keys = {recipe.comparison_key for recipe in recipes}

        for recipe in imported_recipes:
            if recipe.comparison_key in known_keys:
                logger.debug(f"Keeping existing '{recipe.recipe_name}' in '{category}'")
                continue
            recipes.append(recipe)
            known_keys.add(recipe.comparison_key)
            new_count += 1

    return MergeResult(merged=merged, new_count=new_count)


def merge_shopping_lists(existing: ShoppingList, imported: ShoppingList) -> MergeResult[ShoppingList]:
    """
    Append imported items whose text (trimmed, case-insensitive) is not
    already on the list, keeping existing order. Checked state is ignored
    for matching.
    """
    merged = copy_shopping_list(existing)
    known_keys = {item.comparison_key for item in merged}
    new_count = 0

    for item in copy_shopping_list(imported):
        if item.comparison_key in known_keys:
            continue
        merged.append(item)
        known_keys.add(item.comparison_key)
        new_count += 1

    return MergeResult(merged=merged, new_count=new_count)
