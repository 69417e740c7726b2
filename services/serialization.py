"""
Serialization codec for persisted collections.

Converts collections between their in-memory models and the JSON text kept
in the key-value store. Pure and stateless.
"""

import json
from typing import Any

from models import Favorites, ShoppingList, favorites_to_dict, shopping_list_to_dicts
from .exceptions import CodecError


def encode(data: Any) -> str:
    """Serialize plain data to a complete JSON string"""
    # Non-ASCII text, lone surrogates included, is written as \u escapes
    return json.dumps(data, ensure_ascii=True)


def decode(text: str) -> Any:
    """Parse persisted JSON text, raising CodecError on malformed input"""
    try:
        return json.loads(text)
    except (ValueError, TypeError, RecursionError) as e:
        raise CodecError(f"Stored data is not valid JSON: {e}") from e


def encode_favorites(favorites: Favorites) -> str:
    return encode(favorites_to_dict(favorites))


def encode_shopping_list(items: ShoppingList) -> str:
    return encode(shopping_list_to_dicts(items))
