"""
Backup import/export for Recipe Keeper.

Builds the BackupData envelope from both stores and imports one back by
validating each part on its own and merging it into the current data.
File handling stays with the caller; this service works on text and
decoded values only.
"""

from typing import Any, Dict, Optional, Union

from models import BackupData, ImportResult, RecoveryResult
from models.backup_models import FAVORITES_FIELD, SHOPPING_LIST_FIELD
from utils import get_logger, log_operation
from .exceptions import CodecError
from .favorites_service import FavoritesService
from .serialization import decode, encode
from .shopping_list_service import ShoppingListService
from .validation_service import validate_favorites, validate_shopping_list

logger = get_logger(__name__)


UNREADABLE_BACKUP_NOTE = "The backup file could not be read; nothing was imported."
INVALID_BACKUP_NOTE = "The backup file does not contain backup data; nothing was imported."


class BackupService:
    """Exports and imports both collections as one backup"""

    def __init__(self, favorites_service: Optional[FavoritesService] = None,
                 shopping_list_service: Optional[ShoppingListService] = None):
        self.favorites_service = favorites_service or FavoritesService()
        self.shopping_list_service = shopping_list_service or ShoppingListService()

    def export_backup(self) -> BackupData:
        """Snapshot of both stores"""
        return BackupData(
            favorites=self.favorites_service.load().collection,
            shopping_list=self.shopping_list_service.load().collection,
            exported_at=self.favorites_service.clock().isoformat()
        )

    def export_json(self) -> str:
        return encode(self.export_backup().to_dict())

    def parse_backup(self, text: str) -> RecoveryResult[Dict[str, Any]]:
        """
        Decode backup text into its raw envelope.
        Unreadable text or a non-object top level yields an empty envelope
        and a note instead of raising.
        """
        try:
            raw = decode(text)
        except CodecError as e:
            logger.warning(f"Rejected backup: {e}")
            return RecoveryResult(value={}, note=UNREADABLE_BACKUP_NOTE, was_reset=True)

        if not isinstance(raw, dict):
            logger.warning(f"Rejected backup: top level is a {type(raw).__name__}")
            return RecoveryResult(value={}, note=INVALID_BACKUP_NOTE, was_reset=True)

        return RecoveryResult(value=raw)

    def import_backup(self, payload: Union[str, Dict[str, Any]]) -> ImportResult:
        """
        Merge a backup into the current collections.

        Each present part is validated independently and merged with
        existing data winning conflicts. A missing part leaves its store
        untouched. Recovery notes from validation are collected in the result.

        Args:
            payload: Backup JSON text or an already-decoded envelope

        Returns:
            ImportResult with merged collections, new-entry counts and notes
        """
        notes = []
        if isinstance(payload, str):
            parsed = self.parse_backup(payload)
            envelope = parsed.value
            if parsed.note:
                notes.append(parsed.note)
        elif isinstance(payload, dict):
            envelope = payload
        else:
            envelope = {}
            notes.append(INVALID_BACKUP_NOTE)

        with log_operation(logger, "Importing backup") as op:
            favorites = self.favorites_service.load().collection
            new_recipes = 0
            if envelope.get(FAVORITES_FIELD) is not None:
                recovered = validate_favorites(envelope[FAVORITES_FIELD])
                if recovered.note:
                    notes.append(recovered.note)
                result = self.favorites_service.merge(favorites, recovered.value)
                self.favorites_service.save(result.merged)
                favorites, new_recipes = result.merged, result.new_count
                op.info(f"{new_recipes} new recipe(s)")

            shopping_list = self.shopping_list_service.load().collection
            new_items = 0
            if envelope.get(SHOPPING_LIST_FIELD) is not None:
                recovered = validate_shopping_list(envelope[SHOPPING_LIST_FIELD])
                if recovered.note:
                    notes.append(recovered.note)
                result = self.shopping_list_service.merge(shopping_list, recovered.value)
                self.shopping_list_service.save(result.merged)
                shopping_list, new_items = result.merged, result.new_count
                op.info(f"{new_items} new shopping list item(s)")

        return ImportResult(
            favorites=favorites,
            shopping_list=shopping_list,
            new_recipes_count=new_recipes,
            new_items_count=new_items,
            notes=notes
        )
