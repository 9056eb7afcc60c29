#!/usr/bin/env python3
"""
life_map_store.py
--------------------
Read and update the Life Map file.

Updates rewrite only the scores table. Prose written around the table in
``life_map.md`` is kept byte for byte.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, Optional

# --- Local imports ---
from personal_os.core.exceptions import RecordNotFoundError
from personal_os.core.logging_manager import PersonalOSLogger, safe_logger
from personal_os.dataclasses.life_map import LifeMap, parse_life_map
from personal_os.storage.decorators import handle_storage_errors, log_store_operation
from personal_os.utils.md import get_text_hash
from personal_os.validators.review import ReviewValidator


class LifeMapStore:
    """
    Store for ``frameworks/life_map.md``.

    Attributes:
        path: Life map file
        logger: Optional logger for operation tracking
    """

    def __init__(self, path: Path, logger: Optional[PersonalOSLogger] = None):
        self.path = Path(path)
        self.logger = logger

    def _read(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise RecordNotFoundError(f"Life map file not found: {self.path}")

    @handle_storage_errors("Failed to read life map")
    def load(self) -> LifeMap:
        """
        Parse the Life Map.

        Raises:
            RecordNotFoundError: If the file does not exist
            StorageError: If the file cannot be read
        """
        return parse_life_map(self._read())

    @log_store_operation("update_life_map")
    @handle_storage_errors("Failed to write life map file")
    def update(self, data: Any) -> LifeMap:
        """
        Apply a partial update and rewrite the scores table.

        Args:
            data: ``{"domains": {key: {"score"?: number, "assessment"?: str}}}``

        Returns:
            The LifeMap as written

        Raises:
            ValidationError: If the payload is malformed
            RecordNotFoundError: If the file does not exist
            StorageError: If the file cannot be read or written
        """
        updates = ReviewValidator.validate_life_map_update(data)

        content = self._read()
        life_map = LifeMap.from_markdown_text(content)
        life_map.merge_update(updates)

        new_content = life_map.update_file_text(content)
        if get_text_hash(new_content) == get_text_hash(content):
            safe_logger(self.logger).log_debug("Life map unchanged, skipping write")
            return life_map

        self.path.write_text(new_content, encoding="utf-8")

        safe_logger(self.logger).log_info(
            "Updated life map", {"domains": sorted(updates)}
        )
        return life_map
