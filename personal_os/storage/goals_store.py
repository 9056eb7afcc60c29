#!/usr/bin/env python3
"""
goals_store.py
--------------------
Read and write goal files by timeframe.

Goal files are edited as whole documents. Work in progress can be saved
as a draft in ``goals/.drafts`` under the same filename; writing the goal
file discards its draft.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local imports ---
from personal_os.core.exceptions import RecordNotFoundError, ValidationError
from personal_os.core.logging_manager import PersonalOSLogger, safe_logger
from personal_os.dataclasses.enums import Timeframe
from personal_os.dataclasses.goal_snapshot import (
    GoalSnapshot,
    goals_snapshot,
    parse_frontmatter,
    timeframe_to_filename,
)
from personal_os.storage.decorators import handle_storage_errors, log_store_operation

SNAPSHOT_TIMEFRAME = Timeframe.ONE_YEAR.value


class GoalsStore:
    """
    Store for ``goals/<timeframe>.md``.

    Attributes:
        directory: Goals directory
        drafts_directory: Directory of unsaved drafts
        logger: Optional logger for operation tracking
    """

    def __init__(
        self,
        directory: Path,
        drafts_directory: Optional[Path] = None,
        logger: Optional[PersonalOSLogger] = None,
    ):
        self.directory = Path(directory)
        self.drafts_directory = (
            Path(drafts_directory) if drafts_directory else self.directory / ".drafts"
        )
        self.logger = logger

    def path_for(self, timeframe: str) -> Path:
        return self.directory / timeframe_to_filename(timeframe)

    def draft_path_for(self, timeframe: str) -> Path:
        return self.drafts_directory / timeframe_to_filename(timeframe)

    def _read(self, timeframe: str) -> str:
        path = self.path_for(timeframe)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise RecordNotFoundError(f"Goal file for {timeframe} not found")

    @handle_storage_errors("Failed to read goal file")
    def read(self, timeframe: str) -> Dict[str, Any]:
        """
        Read a goal file with its frontmatter metadata.

        Returns:
            ``{"content": full text, "metadata": frontmatter mapping}``;
            dates in the metadata are ISO strings

        Raises:
            ValidationError: If the timeframe is unknown
            RecordNotFoundError: If the goal file does not exist
            StorageError: If the file cannot be read
        """
        content = self._read(timeframe)
        metadata = parse_frontmatter(content).metadata
        return {"content": content, "metadata": metadata or {}}

    @log_store_operation("write_goal_file")
    @handle_storage_errors("Failed to write goal file")
    def write(self, timeframe: str, content: Any) -> Path:
        """
        Replace a goal file and drop its draft.

        Raises:
            ValidationError: If the timeframe is unknown or content is empty
            StorageError: If the file cannot be written
        """
        path = self.path_for(timeframe)
        if content is None:
            raise ValidationError("Missing required field: content")
        if not isinstance(content, str) or not content.strip():
            raise ValidationError("Invalid or empty content")

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

        self.delete_draft(timeframe)
        return path

    # ---- Drafts ----
    @handle_storage_errors("Failed to read draft")
    def read_draft(self, timeframe: str) -> str:
        """
        Return the saved draft for a timeframe.

        Raises:
            ValidationError: If the timeframe is unknown
            RecordNotFoundError: If there is no draft
            StorageError: If the draft cannot be read
        """
        path = self.draft_path_for(timeframe)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise RecordNotFoundError(f"No draft found for {timeframe}")

    @log_store_operation("save_goal_draft")
    @handle_storage_errors("Failed to save draft")
    def save_draft(self, timeframe: str, content: Any) -> Path:
        """
        Save work in progress for a goal file.

        Unlike ``write``, an empty draft is allowed.

        Raises:
            ValidationError: If the timeframe is unknown or content is not a string
            StorageError: If the draft cannot be written
        """
        path = self.draft_path_for(timeframe)
        if content is None:
            raise ValidationError("Missing required field: content")
        if not isinstance(content, str):
            raise ValidationError("Invalid content type")

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    @handle_storage_errors("Failed to delete draft")
    def delete_draft(self, timeframe: str) -> bool:
        """
        Discard the draft for a timeframe, if there is one.

        Returns:
            True if a draft was removed
        """
        path = self.draft_path_for(timeframe)
        if not path.exists():
            return False
        path.unlink()
        safe_logger(self.logger).log_debug("Cleared goal draft", {"file": str(path)})
        return True

    @handle_storage_errors("Failed to read goals file")
    def snapshot(self, limit: Optional[int] = None) -> List[GoalSnapshot]:
        """
        Dashboard snapshot of the 1-year goals.

        Raises:
            RecordNotFoundError: If the 1-year goal file does not exist
            StorageError: If the file cannot be read
        """
        content = self._read(SNAPSHOT_TIMEFRAME)
        if limit is None:
            return goals_snapshot(content)
        return goals_snapshot(content, limit=limit)
