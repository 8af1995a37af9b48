"""Host application bridge abstraction.

The panel never touches the host's document/timeline object model directly.
It talks to an ``IHostBridge`` built once at startup and injected into the
controllers. Every call is a coroutine; implementations report failure by
returning False/None and may also raise, which callers catch.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from src.models.position_preset import ClipPosition

logger = logging.getLogger(__name__)


@runtime_checkable
class IHostBridge(Protocol):
    """Narrow capability surface of the host editing application."""

    async def import_asset(self, path: str) -> bool:
        """Import *path* into the project's media bin. False on failure."""
        ...

    async def import_and_insert(self, path: str) -> bool:
        """Import *path* and insert it at the playhead of the active sequence."""
        ...

    async def get_selected_clip_position(self) -> ClipPosition | None:
        """Return the selected clip's normalized position, or None if nothing is selected."""
        ...

    async def set_selected_clip_position(self, x: float, y: float) -> bool:
        """Move the selected clip to (x, y). False when no clip is selected."""
        ...

    async def clip_motion_info(self) -> dict:
        """Describe the selected clip's components and properties."""
        ...


class OfflineHostBridge:
    """In-process IHostBridge used when no host application is attached.

    Imports are recorded in ``imported`` (and, for ``import_and_insert``,
    ``sequence``); a single clip can be selected with ``select_clip``.
    """

    def __init__(self) -> None:
        self.imported: list[str] = []
        self.sequence: list[str] = []
        self._clip_name: str | None = None
        self._clip_position: ClipPosition | None = None

    # ---- test / demo helpers ----

    def select_clip(self, x: float, y: float, name: str = "Clip") -> None:
        self._clip_name = name
        self._clip_position = ClipPosition(x, y)

    def clear_selection(self) -> None:
        self._clip_name = None
        self._clip_position = None

    # ---- IHostBridge ----

    async def import_asset(self, path: str) -> bool:
        if not Path(path).is_file():
            logger.warning(f"Import skipped, file missing: {path}")
            return False
        self.imported.append(path)
        logger.info(f"Imported into bin: {path}")
        return True

    async def import_and_insert(self, path: str) -> bool:
        if not await self.import_asset(path):
            return False
        self.sequence.append(path)
        return True

    async def get_selected_clip_position(self) -> ClipPosition | None:
        return self._clip_position

    async def set_selected_clip_position(self, x: float, y: float) -> bool:
        if self._clip_position is None:
            return False
        self._clip_position = ClipPosition(x, y)
        return True

    async def clip_motion_info(self) -> dict:
        if self._clip_position is None:
            return {"error": "No clip selected"}
        return {
            "name": self._clip_name,
            "components": [
                {
                    "displayName": "Motion",
                    "properties": [
                        {
                            "displayName": "Position",
                            "value": [self._clip_position.x, self._clip_position.y],
                        },
                    ],
                },
            ],
        }
