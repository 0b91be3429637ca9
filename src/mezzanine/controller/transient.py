"""
Transient Graphics
==================
Owns the preview lines drawn while the operator sketches.

Every preview is created in its own small transaction so it shows up
immediately. Used as a context manager, the manager removes whatever is still
held when the block exits, whichever way it exits.
"""
from __future__ import annotations

import logging
from types import TracebackType
from typing import Optional, TYPE_CHECKING

from mezzanine import config
from mezzanine.host.base import transaction
from mezzanine.model.geometry_primitives import Line

if TYPE_CHECKING:
    from mezzanine.host.base import ElementId, HostDocument
    from mezzanine.model.geometry_primitives import Point

logger = logging.getLogger(__name__)


class TransientGraphicsManager:
    def __init__(self, document: HostDocument) -> None:
        self.document = document
        self._handles: list[ElementId] = []

    @property
    def handles(self) -> list[ElementId]:
        return list(self._handles)

    def add_preview_segment(self, p1: Point, p2: Point) -> ElementId:
        with transaction(self.document, config.PREVIEW_TRANSACTION):
            handle = self.document.create_preview_segment(Line(start=p1, end=p2))
        self._handles.append(handle)
        return handle

    def discard_in_transaction(self) -> None:
        """Delete previews inside the caller's open transaction. Call mark_released() once it commits."""
        if self._handles:
            self.document.delete_entities(self._handles)

    def mark_released(self) -> None:
        self._handles.clear()

    def release_all(self) -> None:
        """Delete every held preview. Safe to call repeatedly."""
        if not self._handles:
            return
        logger.debug(f"Removing {len(self._handles)} preview lines.")
        with transaction(self.document, config.CLEANUP_TRANSACTION):
            self.document.delete_entities(self._handles)
        self._handles.clear()

    def __enter__(self) -> TransientGraphicsManager:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> bool:
        try:
            self.release_all()
        except Exception as e:
            if exc is None:
                raise
            # Keep the original failure; the cleanup error only goes to the log.
            logger.error(f"Could not remove preview lines: {e}")
        return False
