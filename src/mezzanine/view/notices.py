from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


class MessageBoxNotifier:
    """Shows notices as modal message boxes."""

    def __init__(self, parent: QWidget | None = None):
        self.parent = parent

    def show(self, title: str, message: str) -> None:
        QMessageBox.information(self.parent, title, message)
