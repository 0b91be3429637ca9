"""
Modal Dialog for the Mezzanine Height
"""
from __future__ import annotations

from PySide6.QtWidgets import QDialog, QDialogButtonBox, QLabel, QLineEdit, QVBoxLayout, QWidget

from mezzanine.controller.height import HEIGHT_ABANDONED, parse_height_text


class HeightDialog(QDialog):
    """Single text field pre-filled with a default, OK / Cancel."""

    def __init__(self, prompt_text: str, default_value: str, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle(prompt_text)
        self.setModal(True)
        self.setMinimumWidth(396)

        layout = QVBoxLayout(self)
        layout.addWidget(QLabel(prompt_text, self))

        self.edit = QLineEdit(default_value, self)
        self.edit.selectAll()
        layout.addWidget(self.edit)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.button(QDialogButtonBox.Ok).setText(self.tr("OK"))
        buttons.button(QDialogButtonBox.Cancel).setText(self.tr("Cancel"))
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def text(self) -> str:
        return self.edit.text()


class QtHeightPrompt:
    """HeightPrompt backed by HeightDialog."""

    def __init__(self, parent: QWidget | None = None):
        self.parent = parent

    def ask(self, prompt_text: str, default_value: str) -> float:
        dialog = HeightDialog(prompt_text, default_value, self.parent)
        if not dialog.exec():  # Rejected == 0
            return HEIGHT_ABANDONED
        return parse_height_text(dialog.text())
