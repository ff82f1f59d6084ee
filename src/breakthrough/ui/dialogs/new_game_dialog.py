"""NewGameDialog — player names before starting a new game."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)

from breakthrough.ui.i18n import t


class NewGameDialog(QDialog):
    """Modal dialog asking for both player names. Blank names are allowed."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumWidth(320)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )
        s = t()
        self.setWindowTitle(s.new_game_title)

        layout = QVBoxLayout(self)
        form = QFormLayout()
        self._white_edit = QLineEdit()
        self._white_edit.setPlaceholderText(s.color_white)
        self._black_edit = QLineEdit()
        self._black_edit.setPlaceholderText(s.color_black)
        form.addRow(s.new_game_white_name, self._white_edit)
        form.addRow(s.new_game_black_name, self._black_edit)
        layout.addLayout(form)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def names(self) -> tuple[str, str]:
        return self._white_edit.text().strip(), self._black_edit.text().strip()
