"""ScoresDialog — read-only scoreboard table."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtWidgets import (
    QAbstractItemView,
    QDialog,
    QDialogButtonBox,
    QHeaderView,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from breakthrough.storage.models import ScoreEntry
from breakthrough.ui.i18n import side_name, t


class ScoresDialog(QDialog):
    """Shows ranked entries, best first."""

    def __init__(self, entries: Sequence[ScoreEntry], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        s = t()
        self.setWindowTitle(s.scores_title)
        self.setMinimumSize(560, 320)

        layout = QVBoxLayout(self)
        if not entries:
            layout.addWidget(QLabel(s.scores_empty))

        headers = [
            s.scores_col_rank,
            s.scores_col_winner,
            s.scores_col_side,
            s.scores_col_loser,
            s.scores_col_plies,
            s.scores_col_date,
        ]
        self._table = QTableWidget(len(entries), len(headers))
        self._table.setHorizontalHeaderLabels(headers)
        self._table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self._table.verticalHeader().setVisible(False)
        header = self._table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.Stretch)

        for row, e in enumerate(entries):
            cells = [
                str(row + 1),
                e.winner_name,
                side_name(e.winner_side),
                e.loser_name,
                str(e.ply_count),
                e.date_utc.strftime("%Y-%m-%d %H:%M"),
            ]
            for col, text in enumerate(cells):
                self._table.setItem(row, col, QTableWidgetItem(text))
        layout.addWidget(self._table)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    @property
    def table(self) -> QTableWidget:
        return self._table
