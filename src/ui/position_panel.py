"""Position preset tab: 3x3 grid of preset slots plus the save-mode toggle."""

from __future__ import annotations

import asyncio
import json

from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from src.models.position_preset import InteractionMode
from src.ui.controllers.app_context import AppContext
from src.ui.controllers.preset_controller import PresetController
from src.utils.config import PRESET_SLOT_COUNT
from src.utils.i18n import tr

_GRID_COLUMNS = 3


class PositionPanel(QWidget):
    """Nine preset buttons. Click applies; in save mode click stores."""

    def __init__(self, ctx: AppContext, controller: PresetController, parent=None):
        super().__init__(parent)
        self._ctx = ctx
        self._ctrl = controller

        layout = QVBoxLayout(self)
        title = QLabel(tr("Position Presets"))
        title.setStyleSheet("font-weight: bold;")
        layout.addWidget(title)

        grid = QGridLayout()
        self._slot_buttons: list[QPushButton] = []
        for i in range(PRESET_SLOT_COUNT):
            btn = QPushButton()
            btn.setMinimumSize(72, 56)
            btn.clicked.connect(lambda _=False, idx=i: self._on_slot_clicked(idx))
            grid.addWidget(btn, i // _GRID_COLUMNS, i % _GRID_COLUMNS)
            self._slot_buttons.append(btn)
        layout.addLayout(grid)

        actions = QHBoxLayout()
        self._save_btn = QPushButton(tr("Save"))
        self._save_btn.setCheckable(True)
        self._save_btn.clicked.connect(self._on_save_toggled)
        actions.addWidget(self._save_btn)

        inspect_btn = QPushButton(tr("Inspect clip"))
        inspect_btn.clicked.connect(self._on_inspect)
        actions.addWidget(inspect_btn)
        layout.addLayout(actions)

        self._hint_label = QLabel()
        self._hint_label.setWordWrap(True)
        self._hint_label.setStyleSheet("color: #aaa;")
        layout.addWidget(self._hint_label)
        layout.addStretch()

        ctx.on_presets_changed = self.refresh
        ctx.on_mode_changed = self.refresh
        self.refresh()

    def refresh(self) -> None:
        saving = self._ctx.mode is InteractionMode.SAVE
        for i, btn in enumerate(self._slot_buttons):
            preset = self._ctx.presets[i]
            if preset is None:
                btn.setText(str(i + 1))
                btn.setToolTip(tr("Empty"))
            else:
                btn.setText(f"{i + 1} ●")
                btn.setToolTip(f"{preset.name} ({preset.x:.3f}, {preset.y:.3f})")
            border = "#e0a030" if saving else "#555"
            btn.setStyleSheet(f"border: 1px solid {border}; border-radius: 4px;")

        self._save_btn.setChecked(saving)
        if saving:
            self._hint_label.setText(tr("Click a preset to store the selected clip's position"))
        else:
            self._hint_label.setText(tr("Click a preset to move the selected clip there"))

    def _on_save_toggled(self) -> None:
        self._ctrl.toggle_save_mode()

    def _on_slot_clicked(self, index: int) -> None:
        asyncio.run(self._ctrl.on_preset_clicked(index))

    def _on_inspect(self) -> None:
        info = asyncio.run(self._ctrl.inspect_clip())
        QMessageBox.information(
            self, tr("Clip info"), json.dumps(info, ensure_ascii=False, indent=2)
        )
