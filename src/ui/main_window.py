"""Main panel window."""

from __future__ import annotations

from PySide6.QtWidgets import QMainWindow, QTabWidget

from src.infrastructure.host_bridge import IHostBridge, OfflineHostBridge
from src.services.settings_manager import SettingsManager
from src.ui.controllers.app_context import AppContext
from src.ui.controllers.generator_controller import GeneratorController
from src.ui.controllers.preset_controller import PresetController
from src.ui.generator_panel import GeneratorPanel
from src.ui.position_panel import PositionPanel
from src.utils.config import APP_NAME, APP_VERSION, PANEL_HEIGHT, PANEL_WIDTH
from src.utils.i18n import tr


class MainWindow(QMainWindow):
    """Two tabs (subtitle cards, position presets) over one AppContext."""

    def __init__(
        self,
        settings: SettingsManager | None = None,
        bridge: IHostBridge | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(f"{APP_NAME} {APP_VERSION}")
        self.resize(PANEL_WIDTH, PANEL_HEIGHT)

        self.ctx = AppContext(settings or SettingsManager(), bridge or OfflineHostBridge())
        self.ctx.on_status = lambda message: self.statusBar().showMessage(message)

        self.generator_ctrl = GeneratorController(self.ctx)
        self.preset_ctrl = PresetController(self.ctx)

        self._tabs = QTabWidget()
        self.generator_panel = GeneratorPanel(self.ctx, self.generator_ctrl)
        self.position_panel = PositionPanel(self.ctx, self.preset_ctrl)
        self._tabs.addTab(self.generator_panel, tr("Subtitle"))
        self._tabs.addTab(self.position_panel, tr("Position Presets"))
        self.setCentralWidget(self._tabs)
