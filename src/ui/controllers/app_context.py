"""AppContext — Controller 간 공유 상태 및 주입된 서비스.

MainWindow가 시작 시 한 번 생성하여 모든 Controller에 주입한다.
Controller는 self.ctx 로 접근.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from src.models.position_preset import InteractionMode

if TYPE_CHECKING:
    from src.infrastructure.host_bridge import IHostBridge
    from src.models.output_settings import OutputSettings
    from src.models.position_preset import PresetStore
    from src.models.style import SubtitleStyle
    from src.services.settings_manager import SettingsManager

logger = logging.getLogger(__name__)


class AppContext:
    """Panel state owned by a single panel instance.

    Records are loaded once from *settings*; every mutation goes through the
    ``persist_*`` helpers so the store always holds the latest whole record.
    """

    def __init__(self, settings: SettingsManager, bridge: IHostBridge) -> None:
        # ---- Injected services ----
        self.settings = settings
        self.bridge = bridge

        # ---- Persistent records ----
        self.style: SubtitleStyle = settings.load_style()
        self.output: OutputSettings = settings.load_output()
        self.presets: PresetStore = settings.load_presets()

        # ---- Transient state ----
        self.text: str = ""
        self.mode: InteractionMode = InteractionMode.NONE
        self.status: str = ""

        # ---- MainWindow 콜백 (Controller에서 호출) ----
        self.on_status: Callable[[str], None] = lambda message: None
        self.on_text_changed: Callable[[str], None] = lambda text: None
        self.on_output_changed: Callable[[], None] = lambda: None
        self.on_presets_changed: Callable[[], None] = lambda: None
        self.on_mode_changed: Callable[[], None] = lambda: None

    def show_status(self, message: str) -> None:
        self.status = message
        self.on_status(message)

    def set_text(self, text: str) -> None:
        self.text = text
        self.on_text_changed(text)

    def set_mode(self, mode: InteractionMode) -> None:
        if mode is not self.mode:
            self.mode = mode
            self.on_mode_changed()

    def persist_style(self) -> None:
        self.settings.save_style(self.style)

    def persist_output(self) -> None:
        self.settings.save_output(self.output)
        self.on_output_changed()

    def persist_presets(self) -> None:
        self.settings.save_presets(self.presets)
        self.on_presets_changed()
