"""UI Controllers — 패널 위젯과 상태/서비스 로직 분리.

각 Controller는 AppContext를 통해 공유 상태와 주입된 host bridge에 접근한다.
"""

from src.ui.controllers.app_context import AppContext
from src.ui.controllers.generator_controller import GeneratorController
from src.ui.controllers.preset_controller import PresetController

__all__ = ["AppContext", "GeneratorController", "PresetController"]
