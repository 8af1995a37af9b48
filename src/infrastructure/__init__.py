"""Infrastructure layer: external collaborators (the host editing application).

이 계층은 호스트 애플리케이션을 추상화하여 Controller 계층이
구현체에 직접 의존하지 않도록 합니다.
"""

from src.infrastructure.host_bridge import IHostBridge, OfflineHostBridge

__all__ = [
    "IHostBridge",
    "OfflineHostBridge",
]
