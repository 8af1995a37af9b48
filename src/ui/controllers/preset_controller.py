"""PresetController — 9칸 포지션 프리셋 저장/적용 상태 머신."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from src.models.position_preset import InteractionMode, PositionPreset
from src.utils.i18n import tr

if TYPE_CHECKING:
    from src.ui.controllers.app_context import AppContext

logger = logging.getLogger(__name__)


class PresetController:
    """Two-state (none/save) preset interaction.

    In ``SAVE`` mode a slot click stores the selected clip's position and
    always returns to ``NONE``. In ``NONE`` mode a slot click applies the
    stored position.
    """

    def __init__(self, ctx: AppContext) -> None:
        self.ctx = ctx

    def toggle_save_mode(self) -> InteractionMode:
        ctx = self.ctx
        if ctx.mode is InteractionMode.SAVE:
            ctx.set_mode(InteractionMode.NONE)
        else:
            ctx.set_mode(InteractionMode.SAVE)
        return ctx.mode

    async def on_preset_clicked(self, index: int) -> None:
        if self.ctx.mode is InteractionMode.SAVE:
            try:
                await self._save_slot(index)
            finally:
                self.ctx.set_mode(InteractionMode.NONE)
        else:
            await self._apply_slot(index)

    async def _save_slot(self, index: int) -> None:
        ctx = self.ctx
        try:
            pos = await ctx.bridge.get_selected_clip_position()
        except Exception as e:
            logger.exception(f"Reading clip position failed: {e}")
            ctx.show_status(tr("Failed to read clip position"))
            return

        if pos is None:
            ctx.show_status(tr("Select a clip first"))
            return

        ctx.presets.store(index, PositionPreset(x=pos.x, y=pos.y, name=f"Preset {index + 1}"))
        ctx.persist_presets()
        logger.info(f"Preset {index + 1} saved: ({pos.x}, {pos.y})")
        ctx.show_status(tr("Saved to preset {n}").format(n=index + 1))

    async def _apply_slot(self, index: int) -> None:
        ctx = self.ctx
        preset = ctx.presets.get(index)
        if preset is None:
            ctx.show_status(tr("No preset stored"))
            return

        try:
            ok = await ctx.bridge.set_selected_clip_position(preset.x, preset.y)
        except Exception as e:
            logger.exception(f"Applying preset {index + 1} failed: {e}")
            ok = False

        if ok:
            ctx.show_status(tr("Preset {n} applied").format(n=index + 1))
        else:
            ctx.show_status(tr("Failed to apply position"))

    async def inspect_clip(self) -> dict:
        """Return the selected clip's motion info (``{"error": ...}`` on failure)."""
        try:
            info = await self.ctx.bridge.clip_motion_info()
        except Exception as e:
            logger.exception(f"Clip inspection failed: {e}")
            return {"error": str(e)}
        return info if isinstance(info, dict) else {"error": tr("No clip selected")}
