"""GeneratorController — 자막 카드 스타일/출력 설정 및 PNG 생성 로직."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from PySide6.QtGui import QImage

from src.models.style import SubtitleStyle
from src.services.card_renderer import render_card
from src.services.output_writer import format_file_name, next_file_number, write_card
from src.utils.i18n import tr

if TYPE_CHECKING:
    from src.ui.controllers.app_context import AppContext

logger = logging.getLogger(__name__)


class GeneratorController:
    """Style edits, output folder handling and the generate action."""

    def __init__(self, ctx: AppContext) -> None:
        self.ctx = ctx

    # ---- 스타일 ----

    def update_style(self, **changes: Any) -> SubtitleStyle:
        """Apply field changes to the current style and persist the whole record."""
        style = self.ctx.style
        for name, value in changes.items():
            if name not in SubtitleStyle.field_names():
                raise AttributeError(f"Unknown style field: {name}")
            setattr(style, name, value)
        self.ctx.persist_style()
        return style

    def preview(self) -> QImage | None:
        """Render the current text for the preview (None when text is empty)."""
        if not self.ctx.text:
            return None
        return render_card(self.ctx.text, self.ctx.style)

    # ---- 출력 설정 ----

    def select_folder(self, path: str | None) -> bool:
        """Use *path* as the output folder. None/empty means the chooser was cancelled."""
        if not path:
            return False
        output = self.ctx.output
        output.save_path = str(Path(path))
        output.current_number = next_file_number(output.save_path, output.file_prefix)
        logger.info(f"Output folder: {output.save_path}, next number {output.current_number}")
        self.ctx.persist_output()
        return True

    def set_prefix(self, prefix: str) -> None:
        output = self.ctx.output
        output.file_prefix = prefix
        if output.save_path:
            output.current_number = next_file_number(output.save_path, prefix)
        self.ctx.persist_output()

    def set_current_number(self, number: int) -> None:
        self.ctx.output.current_number = max(1, number)
        self.ctx.persist_output()

    def set_insert_into_sequence(self, enabled: bool) -> None:
        self.ctx.output.insert_into_sequence = enabled
        self.ctx.persist_output()

    # ---- 생성 ----

    async def generate(self) -> Path | None:
        """Render, write, import. Returns the written path on success.

        Counter and text are only advanced after both the write and the host
        import succeed; a failed import removes the freshly written file.
        """
        ctx = self.ctx
        text = ctx.text
        output = ctx.output

        if not text.strip():
            ctx.show_status(tr("Enter subtitle text"))
            return None
        if not output.save_path:
            ctx.show_status(tr("Choose an output folder"))
            return None

        ctx.show_status(tr("Generating..."))

        image = render_card(text, ctx.style)
        if image is None:
            ctx.show_status(tr("Enter subtitle text"))
            return None

        number = output.current_number
        target = Path(output.save_path) / format_file_name(output.file_prefix, number)
        if target.exists():
            number = max(number, next_file_number(output.save_path, output.file_prefix))
            target = Path(output.save_path) / format_file_name(output.file_prefix, number)
            logger.info(f"Skipping existing file, using number {number}")

        if not write_card(image, target):
            ctx.show_status(tr("Error: could not write {name}").format(name=target.name))
            return None

        importer = ctx.bridge.import_and_insert if output.insert_into_sequence else ctx.bridge.import_asset
        try:
            imported = await importer(str(target))
        except Exception as e:
            logger.exception(f"Host import raised for {target}: {e}")
            imported = False

        if not imported:
            target.unlink(missing_ok=True)
            ctx.show_status(tr("Error: import failed for {name}").format(name=target.name))
            return None

        output.current_number = number + 1
        ctx.persist_output()
        ctx.set_text("")
        ctx.show_status(tr("Created: {name}").format(name=target.name))
        logger.info(f"Generated {target}")
        return target
