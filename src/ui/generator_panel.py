"""Subtitle card tab: text input, style form, output settings and live preview."""

from __future__ import annotations

import asyncio

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QFont, QPixmap
from PySide6.QtWidgets import (
    QCheckBox,
    QColorDialog,
    QComboBox,
    QFileDialog,
    QFontComboBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSlider,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from src.ui.controllers.app_context import AppContext
from src.ui.controllers.generator_controller import GeneratorController
from src.utils.config import (
    FONT_SIZE_RANGE,
    FONT_WEIGHTS,
    LETTER_SPACING_RANGE,
    PADDING_RANGE,
    PREVIEW_MAX_HEIGHT,
    RADIUS_RANGE,
    TEXT_OFFSET_RANGE,
)
from src.utils.i18n import tr


class GeneratorPanel(QWidget):
    """Edits the shared style/output records and triggers generation."""

    def __init__(self, ctx: AppContext, controller: GeneratorController, parent=None):
        super().__init__(parent)
        self._ctx = ctx
        self._ctrl = controller

        layout = QVBoxLayout(self)

        # Text input
        self._text_edit = QLineEdit()
        self._text_edit.setPlaceholderText(tr("Enter subtitle text..."))
        self._text_edit.textChanged.connect(self._on_text_changed)
        self._text_edit.returnPressed.connect(self._on_generate)
        layout.addWidget(QLabel(tr("Text")))
        layout.addWidget(self._text_edit)

        layout.addWidget(self._build_style_group())
        layout.addWidget(self._build_output_group())

        # Preview
        preview_group = QGroupBox(tr("Preview"))
        preview_layout = QVBoxLayout(preview_group)
        self._preview_label = QLabel()
        self._preview_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._preview_label.setMinimumHeight(60)
        self._preview_label.setStyleSheet(
            "background-color: #333; border: 1px solid #555; padding: 6px;"
        )
        preview_layout.addWidget(self._preview_label)
        layout.addWidget(preview_group)

        self._generate_btn = QPushButton(tr("Generate"))
        self._generate_btn.setMinimumHeight(36)
        self._generate_btn.clicked.connect(self._on_generate)
        layout.addWidget(self._generate_btn)
        layout.addStretch()

        ctx.on_text_changed = self._sync_text
        ctx.on_output_changed = self._sync_output

    # ------------------------------------------------------------------ Build

    def _build_style_group(self) -> QGroupBox:
        style = self._ctx.style
        group = QGroupBox(tr("Style"))
        form = QFormLayout(group)

        self._font_combo = QFontComboBox()
        self._font_combo.setCurrentFont(QFont(style.font_family))
        self._font_combo.currentFontChanged.connect(
            lambda f: self._set_style(font_family=f.family())
        )
        form.addRow(tr("Font:"), self._font_combo)

        self._size_spin = self._make_spin(FONT_SIZE_RANGE, style.font_size, "font_size")
        form.addRow(tr("Font size:"), self._size_spin)

        self._weight_combo = QComboBox()
        for label, value in FONT_WEIGHTS:
            self._weight_combo.addItem(tr(label), value)
        idx = self._weight_combo.findData(style.font_weight)
        self._weight_combo.setCurrentIndex(idx if idx >= 0 else 0)
        self._weight_combo.currentIndexChanged.connect(
            lambda _: self._set_style(font_weight=self._weight_combo.currentData())
        )
        form.addRow(tr("Weight:"), self._weight_combo)

        self._spacing_spin = self._make_spin(LETTER_SPACING_RANGE, style.letter_spacing, "letter_spacing")
        form.addRow(tr("Letter spacing:"), self._spacing_spin)

        self._text_color_btn = self._make_color_button(style.text_color, "text_color")
        form.addRow(tr("Text color:"), self._text_color_btn)

        self._bg_color_btn = self._make_color_button(style.bg_color, "bg_color")
        form.addRow(tr("Background color:"), self._bg_color_btn)

        opacity_row = QHBoxLayout()
        self._opacity_slider = QSlider(Qt.Orientation.Horizontal)
        self._opacity_slider.setRange(0, 100)
        self._opacity_slider.setValue(style.bg_opacity)
        self._opacity_label = QLabel(f"{style.bg_opacity}%")
        self._opacity_slider.valueChanged.connect(self._on_opacity_changed)
        opacity_row.addWidget(self._opacity_slider)
        opacity_row.addWidget(self._opacity_label)
        form.addRow(tr("Background opacity:"), opacity_row)

        self._padding_v_spin = self._make_spin(PADDING_RANGE, style.padding_v, "padding_v")
        form.addRow(tr("Padding (vertical):"), self._padding_v_spin)
        self._padding_h_spin = self._make_spin(PADDING_RANGE, style.padding_h, "padding_h")
        form.addRow(tr("Padding (horizontal):"), self._padding_h_spin)
        self._radius_spin = self._make_spin(RADIUS_RANGE, style.border_radius, "border_radius")
        form.addRow(tr("Corner radius:"), self._radius_spin)
        self._offset_spin = self._make_spin(TEXT_OFFSET_RANGE, style.text_offset_y, "text_offset_y")
        form.addRow(tr("Text offset Y:"), self._offset_spin)
        return group

    def _build_output_group(self) -> QGroupBox:
        output = self._ctx.output
        group = QGroupBox(tr("Output"))
        form = QFormLayout(group)

        path_row = QHBoxLayout()
        self._path_edit = QLineEdit(output.save_path)
        self._path_edit.setReadOnly(True)
        self._path_edit.setPlaceholderText(tr("Choose folder..."))
        browse_btn = QPushButton(tr("Browse..."))
        browse_btn.clicked.connect(self._on_browse)
        path_row.addWidget(self._path_edit)
        path_row.addWidget(browse_btn)
        form.addRow(tr("Save folder:"), path_row)

        self._prefix_edit = QLineEdit(output.file_prefix)
        self._prefix_edit.editingFinished.connect(
            lambda: self._ctrl.set_prefix(self._prefix_edit.text())
        )
        form.addRow(tr("File prefix:"), self._prefix_edit)

        self._number_spin = QSpinBox()
        self._number_spin.setRange(1, 999999)
        self._number_spin.setValue(output.current_number)
        self._number_spin.editingFinished.connect(
            lambda: self._ctrl.set_current_number(self._number_spin.value())
        )
        form.addRow(tr("Next number:"), self._number_spin)

        self._insert_check = QCheckBox(tr("Insert into active sequence"))
        self._insert_check.setChecked(output.insert_into_sequence)
        self._insert_check.toggled.connect(self._ctrl.set_insert_into_sequence)
        form.addRow("", self._insert_check)
        return group

    def _make_spin(self, value_range: tuple[int, int], value: int, field: str) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(*value_range)
        spin.setValue(value)
        spin.valueChanged.connect(lambda v: self._set_style(**{field: v}))
        return spin

    def _make_color_button(self, hex_color: str, field: str) -> QPushButton:
        btn = QPushButton()
        btn.setFixedSize(60, 24)
        self._set_button_color(btn, hex_color)
        btn.clicked.connect(lambda: self._pick_color(btn, field))
        return btn

    def _set_button_color(self, btn: QPushButton, hex_color: str) -> None:
        btn.setProperty("color_hex", hex_color)
        btn.setStyleSheet(f"background-color: {hex_color}; border: 1px solid #888;")

    # ------------------------------------------------------------------ Slots

    def _pick_color(self, btn: QPushButton, field: str) -> None:
        current = QColor(btn.property("color_hex"))
        color = QColorDialog.getColor(current, self, tr("Select Color"))
        if color.isValid():
            self._set_button_color(btn, color.name())
            self._set_style(**{field: color.name()})

    def _on_opacity_changed(self, value: int) -> None:
        self._opacity_label.setText(f"{value}%")
        self._set_style(bg_opacity=value)

    def _set_style(self, **changes) -> None:
        self._ctrl.update_style(**changes)
        self.update_preview()

    def _on_text_changed(self, text: str) -> None:
        self._ctx.text = text
        self.update_preview()

    def _on_browse(self) -> None:
        path = QFileDialog.getExistingDirectory(
            self, tr("Select output folder"), self._ctx.output.save_path
        )
        self._ctrl.select_folder(path or None)

    def _on_generate(self) -> None:
        self._generate_btn.setEnabled(False)
        try:
            asyncio.run(self._ctrl.generate())
        finally:
            self._generate_btn.setEnabled(True)

    # ------------------------------------------------------------------ Sync

    def update_preview(self) -> None:
        """Re-render the preview; empty text leaves the last preview untouched."""
        image = self._ctrl.preview()
        if image is None:
            return
        pixmap = QPixmap.fromImage(image)
        if pixmap.height() > PREVIEW_MAX_HEIGHT or pixmap.width() > self._preview_label.width():
            pixmap = pixmap.scaled(
                max(1, self._preview_label.width() - 12), PREVIEW_MAX_HEIGHT,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        self._preview_label.setPixmap(pixmap)

    def _sync_text(self, text: str) -> None:
        if self._text_edit.text() != text:
            self._text_edit.setText(text)

    def _sync_output(self) -> None:
        output = self._ctx.output
        self._path_edit.setText(output.save_path)
        if self._prefix_edit.text() != output.file_prefix:
            self._prefix_edit.setText(output.file_prefix)
        self._number_spin.blockSignals(True)
        self._number_spin.setValue(output.current_number)
        self._number_spin.blockSignals(False)
