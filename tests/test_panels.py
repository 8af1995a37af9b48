"""Panel widget tests (pytest-qt) against the offline host bridge."""

from __future__ import annotations

import pytest
from PySide6.QtCore import Qt

from src.infrastructure.host_bridge import OfflineHostBridge
from src.models.position_preset import InteractionMode, PositionPreset
from src.ui.main_window import MainWindow


@pytest.fixture
def bridge():
    return OfflineHostBridge()


@pytest.fixture
def window(qtbot, settings_manager, bridge):
    win = MainWindow(settings=settings_manager, bridge=bridge)
    qtbot.addWidget(win)
    return win


class TestGeneratorPanel:
    def test_typing_updates_context_and_preview(self, window):
        panel = window.generator_panel
        panel._text_edit.setText("Hello")
        assert window.ctx.text == "Hello"
        assert panel._preview_label.pixmap() is not None
        assert not panel._preview_label.pixmap().isNull()

    def test_generate_button(self, window, qtbot, bridge, tmp_path):
        window.generator_ctrl.select_folder(str(tmp_path))
        panel = window.generator_panel
        panel._text_edit.setText("Hello")

        qtbot.mouseClick(panel._generate_btn, Qt.MouseButton.LeftButton)

        assert (tmp_path / "sub_001.png").is_file()
        assert bridge.imported == [str(tmp_path / "sub_001.png")]
        assert panel._text_edit.text() == ""
        assert panel._number_spin.value() == 2
        assert window.statusBar().currentMessage() == "Created: sub_001.png"

    def test_generate_without_folder(self, window, qtbot):
        panel = window.generator_panel
        panel._text_edit.setText("Hello")
        qtbot.mouseClick(panel._generate_btn, Qt.MouseButton.LeftButton)
        assert panel._text_edit.text() == "Hello"
        assert window.statusBar().currentMessage() == "Choose an output folder"

    def test_style_spin_persists(self, window, settings_manager):
        window.generator_panel._size_spin.setValue(30)
        assert window.ctx.style.font_size == 30
        assert settings_manager.load_style().font_size == 30

    def test_opacity_slider_label(self, window):
        panel = window.generator_panel
        panel._opacity_slider.setValue(25)
        assert panel._opacity_label.text() == "25%"
        assert window.ctx.style.bg_opacity == 25

    def test_folder_selection_refreshes_fields(self, window, tmp_path):
        (tmp_path / "sub_003.png").write_bytes(b"")
        window.generator_ctrl.select_folder(str(tmp_path))
        panel = window.generator_panel
        assert panel._path_edit.text() == str(tmp_path)
        assert panel._number_spin.value() == 4


class TestPositionPanel:
    def test_save_then_apply(self, window, qtbot, bridge):
        panel = window.position_panel
        bridge.select_clip(0.2, 0.4)

        qtbot.mouseClick(panel._save_btn, Qt.MouseButton.LeftButton)
        assert window.ctx.mode is InteractionMode.SAVE
        assert panel._save_btn.isChecked()

        qtbot.mouseClick(panel._slot_buttons[0], Qt.MouseButton.LeftButton)
        assert window.ctx.presets.get(0) == PositionPreset(0.2, 0.4, "Preset 1")
        assert window.ctx.mode is InteractionMode.NONE
        assert not panel._save_btn.isChecked()
        assert "●" in panel._slot_buttons[0].text()

        bridge.select_clip(0.9, 0.9)
        qtbot.mouseClick(panel._slot_buttons[0], Qt.MouseButton.LeftButton)
        assert window.statusBar().currentMessage() == "Preset 1 applied"

    def test_apply_empty_slot(self, window, qtbot, bridge):
        bridge.select_clip(0.5, 0.5)
        qtbot.mouseClick(window.position_panel._slot_buttons[8], Qt.MouseButton.LeftButton)
        assert window.statusBar().currentMessage() == "No preset stored"

    def test_presets_loaded_from_settings(self, qtbot, settings_manager, bridge):
        store = settings_manager.load_presets()
        store.store(4, PositionPreset(0.1, 0.9, "Preset 5"))
        settings_manager.save_presets(store)

        win = MainWindow(settings=settings_manager, bridge=bridge)
        qtbot.addWidget(win)
        assert "●" in win.position_panel._slot_buttons[4].text()
        assert win.position_panel._slot_buttons[3].text() == "4"
