"""Tests for data models."""

import pytest

from src.models.output_settings import OutputSettings
from src.models.position_preset import (
    ClipPosition,
    InteractionMode,
    PositionPreset,
    PresetStore,
)
from src.models.style import SubtitleStyle


class TestSubtitleStyle:
    def test_defaults(self):
        style = SubtitleStyle()
        assert style.font_family == "Pretendard"
        assert style.font_weight == "700"
        assert style.font_size == 48
        assert style.letter_spacing == -1
        assert style.text_color == "#FFFFFF"
        assert style.bg_color == "#000000"
        assert style.bg_opacity == 70
        assert style.padding_v == 16
        assert style.padding_h == 24
        assert style.border_radius == 8
        assert style.text_offset_y == 0

    def test_copy_is_independent(self):
        style = SubtitleStyle(font_size=30)
        clone = style.copy()
        clone.font_size = 60
        assert style.font_size == 30
        assert clone == SubtitleStyle(font_size=60)

    def test_dict_roundtrip(self):
        style = SubtitleStyle(
            font_family="Noto Sans", font_weight="500", font_size=32,
            letter_spacing=2, text_color="#ffcc00", bg_color="#102030",
            bg_opacity=40, padding_v=4, padding_h=10, border_radius=0,
            text_offset_y=-3,
        )
        assert SubtitleStyle.from_dict(style.to_dict()) == style

    def test_from_dict_missing_fields_use_defaults(self):
        style = SubtitleStyle.from_dict({"font_size": 20})
        assert style.font_size == 20
        assert style.padding_h == 24
        assert style.text_offset_y == 0

    def test_from_dict_ignores_unknown_keys(self):
        style = SubtitleStyle.from_dict({"fontSize": 99, "legacy": True})
        assert style == SubtitleStyle()

    def test_from_dict_rejects_bad_values(self):
        style = SubtitleStyle.from_dict({
            "font_size": 0,
            "font_weight": "heavy",
            "text_color": "white",
            "bg_opacity": 250,
            "padding_v": -5,
            "border_radius": "x",
            "letter_spacing": float("nan"),
        })
        assert style.font_size == 48
        assert style.font_weight == "700"
        assert style.text_color == "#FFFFFF"
        assert style.bg_opacity == 100
        assert style.padding_v == 0
        assert style.border_radius == 8
        assert style.letter_spacing == -1

    def test_from_dict_numeric_strings(self):
        style = SubtitleStyle.from_dict({"font_size": "36", "font_weight": 600})
        assert style.font_size == 36
        assert style.font_weight == "600"

    def test_from_dict_not_a_dict(self):
        assert SubtitleStyle.from_dict(["nope"]) == SubtitleStyle()


class TestOutputSettings:
    def test_defaults(self):
        out = OutputSettings()
        assert out.save_path == ""
        assert out.file_prefix == "sub_"
        assert out.current_number == 1
        assert out.insert_into_sequence is False
        assert out.has_save_path is False

    def test_dict_roundtrip(self):
        out = OutputSettings(save_path="/tmp/cards", file_prefix="ep1_", current_number=42)
        assert OutputSettings.from_dict(out.to_dict()) == out

    def test_from_dict_bad_number(self):
        assert OutputSettings.from_dict({"current_number": 0}).current_number == 1
        assert OutputSettings.from_dict({"current_number": "5"}).current_number == 1
        assert OutputSettings.from_dict({"current_number": True}).current_number == 1

    def test_from_dict_bad_types(self):
        out = OutputSettings.from_dict({"save_path": 3, "file_prefix": None})
        assert out.save_path == ""
        assert out.file_prefix == "sub_"


class TestPositionPreset:
    def test_to_dict_omits_empty_name(self):
        assert PositionPreset(0.5, 0.25).to_dict() == {"x": 0.5, "y": 0.25}

    def test_from_dict(self):
        p = PositionPreset.from_dict({"x": 0.1, "y": 0.9, "name": "Preset 1"})
        assert p == PositionPreset(0.1, 0.9, "Preset 1")

    def test_from_dict_keeps_out_of_range_values(self):
        # host space is opaque; values outside 0-1 are stored as-is
        p = PositionPreset.from_dict({"x": -0.2, "y": 1.7})
        assert (p.x, p.y) == (-0.2, 1.7)

    @pytest.mark.parametrize("data", [None, {}, {"x": 1}, {"x": "a", "y": 1}, {"x": True, "y": 0}])
    def test_from_dict_invalid(self, data):
        assert PositionPreset.from_dict(data) is None


class TestPresetStore:
    def test_always_nine_slots(self):
        assert len(PresetStore()) == 9
        assert len(PresetStore(slots=[PositionPreset(0, 0)])) == 9
        assert len(PresetStore(slots=[None] * 12)) == 9

    def test_store_overwrites_wholesale(self):
        store = PresetStore()
        store.store(4, PositionPreset(0.1, 0.2, "Preset 5"))
        store.store(4, PositionPreset(0.3, 0.4))
        assert store.get(4) == PositionPreset(0.3, 0.4)
        assert store.is_filled(4)
        assert not store.is_filled(0)

    def test_index_out_of_range(self):
        store = PresetStore()
        with pytest.raises(IndexError):
            store.get(9)
        with pytest.raises(IndexError):
            store.store(-1, PositionPreset(0, 0))

    def test_list_roundtrip(self):
        store = PresetStore()
        store.store(0, PositionPreset(0.5, 0.5, "Preset 1"))
        store.store(8, PositionPreset(0.9, 0.1, "Preset 9"))
        data = store.to_list()
        assert data[1] is None
        assert PresetStore.from_list(data) == store

    def test_from_list_tolerates_garbage(self):
        store = PresetStore.from_list([{"x": 1, "y": 2}, "junk", 5])
        assert store.get(0) == PositionPreset(1.0, 2.0)
        assert store.get(1) is None
        assert len(store) == 9
        assert PresetStore.from_list({"x": 1}) == PresetStore()


class TestInteractionMode:
    def test_values(self):
        assert InteractionMode.NONE.value == "none"
        assert InteractionMode.SAVE.value == "save"

    def test_clip_position_is_value_object(self):
        assert ClipPosition(0.5, 0.5) == ClipPosition(0.5, 0.5)
