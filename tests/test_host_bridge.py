"""Tests for the offline host bridge."""

import asyncio

from src.infrastructure.host_bridge import IHostBridge, OfflineHostBridge
from src.models.position_preset import ClipPosition


class TestOfflineHostBridge:
    def test_implements_protocol(self):
        assert isinstance(OfflineHostBridge(), IHostBridge)

    def test_import_existing_file(self, tmp_path):
        f = tmp_path / "sub_001.png"
        f.write_bytes(b"x")
        bridge = OfflineHostBridge()
        assert asyncio.run(bridge.import_asset(str(f))) is True
        assert bridge.imported == [str(f)]
        assert bridge.sequence == []

    def test_import_missing_file(self, tmp_path):
        bridge = OfflineHostBridge()
        assert asyncio.run(bridge.import_asset(str(tmp_path / "none.png"))) is False
        assert bridge.imported == []

    def test_import_and_insert(self, tmp_path):
        f = tmp_path / "sub_002.png"
        f.write_bytes(b"x")
        bridge = OfflineHostBridge()
        assert asyncio.run(bridge.import_and_insert(str(f))) is True
        assert bridge.sequence == [str(f)]

    def test_no_selection(self):
        bridge = OfflineHostBridge()
        assert asyncio.run(bridge.get_selected_clip_position()) is None
        assert asyncio.run(bridge.set_selected_clip_position(0.5, 0.5)) is False
        assert asyncio.run(bridge.clip_motion_info()) == {"error": "No clip selected"}

    def test_move_selected_clip(self):
        bridge = OfflineHostBridge()
        bridge.select_clip(0.1, 0.2, name="Title")
        assert asyncio.run(bridge.set_selected_clip_position(0.7, 0.3)) is True
        assert asyncio.run(bridge.get_selected_clip_position()) == ClipPosition(0.7, 0.3)
        info = asyncio.run(bridge.clip_motion_info())
        assert info["name"] == "Title"
        assert info["components"][0]["properties"][0]["value"] == [0.7, 0.3]

    def test_clear_selection(self):
        bridge = OfflineHostBridge()
        bridge.select_clip(0.1, 0.2)
        bridge.clear_selection()
        assert asyncio.run(bridge.get_selected_clip_position()) is None
