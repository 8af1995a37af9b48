"""Clip position presets (pure Python, no Qt dependency)."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from src.utils.config import PRESET_SLOT_COUNT


class InteractionMode(enum.Enum):
    """How a click on a preset slot is interpreted."""

    NONE = "none"  # click applies the stored position
    SAVE = "save"  # click stores the selected clip's position


@dataclass(frozen=True, slots=True)
class ClipPosition:
    """Position of a clip in the host's normalized coordinate space."""

    x: float
    y: float


@dataclass(slots=True)
class PositionPreset:
    x: float
    y: float
    name: str = ""

    def to_dict(self) -> dict:
        d = {"x": self.x, "y": self.y}
        if self.name:
            d["name"] = self.name
        return d

    @classmethod
    def from_dict(cls, data) -> PositionPreset | None:
        """Return a preset, or None if *data* is not a usable record."""
        if not isinstance(data, dict):
            return None
        x, y = data.get("x"), data.get("y")
        for v in (x, y):
            if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(v):
                return None
        name = data.get("name", "")
        return cls(x=float(x), y=float(y), name=name if isinstance(name, str) else "")


@dataclass
class PresetStore:
    """Fixed-length sequence of preset slots, each empty (None) or filled."""

    slots: list[PositionPreset | None] = field(
        default_factory=lambda: [None] * PRESET_SLOT_COUNT
    )

    def __post_init__(self) -> None:
        slots = list(self.slots[:PRESET_SLOT_COUNT])
        slots.extend([None] * (PRESET_SLOT_COUNT - len(slots)))
        self.slots = slots

    def get(self, index: int) -> PositionPreset | None:
        self._check_index(index)
        return self.slots[index]

    def store(self, index: int, preset: PositionPreset) -> None:
        """Overwrite slot *index* wholesale."""
        self._check_index(index)
        self.slots[index] = preset

    def is_filled(self, index: int) -> bool:
        return self.get(index) is not None

    def to_list(self) -> list[dict | None]:
        return [p.to_dict() if p is not None else None for p in self.slots]

    @classmethod
    def from_list(cls, data) -> PresetStore:
        """Build a store from an untrusted persisted list."""
        if not isinstance(data, list):
            return cls()
        return cls(slots=[PositionPreset.from_dict(item) for item in data[:PRESET_SLOT_COUNT]])

    def _check_index(self, index: int) -> None:
        if not 0 <= index < PRESET_SLOT_COUNT:
            raise IndexError(f"Preset slot out of range: {index}")

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self):
        return iter(self.slots)

    def __getitem__(self, index: int) -> PositionPreset | None:
        return self.slots[index]
