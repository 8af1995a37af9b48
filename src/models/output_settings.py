"""Output folder / file naming settings."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from src.utils.config import DEFAULT_FILE_PREFIX


@dataclass
class OutputSettings:
    """Where generated cards are written and which number comes next."""

    save_path: str = ""  # empty = unset
    file_prefix: str = DEFAULT_FILE_PREFIX
    current_number: int = 1
    insert_into_sequence: bool = False

    @property
    def has_save_path(self) -> bool:
        return bool(self.save_path)

    def copy(self) -> OutputSettings:
        return OutputSettings(**asdict(self))

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> OutputSettings:
        """Build settings from an untrusted persisted record."""
        default = cls()
        if not isinstance(data, dict):
            return default

        save_path = data.get("save_path", default.save_path)
        if not isinstance(save_path, str):
            save_path = default.save_path

        prefix = data.get("file_prefix", default.file_prefix)
        if not isinstance(prefix, str):
            prefix = default.file_prefix

        number = data.get("current_number", default.current_number)
        if isinstance(number, bool) or not isinstance(number, int) or number < 1:
            number = default.current_number

        insert = data.get("insert_into_sequence", default.insert_into_sequence)
        if not isinstance(insert, bool):
            insert = default.insert_into_sequence

        return cls(
            save_path=save_path,
            file_prefix=prefix,
            current_number=number,
            insert_into_sequence=insert,
        )
