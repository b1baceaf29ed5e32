# schema.py
from pathlib import Path
from typing import Tuple

from pydantic import BaseModel, Field, field_validator


class ConvertOptions(BaseModel):
    """Settings shared by single-file and batch conversion."""

    indent: int = Field(default=2, ge=0)
    ensure_ascii: bool = False
    encoding: str = "utf-8"
    roadmaps_dir: Path = Path("roadmaps")
    extensions: Tuple[str, ...] = (".yaml", ".yml")

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value):
        exts = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                continue
            if not ext.startswith("."):
                ext = "." + ext
            exts.append(ext)
        if not exts:
            raise ValueError("at least one input extension is required")
        return tuple(exts)

    def matches(self, name: str) -> bool:
        """True if the file name carries one of the input extensions (any case)."""
        return name.lower().endswith(self.extensions)
