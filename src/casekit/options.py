# casekit/options.py
from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from .conf import as_bool
from .conventions import normalize_convention

__all__ = ("CaseOptions",)


class CaseOptions(BaseModel):
    """
    A validated conversion request.

    ``convention`` is normalized to its canonical name on construction, so
    ``CaseOptions(convention="kebab-case").convention == "kebab"``.
    """

    convention: str
    strip_special_chars: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("convention", mode="before")
    @classmethod
    def _normalize_convention(cls, value: Any) -> str:
        return normalize_convention(value)

    @classmethod
    def from_settings(cls, conf: Mapping[str, Any], **overrides: Any) -> "CaseOptions":
        """Build options from a settings mapping; ``None`` overrides are ignored."""
        data = {
            "convention": conf["DEFAULT_CONVENTION"],
            "strip_special_chars": as_bool(conf["STRIP_SPECIAL_CHARS"]),
        }
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)
