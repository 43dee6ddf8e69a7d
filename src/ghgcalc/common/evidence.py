"""Opaque metadata for supporting documents attached to activity data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(slots=True, frozen=True)
class Attachment:
    """Uploaded evidence; only its metadata is kept, the content is never read."""

    filename: str
    size: int = 0
    content_type: str | None = None

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "Attachment":
        name = str(payload.get("filename") or payload.get("name") or "").strip()
        if not name:
            raise ValueError("Attachment is missing a 'filename'.")
        try:
            size = int(payload.get("size") or 0)
        except (TypeError, ValueError):
            size = 0
        content_type = payload.get("content_type") or payload.get("type")
        return cls(
            filename=name,
            size=max(size, 0),
            content_type=str(content_type) if content_type else None,
        )


__all__ = ["Attachment"]
