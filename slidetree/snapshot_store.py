"""Utilities for reading and writing presentation JSON snapshots."""

from __future__ import annotations

import json
from pathlib import Path

from .errors import DocumentError
from .slide_models import Presentation


def load_presentation_json(text: str) -> Presentation:
    """Parse a presentation snapshot from its JSON text."""

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentError(
            f"invalid JSON at line {exc.lineno} column {exc.colno}",
            context="load_presentation_json",
            original_error=exc,
        ) from exc
    return Presentation.from_dict(data)


class PresentationSnapshotStore:
    """Persist :class:`Presentation` snapshots to disk as JSON files."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    # ------------------------------------------------------------------
    # I/O helpers
    # ------------------------------------------------------------------
    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Presentation:
        if not self.path.exists():
            raise FileNotFoundError(f"presentation snapshot not found at {self.path}")
        return load_presentation_json(self.path.read_text(encoding="utf-8"))

    def save(self, presentation: Presentation) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(presentation.to_dict(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
