"""Compare two presentation snapshots and expose the diff in several formats."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config import Settings
from .diff_formatting import (
    DEFAULT_CONTEXT_LINES,
    generate_git_diff,
    generate_readable_summary,
    to_pretty_json,
)
from .errors import ComparisonError
from .slide_models import Presentation
from .tree_diff import Change, diff, to_generic_value

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ComparisonResult:
    """Outcome of :meth:`Comparer.compare`."""

    changes: List[Change]
    base_value: Any
    other_value: Any
    simplify: bool = False
    context_lines: int = DEFAULT_CONTEXT_LINES

    def get_structured_diff(self) -> List[Change]:
        return list(self.changes)

    def get_git_diff(self) -> str:
        return generate_git_diff(
            to_pretty_json(self.base_value),
            to_pretty_json(self.other_value),
            self.changes,
            context_lines=self.context_lines,
        )

    def get_readable_diff(self) -> str:
        return generate_readable_summary(self.changes, simplify=self.simplify)

    def has_changes(self) -> bool:
        return bool(self.changes)

    def to_dict(self) -> Dict[str, Any]:
        return {"changes": [change.to_dict() for change in self.changes]}


class Comparer:
    """Diff a fixed base presentation against other snapshots."""

    def __init__(
        self,
        base: Presentation,
        *,
        simplify: bool = False,
        settings: Optional[Settings] = None,
    ) -> None:
        self.base = base
        self.simplify = simplify
        self.settings = settings or Settings()

    def compare(self, other: Presentation) -> ComparisonResult:
        base_value = to_generic_value(self.base)
        other_value = to_generic_value(other)
        changes = diff(base_value, other_value)
        LOGGER.info(
            "Compared presentation %s against %s: %d changes",
            self.base.presentation_id,
            other.presentation_id,
            len(changes),
        )
        return ComparisonResult(
            changes=changes,
            base_value=base_value,
            other_value=other_value,
            simplify=self.simplify,
            context_lines=self.settings.diff_context_lines,
        )


@dataclass(slots=True)
class ComparerBuilder:
    """Fluent configuration for :class:`Comparer`."""

    base: Optional[Presentation] = None
    simplify: bool = False
    settings: Optional[Settings] = field(default=None)

    def set_base(self, base: Presentation) -> "ComparerBuilder":
        self.base = base
        return self

    def set_simplify(self, simplify: bool) -> "ComparerBuilder":
        self.simplify = simplify
        return self

    def set_settings(self, settings: Settings) -> "ComparerBuilder":
        self.settings = settings
        return self

    def build(self) -> Comparer:
        if self.base is None:
            raise ComparisonError("Base presentation not set", context="ComparerBuilder")
        return Comparer(self.base, simplify=self.simplify, settings=self.settings)
