"""Utility helpers to execute the project's pytest suite programmatically."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Sequence

import pytest

DEFAULT_PYTEST_ARGS: tuple[str, ...] = ("-q",)

TESTS_DIR = Path(__file__).resolve().parent.parent / "tests"

# Named groups of test modules, used by ``run_suite``.
SUITES: Dict[str, tuple[str, ...]] = {
    "models": ("test_slide_models.py", "test_snapshot_store.py"),
    "styles": ("test_style_merge.py", "test_placeholders.py", "test_colors.py"),
    "diff": ("test_tree_diff.py", "test_diff_formatting.py", "test_comparer.py"),
    "render": ("test_svg_renderer.py", "test_markdown_extractor.py"),
    "import": ("test_pptx_loader.py",),
}


def run_tests(args: Optional[Sequence[str]] = None) -> int:
    """Run pytest with the provided ``args`` and return the exit code.

    Parameters
    ----------
    args:
        Optional sequence of command line arguments forwarded to
        :func:`pytest.main`. When ``None`` the function defaults to ``('-q',)``.
    """

    pytest_args = list(args) if args is not None else list(DEFAULT_PYTEST_ARGS)
    return pytest.main(pytest_args)


def run_default() -> int:
    """Convenience wrapper that runs pytest with the default arguments."""

    return run_tests()


def run_suite(name: str, extra_args: Sequence[str] = ()) -> int:
    """Run one named group of test modules from :data:`SUITES`."""

    try:
        modules = SUITES[name]
    except KeyError:
        raise ValueError(
            f"unknown test suite {name!r}; expected one of {', '.join(sorted(SUITES))}"
        ) from None
    paths = [str(TESTS_DIR / module) for module in modules]
    return run_tests([*DEFAULT_PYTEST_ARGS, *extra_args, *paths])


if __name__ == "__main__":  # pragma: no cover - manual execution utility
    raise SystemExit(run_default())
