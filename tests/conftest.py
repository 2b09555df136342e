"""
Pytest config.

Tests import the local `psc/` package and the root `main.py` CLI. When invoking a
global `pytest` entrypoint without installing the project, the repo root is not
reliably on sys.path during collection, so we pin it here.
"""

from __future__ import annotations

import sys
from pathlib import Path


def _ensure_repo_root_on_syspath() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


_ensure_repo_root_on_syspath()
