"""Reading PSC documents from disk.

The engine only sees decoded text; decoding errors surface here as
`OSError`/`ValueError`/`LookupError` for the caller to report.
"""

from __future__ import annotations

import logging

from psc.engine import PermissionConfig

logger = logging.getLogger(__name__)


def read_config_text(path: str, *, encoding: str = "utf-8") -> str:
    with open(path, "r", encoding=encoding) as f:
        text = f.read()
    logger.debug("read %d characters from %s", len(text), path)
    return text


def load_config_file(path: str, *, encoding: str = "utf-8") -> PermissionConfig:
    return PermissionConfig.from_text(read_config_text(path, encoding=encoding))
