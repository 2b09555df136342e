from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from psc.core.models import Group, GroupStore

logger = logging.getLogger(__name__)

HEADER_MARKER = ">>"
COMMENT_MARKER = "//"
NAME_SEPARATOR = ">"
PERMISSION_SEPARATOR = "+"


def _normalize_newlines(text: str) -> str:
    return (text or "").replace("\r\n", "\n").replace("\r", "\n")


def _split_permissions(clause: str) -> List[str]:
    return [p.strip() for p in (clause or "").split(PERMISSION_SEPARATOR) if p.strip()]


def parse_header(line: str) -> Optional[Tuple[str, List[str]]]:
    """
    Parse a `>> Name > perm1+perm2` header into (name, permissions).

    Fallbacks (the format has no escaping):
    - no `>` after the name: zero-permission group
    - several `>`: only the first one separates, the rest stay in the clause
    - empty name: returns None
    """
    body = line[len(HEADER_MARKER) :].strip() if line.startswith(HEADER_MARKER) else line.strip()
    name, sep, clause = body.partition(NAME_SEPARATOR)
    name = name.strip()
    if not name:
        return None
    if not sep:
        return name, []
    return name, _split_permissions(clause.strip())


def parse_config(text: str) -> GroupStore:
    """
    Parse PSC text into a group store.

    Supported:
    - header lines (`>> VIP > vip+special`) start a new current group
    - comment lines (`// ...`)
    - any other non-blank line is a player of the current group

    Notes:
    - Never raises: malformed lines are skipped, not reported.
    - `\\r\\n` and lone `\\r` line endings are treated like `\\n`.
    - A repeated header replaces the earlier group of the same name.
    - Player lines before the first valid header are dropped.
    """
    groups: GroupStore = {}
    current: Optional[Group] = None

    for lineno, raw in enumerate(_normalize_newlines(text).split("\n"), 1):
        line = raw.strip()
        if not line:
            continue

        if line.startswith(HEADER_MARKER):
            parsed = parse_header(line)
            if parsed is None:
                logger.debug("line %d: header without group name, skipping group", lineno)
                current = None
                continue
            name, permissions = parsed
            current = Group(name=name, permissions=permissions)
            groups[name] = current
            continue

        if line.startswith(COMMENT_MARKER):
            continue

        if current is None:
            logger.debug("line %d: player line outside any group, dropped", lineno)
            continue
        current.players.append(line)

    logger.debug("parsed %d groups", len(groups))
    return groups
