"""JSON dump helpers (CLI-friendly, testable).

We keep CLI printing logic out of the engine; this returns plain dicts.
"""

from __future__ import annotations

from typing import Any, Dict, List

from psc.engine import PermissionConfig


def config_to_json_dict(cfg: PermissionConfig) -> Dict[str, Any]:
    groups = [cfg.get_group(name).model_dump(mode="json") for name in sorted(cfg.get_groups())]
    return {"state": cfg.state.value, "groups": groups}


def players_to_json_dict(players: List[str], **query: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {k: v for k, v in query.items() if v not in (None, "", [], {})}
    out["players"] = list(players)
    return out
