"""Permission config engine.

Owns the group store built by `parse_config` and exposes the query/mutation
API on top of it. The engine does no I/O; callers hand it decoded text
(see `psc.source` for reading files).
"""

from __future__ import annotations

import enum
import logging
from typing import Iterable, List, Optional, Union

from psc.core.errors import (
    AlreadyInitializedError,
    GroupAlreadyExistsError,
    GroupNotFoundError,
    InvalidGroupNameError,
    NotInitializedError,
    PlayerNotFoundError,
)
from psc.core.models import Group, GroupStore
from psc.core.parser import parse_config

logger = logging.getLogger(__name__)


def _permission_list(permissions: Optional[Union[str, Iterable[str]]]) -> List[str]:
    # A bare string is one permission, not an iterable of characters.
    if permissions is None:
        return []
    if isinstance(permissions, str):
        return [permissions]
    return list(permissions)


class EngineState(str, enum.Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"


class PermissionConfig:
    """
    In-memory view of a PSC document.

    State machine:
    - UNINITIALIZED: only `load` is allowed
    - INITIALIZED: every operation is allowed; `load` needs `overwrite=True`
    """

    def __init__(self) -> None:
        self._state = EngineState.UNINITIALIZED
        self._groups: GroupStore = {}

    @classmethod
    def from_text(cls, text: str) -> "PermissionConfig":
        cfg = cls()
        cfg.load(text)
        return cfg

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def initialized(self) -> bool:
        return self._state is EngineState.INITIALIZED

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, group_name: object) -> bool:
        return group_name in self._groups

    def _require_initialized(self, operation: str) -> None:
        if self._state is not EngineState.INITIALIZED:
            raise NotInitializedError(operation)

    def _group(self, group_name: str) -> Group:
        group = self._groups.get(group_name)
        if group is None:
            raise GroupNotFoundError(group_name)
        return group

    def load(self, text: str, overwrite: bool = False) -> None:
        """Parse `text` and replace the whole store."""
        if self._state is EngineState.INITIALIZED and not overwrite:
            raise AlreadyInitializedError()
        groups = parse_config(text)
        replaced = self._state is EngineState.INITIALIZED
        self._groups = groups
        self._state = EngineState.INITIALIZED
        logger.info("%s config with %d groups", "reloaded" if replaced else "loaded", len(groups))

    def get_groups(self) -> List[str]:
        self._require_initialized("list groups")
        return list(self._groups.keys())

    def get_group(self, group_name: str) -> Group:
        """Return a detached copy of a group."""
        self._require_initialized("read group")
        return self._group(group_name).model_copy(deep=True)

    def get_players(self, query: Union[str, Iterable[str]]) -> List[str]:
        """
        Players of a group (when `query` is a group name) or players holding
        any of the given permissions (when `query` is an iterable of permissions).
        """
        if isinstance(query, str):
            return self.players_in_group(query)
        return self.players_with_permissions(query)

    def players_with_permissions(self, permissions: Union[str, Iterable[str]]) -> List[str]:
        """Distinct players of every group sharing at least one permission, first occurrence wins."""
        self._require_initialized("query players")
        wanted = set(_permission_list(permissions))
        seen = set()
        out: List[str] = []
        for group in self._groups.values():
            if not group.has_any_permission(wanted):
                continue
            for player in group.players:
                if player in seen:
                    continue
                seen.add(player)
                out.append(player)
        return out

    def players_in_group(self, group_name: str) -> List[str]:
        self._require_initialized("query players")
        return list(self._group(group_name).players)

    def add_group(self, group_name: str, permissions: Optional[Union[str, Iterable[str]]] = None) -> None:
        self._require_initialized("add group")
        if not (group_name or "").strip():
            raise InvalidGroupNameError(group_name)
        if group_name in self._groups:
            raise GroupAlreadyExistsError(group_name)
        group = Group(name=group_name, permissions=_permission_list(permissions))
        self._groups[group_name] = group

        # New groups start without players, so this only matters once groups
        # can be created with initial members.
        for existing in self._groups.values():
            for permission in group.permissions:
                if permission in existing.permissions:
                    existing.players.extend(group.players)
        logger.debug("added group %s with %d permissions", group_name, len(group.permissions))

    def remove_group(self, group_name: str) -> None:
        self._require_initialized("remove group")
        self._group(group_name)
        del self._groups[group_name]
        logger.debug("removed group %s", group_name)

    def add_player(self, player_id: str, group_name: str) -> bool:
        """Add a player to a group. Returns False when the player is already a member."""
        self._require_initialized("add player")
        group = self._group(group_name)
        if player_id in group.players:
            return False
        group.players.append(player_id)
        logger.debug("added player %s to %s", player_id, group_name)
        return True

    def remove_player(self, player_id: str, group_name: str) -> None:
        self._require_initialized("remove player")
        group = self._group(group_name)
        if player_id not in group.players:
            raise PlayerNotFoundError(player_id, group_name)
        group.players.remove(player_id)
        logger.debug("removed player %s from %s", player_id, group_name)
