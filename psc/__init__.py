"""
PSC (Permission System Config) parser and in-memory engine.

Public surface:
- `PermissionConfig`: loads PSC text and answers group/player queries.
- `Group`: a named bundle of permissions and member players.
- `parse_config`: the pure text -> groups parser.
"""

from psc.core.errors import (
    AlreadyInitializedError,
    GroupAlreadyExistsError,
    GroupNotFoundError,
    InvalidGroupNameError,
    NotInitializedError,
    PlayerNotFoundError,
    PSCError,
)
from psc.core.models import Group
from psc.core.parser import parse_config
from psc.engine import EngineState, PermissionConfig

__all__ = [
    "AlreadyInitializedError",
    "EngineState",
    "Group",
    "GroupAlreadyExistsError",
    "GroupNotFoundError",
    "InvalidGroupNameError",
    "NotInitializedError",
    "PermissionConfig",
    "PlayerNotFoundError",
    "PSCError",
    "parse_config",
]
