"""Error kinds raised by the PSC engine.

Every error is fatal to the call that raised it and carries the offending
group/player so callers can report it without parsing the message.
"""

from __future__ import annotations

from typing import Optional


class PSCError(Exception):
    """Base class for all PSC engine errors."""


class AlreadyInitializedError(PSCError):
    def __init__(self) -> None:
        super().__init__("config is already loaded (pass overwrite=True to replace it)")


class NotInitializedError(PSCError):
    def __init__(self, operation: Optional[str] = None) -> None:
        self.operation = operation
        msg = "config is not loaded"
        if operation:
            msg = f"{msg}; cannot {operation}"
        super().__init__(msg)


class GroupNotFoundError(PSCError):
    def __init__(self, group: str) -> None:
        self.group = group
        super().__init__(f"group not found: {group!r}")


class InvalidGroupNameError(PSCError):
    def __init__(self, group: str) -> None:
        self.group = group
        super().__init__(f"invalid group name: {group!r}")


class GroupAlreadyExistsError(PSCError):
    def __init__(self, group: str) -> None:
        self.group = group
        super().__init__(f"group already exists: {group!r}")


class PlayerNotFoundError(PSCError):
    def __init__(self, player: str, group: str) -> None:
        self.player = player
        self.group = group
        super().__init__(f"player {player!r} is not a member of group {group!r}")
