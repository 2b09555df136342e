"""PSC domain models.

Groups are kept strict (`extra="forbid"`): the text format has exactly three
fields per group and nothing else should sneak in through the API.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BaseModelStrict(BaseModel):
    model_config = ConfigDict(extra="forbid")


class Group(BaseModelStrict):
    name: str
    # Ordered; duplicates allowed.
    permissions: List[str] = Field(default_factory=list)
    # Ordered; the engine refuses duplicates but construction does not.
    players: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not (v or "").strip():
            raise ValueError("group name must not be empty")
        return v

    def has_any_permission(self, permissions: Iterable[str]) -> bool:
        """Exact-string intersection test against this group's permissions."""
        own = set(self.permissions)
        return any(p in own for p in permissions)


# Group name -> Group. Callers must not rely on iteration order.
GroupStore = Dict[str, Group]
