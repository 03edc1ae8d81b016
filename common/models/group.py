"""Group status models."""

from __future__ import annotations

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class GroupStatus(str, Enum):
    """Status a group can be set to."""
    ENABLED = "enabled"
    DISABLED = "disabled"

    @classmethod
    def from_command(cls, command: str) -> "GroupStatus":
        """Map an ``enable``/``disable`` subcommand to the status it sets."""
        if command == "enable":
            return cls.ENABLED
        elif command == "disable":
            return cls.DISABLED
        raise ValueError(f"Invalid group status name: {command}")


class GroupMessage(BaseModel):
    """Outcome of a group status change."""
    model_config = ConfigDict(populate_by_name=True)

    op: str = Field(..., exclude=True)
    status: str = Field(default="success")
    group_name: str = Field(..., alias="groupName")
    group_status: GroupStatus = Field(..., alias="groupStatus")

    def __str__(self) -> str:
        if self.op == "enable":
            return f"Enabled group `{self.group_name}`."
        return f"Disabled group `{self.group_name}`."

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
