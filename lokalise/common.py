"""Fields shared by many API objects."""

from __future__ import annotations

from dataclasses import dataclass

from .serialization import JsonModel, json_field


@dataclass
class WithCreationTime(JsonModel):
    created_at: str = json_field("created_at", default="")
    created_at_ts: int = json_field("created_at_timestamp", default=0)


@dataclass
class WithCreationUser(JsonModel):
    created_by: int = json_field("created_by", default=0)
    created_by_email: str = json_field("created_by_email", default="")


@dataclass
class WithTeamID(JsonModel):
    team_id: int = json_field("team_id", omitempty=True, default=0)


@dataclass
class WithProjectID(JsonModel):
    project_id: str = json_field("project_id", omitempty=True, default="")


@dataclass
class WithUserID(JsonModel):
    user_id: int = json_field("user_id", omitempty=True, default=0)