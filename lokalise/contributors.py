"""Project contributors."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .common import WithCreationTime, WithProjectID, WithUserID
from .pagination import Paged
from .serialization import JsonModel, json_field
from .service import BaseService

PATH_CONTRIBUTORS = "contributors"


@dataclass
class _Permission(JsonModel):
    """Access rights of a contributor within a project."""

    is_admin: bool = json_field("is_admin", default=False)
    is_reviewer: bool = json_field("is_reviewer", default=False)
    languages: list[dict[str, Any]] = json_field("languages", omitempty=True, default_factory=list)
    admin_rights: list[str] = json_field("admin_rights", omitempty=True, default_factory=list)


@dataclass
class Contributor(_Permission, WithUserID, WithCreationTime):
    email: str = json_field("email", default="")
    fullname: str = json_field("fullname", default="")


@dataclass
class NewContributor(_Permission):
    email: str = json_field("email", default="")
    fullname: str = json_field("fullname", omitempty=True, default="")


@dataclass
class ContributorsResponse(Paged, WithProjectID):
    contributors: list[Contributor] = json_field("contributors", default_factory=list)


@dataclass
class ContributorResponse(WithProjectID):
    contributor: Contributor = json_field("contributor", default_factory=Contributor)


@dataclass
class DeleteContributorResponse(WithProjectID):
    is_deleted: bool = json_field("contributor_deleted", default=False)


def _path(project_id: str) -> str:
    return f"projects/{project_id}/{PATH_CONTRIBUTORS}"


def _path_by_id(project_id: str, user_id: int) -> str:
    return f"{_path(project_id)}/{int(user_id)}"


class ContributorService(BaseService):
    """Contributor endpoints."""

    def list(self, project_id: str) -> ContributorsResponse:
        response = self.client.get(_path(project_id), self.page_options.to_query())
        return self._decode(ContributorsResponse, response)

    def create(self, project_id: str, contributors) -> ContributorsResponse:
        body = {"contributors": [contributor.to_dict() for contributor in contributors]}
        response = self.client.post(_path(project_id), body)
        return ContributorsResponse.from_dict(response.payload)

    def retrieve(self, project_id: str, user_id: int) -> ContributorResponse:
        response = self.client.get(_path_by_id(project_id, user_id))
        return self._decode(ContributorResponse, response)

    def update(self, project_id: str, user_id: int, permission) -> ContributorResponse:
        """Change the rights of a contributor.

        ``permission`` is a mapping such as ``{"is_admin": True, "is_reviewer": False}``
        or a model whose JSON form is sent as is.
        """
        if isinstance(permission, JsonModel):
            body = permission.to_dict()
        elif isinstance(permission, Mapping):
            body = dict(permission)
        else:
            raise TypeError("permission must be a mapping or a JSON model")
        response = self.client.put(_path_by_id(project_id, user_id), body)
        return self._decode(ContributorResponse, response)

    def delete(self, project_id: str, user_id: int) -> DeleteContributorResponse:
        response = self.client.delete(_path_by_id(project_id, user_id))
        return self._decode(DeleteContributorResponse, response)