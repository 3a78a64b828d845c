"""Project branches."""

from __future__ import annotations

from dataclasses import dataclass

from .common import WithCreationTime, WithCreationUser, WithProjectID
from .pagination import Paged
from .serialization import json_field
from .service import BaseService

PATH_BRANCHES = "branches"


@dataclass
class Branch(WithCreationTime, WithCreationUser):
    branch_id: int = json_field("branch_id", default=0)
    name: str = json_field("name", default="")


@dataclass
class ListBranchesResponse(Paged, WithProjectID):
    branches: list[Branch] = json_field("branches", default_factory=list)


@dataclass
class CreateBranchResponse(WithProjectID):
    branch: Branch = json_field("branch", default_factory=Branch)


@dataclass
class DeleteBranchResponse(WithProjectID):
    branch_deleted: bool = json_field("branch_deleted", default=False)


class BranchService(BaseService):
    """Branch endpoints."""

    @staticmethod
    def _path(project_id: str) -> str:
        return f"projects/{project_id}/{PATH_BRANCHES}"

    def list(self, project_id: str) -> ListBranchesResponse:
        response = self.client.get(self._path(project_id), self.page_options.to_query())
        return self._decode(ListBranchesResponse, response)

    def create(self, project_id: str, name: str) -> CreateBranchResponse:
        response = self.client.post(self._path(project_id), {"name": name})
        return self._decode(CreateBranchResponse, response)

    def delete(self, project_id: str, branch_id: int) -> DeleteBranchResponse:
        response = self.client.delete(f"{self._path(project_id)}/{int(branch_id)}")
        return self._decode(DeleteBranchResponse, response)