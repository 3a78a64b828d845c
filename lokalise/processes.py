"""Queued background processes of a project."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .common import WithCreationTime, WithCreationUser, WithProjectID
from .serialization import json_field
from .service import BaseService

PATH_QUEUED_PROCESSES = "processes"


@dataclass
class QueuedProcess(WithCreationTime, WithCreationUser):
    id: str = json_field("process_id", default="")
    type: str = json_field("type", default="")
    status: str = json_field("status", default="")
    message: str = json_field("message", default="")
    details: Any = json_field("details", default=None)


@dataclass
class QueuedProcessesResponse(WithProjectID):
    processes: list[QueuedProcess] = json_field("processes", default_factory=list)


@dataclass
class QueuedProcessResponse(WithProjectID):
    process: QueuedProcess = json_field("process", default_factory=QueuedProcess)


def _path(project_id: str) -> str:
    return f"projects/{project_id}/{PATH_QUEUED_PROCESSES}"


class QueuedProcessService(BaseService):
    """Queued process endpoints."""

    def list(self, project_id: str) -> QueuedProcessesResponse:
        response = self.client.get(_path(project_id))
        return self._decode(QueuedProcessesResponse, response)

    def retrieve(self, project_id: str, process_id: str) -> QueuedProcessResponse:
        response = self.client.get(f"{_path(project_id)}/{process_id}")
        return self._decode(QueuedProcessResponse, response)