"""Key comments."""

from __future__ import annotations

from dataclasses import dataclass

from .common import WithProjectID
from .pagination import Paged
from .serialization import JsonModel, json_field
from .service import BaseService

PATH_COMMENTS = "comments"


@dataclass
class Comment(JsonModel):
    comment_id: int = json_field("comment_id", default=0)
    key_id: int = json_field("key_id", default=0)
    comment: str = json_field("comment", default="")
    added_by: int = json_field("added_by", default=0)
    added_by_email: str = json_field("added_by_email", default="")
    added_at: str = json_field("added_at", default="")
    added_at_ts: int = json_field("added_at_timestamp", default=0)


@dataclass
class NewComment(JsonModel):
    comment: str = json_field("comment", default="")


@dataclass
class ListCommentsResponse(Paged, WithProjectID):
    comments: list[Comment] = json_field("comments", default_factory=list)


@dataclass
class CommentResponse(WithProjectID):
    comment: Comment = json_field("comment", default_factory=Comment)


@dataclass
class DeleteCommentResponse(WithProjectID):
    is_deleted: bool = json_field("comment_deleted", default=False)


def _key_path(project_id: str, key_id: int) -> str:
    return f"projects/{project_id}/keys/{int(key_id)}/{PATH_COMMENTS}"


class CommentService(BaseService):
    """Comment endpoints."""

    def list_project(self, project_id: str) -> ListCommentsResponse:
        response = self.client.get(f"projects/{project_id}/{PATH_COMMENTS}", self.page_options.to_query())
        return self._decode(ListCommentsResponse, response)

    def list_by_key(self, project_id: str, key_id: int) -> ListCommentsResponse:
        response = self.client.get(_key_path(project_id, key_id), self.page_options.to_query())
        return self._decode(ListCommentsResponse, response)

    def create(self, project_id: str, key_id: int, comments) -> ListCommentsResponse:
        body = {"comments": [comment.to_dict() for comment in comments]}
        response = self.client.post(_key_path(project_id, key_id), body)
        return self._decode(ListCommentsResponse, response)

    def retrieve(self, project_id: str, key_id: int, comment_id: int) -> CommentResponse:
        response = self.client.get(f"{_key_path(project_id, key_id)}/{int(comment_id)}")
        return self._decode(CommentResponse, response)

    def delete(self, project_id: str, key_id: int, comment_id: int) -> DeleteCommentResponse:
        response = self.client.delete(f"{_key_path(project_id, key_id)}/{int(comment_id)}")
        return self._decode(DeleteCommentResponse, response)