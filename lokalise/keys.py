"""Translation keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .client import RestClient
from .comments import Comment, NewComment
from .common import WithCreationTime, WithProjectID
from .errors import ApiError
from .pagination import PageOptions, Paged
from .serialization import JsonModel, json_field, to_query
from .service import BaseService

PATH_KEYS = "keys"


@dataclass
class PlatformStrings(JsonModel):
    """A value given separately for each platform."""

    ios: str = json_field("ios", omitempty=True, default="")
    android: str = json_field("android", omitempty=True, default="")
    web: str = json_field("web", omitempty=True, default="")
    other: str = json_field("other", omitempty=True, default="")


@dataclass
class Key(WithCreationTime):
    key_id: int = json_field("key_id", default=0)
    key_name: PlatformStrings = json_field("key_name", default_factory=PlatformStrings)

    filenames: PlatformStrings = json_field("filenames", default_factory=PlatformStrings)
    description: str = json_field("description", default="")
    platforms: list[str] = json_field("platforms", default_factory=list)
    tags: list[str] = json_field("tags", default_factory=list)
    comments: list[Comment] = json_field("comments", default_factory=list)
    screenshots: list[dict[str, Any]] = json_field("screenshots", default_factory=list)
    translations: list[dict[str, Any]] = json_field("translations", default_factory=list)

    is_plural: bool = json_field("is_plural", default=False)
    plural_name: str = json_field("plural_name", omitempty=True, default="")
    is_hidden: bool = json_field("is_hidden", default=False)
    is_archived: bool = json_field("is_archived", default=False)
    context: str = json_field("context", omitempty=True, default="")
    base_words: int = json_field("base_words", default=0)
    char_limit: int = json_field("char_limit", default=0)
    custom_attributes: str = json_field("custom_attributes", omitempty=True, default="")

    modified_at: str = json_field("modified_at", omitempty=True, default="")
    modified_at_ts: int = json_field("modified_at_timestamp", omitempty=True, default=0)


@dataclass
class NewKey(JsonModel):
    """A key to create or the changes to apply to one.

    ``key_name`` is a plain string or a :class:`PlatformStrings`. ``tags`` left
    as None is not sent at all, while an empty list is sent to clear the tags.
    Translations and screenshots are mappings or JSON models sent as given.
    """

    key_name: str | PlatformStrings | None = json_field("key_name", omitempty=True, default=None)
    description: str = json_field("description", omitempty=True, default="")
    platforms: list[str] = json_field("platforms", omitempty=True, default_factory=list)
    filenames: PlatformStrings | None = json_field("filenames", omitempty=True, default=None)
    tags: list[str] | None = json_field("tags", default=None)
    merge_tags: bool = json_field("merge_tags", omitempty=True, default=False)
    comments: list[NewComment] = json_field("comments", omitempty=True, default_factory=list)
    screenshots: list[Any] = json_field("screenshots", omitempty=True, default_factory=list)
    translations: list[Any] = json_field("translations", omitempty=True, default_factory=list)

    is_plural: bool = json_field("is_plural", omitempty=True, default=False)
    plural_name: str = json_field("plural_name", omitempty=True, default="")
    is_hidden: bool = json_field("is_hidden", omitempty=True, default=False)
    is_archived: bool = json_field("is_archived", omitempty=True, default=False)
    context: str = json_field("context", omitempty=True, default="")
    base_words: int = json_field("base_words", omitempty=True, default=0)
    char_limit: int = json_field("char_limit", omitempty=True, default=0)
    custom_attributes: str = json_field("custom_attributes", omitempty=True, default="")

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.tags is None:
            data.pop("tags", None)
        return data


@dataclass
class BulkUpdateKey(NewKey):
    """Changes to one key within a bulk update."""

    key_id: int = json_field("key_id", default=0)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.pop("key_id", None)
        return {"key_id": self.key_id, **data}


@dataclass
class ErrorKeys(JsonModel):
    """An error reported for one key of a create or update request."""

    code: int = json_field("code", omitempty=True, default=0)
    message: str = json_field("message", omitempty=True, default="")
    key_name: str = ""

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        key = data.get("key") or {}
        return cls(
            code=int(data.get("code") or 0),
            message=str(data.get("message") or ""),
            key_name=str(key.get("key_name") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["key"] = {"key_name": self.key_name}
        return data

    @property
    def error(self) -> ApiError:
        return ApiError(self.code, self.message)


@dataclass
class KeysResponse(Paged, WithProjectID):
    keys: list[Key] = json_field("keys", default_factory=list)
    errors: list[ErrorKeys] = json_field("error", omitempty=True, default_factory=list)


@dataclass
class KeyResponse(WithProjectID):
    key: Key = json_field("key", default_factory=Key)


@dataclass
class DeleteKeyResponse(WithProjectID):
    is_removed: bool = json_field("key_removed", default=False)
    number_of_locked: int = json_field("keys_locked", default=0)


@dataclass
class DeleteKeysResponse(WithProjectID):
    are_removed: bool = json_field("keys_removed", default=False)
    number_of_locked: int = json_field("keys_locked", default=0)


@dataclass
class KeyListOptions(JsonModel):
    """Query options of the key list; the flags take 1 or 0."""

    page: int = json_field("page", omitempty=True, default=0)
    limit: int = json_field("limit", omitempty=True, default=0)

    disable_references: int = json_field("disable_references", omitempty=True, default=0)
    include_comments: int = json_field("include_comments", omitempty=True, default=0)
    include_screenshots: int = json_field("include_screenshots", omitempty=True, default=0)
    include_translations: int = json_field("include_translations", omitempty=True, default=0)

    filter_translation_lang_ids: str = json_field("filter_translation_lang_ids", omitempty=True, default="")
    filter_tags: str = json_field("filter_tags", omitempty=True, default="")
    filter_filenames: str = json_field("filter_filenames", omitempty=True, default="")
    filter_keys: str = json_field("filter_keys", omitempty=True, default="")
    filter_key_ids: str = json_field("filter_key_ids", omitempty=True, default="")
    filter_platforms: str = json_field("filter_platforms", omitempty=True, default="")
    filter_untranslated: str = json_field("filter_untranslated", omitempty=True, default="")
    filter_qa_issues: str = json_field("filter_qa_issues", omitempty=True, default="")

    def to_query(self) -> dict[str, str]:
        return to_query(self)


@dataclass
class KeyRetrieveOptions(JsonModel):
    disable_references: int = json_field("disable_references", omitempty=True, default=0)

    def to_query(self) -> dict[str, str]:
        return to_query(self)


def _path(project_id: str) -> str:
    return f"projects/{project_id}/{PATH_KEYS}"


def _path_by_id(project_id: str, key_id: int) -> str:
    return f"{_path(project_id)}/{int(key_id)}"


def _encode_all(items) -> list[Any]:
    return [item.to_dict() if isinstance(item, JsonModel) else dict(item) for item in items]


class KeyService(BaseService):
    """Key endpoints."""

    def __init__(
        self,
        client: RestClient,
        page_options: PageOptions | None = None,
        list_options: KeyListOptions | None = None,
        retrieve_options: KeyRetrieveOptions | None = None,
    ) -> None:
        super().__init__(client, page_options)
        self.list_options = list_options if list_options is not None else KeyListOptions()
        self.retrieve_options = retrieve_options if retrieve_options is not None else KeyRetrieveOptions()

    def with_list_options(self, options: KeyListOptions) -> "KeyService":
        """Use ``options`` for the following list calls and return the service."""
        self.list_options = options
        return self

    def with_retrieve_options(self, options: KeyRetrieveOptions) -> "KeyService":
        """Use ``options`` for the following retrieve calls and return the service."""
        self.retrieve_options = options
        return self

    def list(self, project_id: str) -> KeysResponse:
        response = self.client.get(_path(project_id), self.list_options.to_query())
        return self._decode(KeysResponse, response)

    def create(self, project_id: str, keys, *, use_automations: bool | None = None) -> KeysResponse:
        body: dict[str, Any] = {"keys": _encode_all(keys)}
        if use_automations is not None:
            body["use_automations"] = use_automations
        response = self.client.post(_path(project_id), body)
        return KeysResponse.from_dict(response.payload)

    def retrieve(self, project_id: str, key_id: int) -> KeyResponse:
        response = self.client.get(_path_by_id(project_id, key_id), self.retrieve_options.to_query())
        return self._decode(KeyResponse, response)

    def update(self, project_id: str, key_id: int, key: NewKey) -> KeyResponse:
        response = self.client.put(_path_by_id(project_id, key_id), key.to_dict())
        return self._decode(KeyResponse, response)

    def bulk_update(self, project_id: str, keys, *, use_automations: bool | None = None) -> KeysResponse:
        body: dict[str, Any] = {"keys": _encode_all(keys)}
        if use_automations is not None:
            body["use_automations"] = use_automations
        response = self.client.put(_path(project_id), body)
        return KeysResponse.from_dict(response.payload)

    def delete(self, project_id: str, key_id: int) -> DeleteKeyResponse:
        response = self.client.delete(_path_by_id(project_id, key_id))
        return self._decode(DeleteKeyResponse, response)

    def bulk_delete(self, project_id: str, key_ids) -> DeleteKeysResponse:
        response = self.client.delete(_path(project_id), {"keys": [int(key_id) for key_id in key_ids]})
        return self._decode(DeleteKeysResponse, response)