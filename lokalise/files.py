"""Uploading, downloading and listing translation files."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from .client import RestClient
from .common import WithProjectID
from .pagination import PageOptions, Paged
from .processes import QueuedProcess
from .serialization import JsonModel, json_field, to_query
from .service import BaseService

PATH_FILES = "files"


@dataclass
class File(JsonModel):
    filename: str = json_field("filename", default="")
    key_count: int = json_field("key_count", default=0)


@dataclass
class FileUpload(JsonModel):
    data: str = json_field("data", default="")
    filename: str = json_field("filename", default="")
    lang_iso: str = json_field("lang_iso", default="")
    tags: list[str] = json_field("tags", omitempty=True, default_factory=list)

    convert_placeholders: bool | None = json_field("convert_placeholders", omitempty=True, default=None)
    detect_icu_plurals: bool = json_field("detect_icu_plurals", omitempty=True, default=False)
    tag_inserted_keys: bool | None = json_field("tag_inserted_keys", omitempty=True, default=None)
    tag_updated_keys: bool | None = json_field("tag_updated_keys", omitempty=True, default=None)
    tag_skipped_keys: bool = json_field("tag_skipped_keys", omitempty=True, default=False)
    replace_modified: bool = json_field("replace_modified", omitempty=True, default=False)
    slashn_to_linebreak: bool | None = json_field("slashn_to_linebreak", omitempty=True, default=None)
    keys_to_values: bool = json_field("keys_to_values", omitempty=True, default=False)
    distinguish_by_file: bool = json_field("distinguish_by_file", omitempty=True, default=False)
    apply_tm: bool = json_field("apply_tm", omitempty=True, default=False)
    hidden_from_contributors: bool = json_field("hidden_from_contributors", omitempty=True, default=False)
    cleanup_mode: bool = json_field("cleanup_mode", omitempty=True, default=False)
    custom_translation_status_ids: list[int] = json_field(
        "custom_translation_status_ids", omitempty=True, default_factory=list
    )
    custom_translation_status_inserted_keys: bool | None = json_field(
        "custom_translation_status_inserted_keys", omitempty=True, default=None
    )
    custom_translation_status_updated_keys: bool | None = json_field(
        "custom_translation_status_updated_keys", omitempty=True, default=None
    )
    custom_translation_status_skipped_keys: bool | None = json_field(
        "custom_translation_status_skipped_keys", omitempty=True, default=None
    )
    queue: bool = json_field("queue", default=False)
    skip_detect_lang_iso: bool = json_field("skip_detect_lang_iso", omitempty=True, default=False)
    use_automations: bool | None = json_field("use_automations", omitempty=True, default=None)


@dataclass
class LanguageMapping(JsonModel):
    original_lang_iso: str = json_field("original_language_iso", default="")
    custom_lang_iso: str = json_field("custom_language_iso", default="")


@dataclass
class FileDownload(JsonModel):
    format: str = json_field("format", default="")
    original_filenames: bool | None = json_field("original_filenames", omitempty=True, default=None)
    bundle_structure: str = json_field("bundle_structure", omitempty=True, default="")
    directory_prefix: str | None = json_field("directory_prefix", omitempty=True, default=None)
    all_platforms: bool = json_field("all_platforms", omitempty=True, default=False)
    filter_langs: list[str] = json_field("filter_langs", omitempty=True, default_factory=list)
    filter_data: list[str] = json_field("filter_data", omitempty=True, default_factory=list)
    filter_filenames: list[str] = json_field("filter_filenames", omitempty=True, default_factory=list)
    add_newline_eof: bool = json_field("add_newline_eof", omitempty=True, default=False)
    custom_translation_status_ids: list[str] = json_field(
        "custom_translation_status_ids", omitempty=True, default_factory=list
    )
    include_tags: list[str] = json_field("include_tags", omitempty=True, default_factory=list)
    exclude_tags: list[str] = json_field("exclude_tags", omitempty=True, default_factory=list)
    export_sort: str = json_field("export_sort", omitempty=True, default="")
    export_empty_as: str = json_field("export_empty_as", omitempty=True, default="")
    include_comments: bool = json_field("include_comments", omitempty=True, default=False)
    include_description: bool | None = json_field("include_description", omitempty=True, default=None)
    include_project_ids: list[str] = json_field("include_pids", omitempty=True, default_factory=list)
    triggers: list[str] = json_field("triggers", omitempty=True, default_factory=list)
    filter_repositories: list[str] = json_field("filter_repositories", omitempty=True, default_factory=list)
    replace_breaks: bool | None = json_field("replace_breaks", omitempty=True, default=None)
    disable_references: bool = json_field("disable_references", omitempty=True, default=False)
    plural_format: str = json_field("plural_format", omitempty=True, default="")
    placeholder_format: str = json_field("placeholder_format", omitempty=True, default="")
    webhook_url: str = json_field("webhook_url", omitempty=True, default="")
    language_mapping: list[LanguageMapping] = json_field(
        "language_mapping", omitempty=True, default_factory=list
    )
    icu_numeric: bool = json_field("icu_numeric", omitempty=True, default=False)
    escape_percent: bool = json_field("escape_percent", omitempty=True, default=False)
    indentation: str = json_field("indentation", omitempty=True, default="")
    yaml_include_root: bool = json_field("yaml_include_root", omitempty=True, default=False)
    json_unescaped_slashes: bool = json_field("json_unescaped_slashes", omitempty=True, default=False)
    java_properties_encoding: str = json_field("java_properties_encoding", omitempty=True, default="")
    java_properties_separator: str = json_field("java_properties_separator", omitempty=True, default="")
    bundle_description: str = json_field("bundle_description", omitempty=True, default="")


@dataclass
class FilesResponse(Paged, WithProjectID):
    files: list[File] = json_field("files", default_factory=list)


@dataclass
class FileUploadResponse(WithProjectID):
    process: QueuedProcess = json_field("process", default_factory=QueuedProcess)


@dataclass
class FileDownloadResponse(WithProjectID):
    bundle_url: str = json_field("bundle_url", default="")


@dataclass
class FileListOptions(JsonModel):
    limit: int = json_field("limit", omitempty=True, default=0)
    page: int = json_field("page", omitempty=True, default=0)
    filename: str = json_field("filter_filename", omitempty=True, default="")

    def to_query(self) -> dict[str, str]:
        return to_query(self)


def _path(project_id: str) -> str:
    return f"projects/{project_id}/{PATH_FILES}"


class FileService(BaseService):
    """File endpoints."""

    def __init__(
        self,
        client: RestClient,
        page_options: PageOptions | None = None,
        list_options: FileListOptions | None = None,
    ) -> None:
        super().__init__(client, page_options)
        self.list_options = list_options if list_options is not None else FileListOptions()

    def with_list_options(self, options: FileListOptions) -> "FileService":
        """Use ``options`` for the following list calls and return the service."""
        self.list_options = options
        return self

    def list(self, project_id: str) -> FilesResponse:
        response = self.client.get(_path(project_id), self.list_options.to_query())
        return self._decode(FilesResponse, response)

    def upload(self, project_id: str, upload: FileUpload) -> FileUploadResponse:
        """Queue a file import; unset custom status flags get the API defaults."""

        def default(value, fallback):
            return fallback if value is None else value

        body = dataclasses.replace(
            upload,
            custom_translation_status_skipped_keys=default(upload.custom_translation_status_skipped_keys, False),
            custom_translation_status_updated_keys=default(upload.custom_translation_status_updated_keys, True),
            custom_translation_status_inserted_keys=default(upload.custom_translation_status_inserted_keys, True),
            queue=True,
        )
        response = self.client.post(f"{_path(project_id)}/upload", body)
        return self._decode(FileUploadResponse, response)

    def download(self, project_id: str, options: FileDownload) -> FileDownloadResponse:
        response = self.client.post(f"{_path(project_id)}/download", options)
        return self._decode(FileDownloadResponse, response)