"""System and project languages."""

from __future__ import annotations

from dataclasses import dataclass

from .common import WithProjectID
from .pagination import Paged
from .serialization import JsonModel, json_field
from .service import BaseService

PATH_LANGUAGES = "languages"


@dataclass
class Language(JsonModel):
    lang_id: int = json_field("lang_id", omitempty=True, default=0)
    lang_iso: str = json_field("lang_iso", default="")
    lang_name: str = json_field("lang_name", omitempty=True, default="")
    is_rtl: bool = json_field("is_rtl", omitempty=True, default=False)
    is_writable: bool = json_field("is_writable", default=False)
    plural_forms: list[str] = json_field("plural_forms", omitempty=True, default_factory=list)


@dataclass
class NewLanguage(JsonModel):
    lang_iso: str = json_field("lang_iso", default="")
    custom_iso: str = json_field("custom_iso", omitempty=True, default="")
    custom_name: str = json_field("custom_name", omitempty=True, default="")
    custom_plural_forms: list[str] = json_field("custom_plural_forms", omitempty=True, default_factory=list)


@dataclass
class UpdateLanguage(JsonModel):
    lang_iso: str = json_field("lang_iso", omitempty=True, default="")
    lang_name: str = json_field("lang_name", omitempty=True, default="")
    plural_forms: list[str] = json_field("plural_forms", omitempty=True, default_factory=list)


@dataclass
class ListLanguagesResponse(Paged, WithProjectID):
    languages: list[Language] = json_field("languages", default_factory=list)


@dataclass
class CreateLanguageResponse(WithProjectID):
    languages: list[Language] = json_field("languages", default_factory=list)


@dataclass
class RetrieveLanguageResponse(WithProjectID):
    language: Language = json_field("language", default_factory=Language)


@dataclass
class UpdateLanguageResponse(WithProjectID):
    language: Language = json_field("language", default_factory=Language)


@dataclass
class DeleteLanguageResponse(WithProjectID):
    language_deleted: bool = json_field("language_deleted", default=False)


def _path(project_id: str) -> str:
    return f"projects/{project_id}/{PATH_LANGUAGES}"


def _path_by_id(project_id: str, language_id: int) -> str:
    return f"{_path(project_id)}/{int(language_id)}"


class LanguageService(BaseService):
    """Language endpoints."""

    def list_system(self) -> ListLanguagesResponse:
        response = self.client.get(f"system/{PATH_LANGUAGES}", self.page_options.to_query())
        return self._decode(ListLanguagesResponse, response)

    def list_project(self, project_id: str) -> ListLanguagesResponse:
        response = self.client.get(_path(project_id), self.page_options.to_query())
        return self._decode(ListLanguagesResponse, response)

    def create(self, project_id: str, languages) -> CreateLanguageResponse:
        body = {"languages": [language.to_dict() for language in languages]}
        response = self.client.post(_path(project_id), body)
        return self._decode(CreateLanguageResponse, response)

    def retrieve(self, project_id: str, language_id: int) -> RetrieveLanguageResponse:
        response = self.client.get(_path_by_id(project_id, language_id))
        return self._decode(RetrieveLanguageResponse, response)

    def update(self, project_id: str, language_id: int, language: UpdateLanguage) -> UpdateLanguageResponse:
        response = self.client.put(_path_by_id(project_id, language_id), language)
        return self._decode(UpdateLanguageResponse, response)

    def delete(self, project_id: str, language_id: int) -> DeleteLanguageResponse:
        response = self.client.delete(_path_by_id(project_id, language_id))
        return self._decode(DeleteLanguageResponse, response)