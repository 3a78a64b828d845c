"""Translation orders placed with a team."""

from __future__ import annotations

from dataclasses import dataclass

from .common import WithCreationTime, WithCreationUser, WithProjectID
from .pagination import Paged
from .serialization import JsonModel, json_field
from .service import BaseService

PATH_TEAMS = "teams"
PATH_ORDERS = "orders"


@dataclass
class Order(WithProjectID, WithCreationTime, WithCreationUser):
    order_id: str = json_field("order_id", default="")
    card_id: int = json_field("card_id", default=0)
    status: str = json_field("status", default="")
    source_lang_iso: str = json_field("source_language_iso", default="")
    target_lang_isos: list[str] = json_field("target_language_isos", default_factory=list)
    keys: list[int] = json_field("keys", default_factory=list)
    source_words: dict[str, int] = json_field("source_words", default_factory=dict)
    provider_slug: str = json_field("provider_slug", default="")
    translation_style: str = json_field("translation_style", omitempty=True, default="")
    translation_tier_id: int = json_field("translation_tier", default=0)
    translation_tier_name: str = json_field("translation_tier_name", default="")
    briefing: str = json_field("briefing", omitempty=True, default="")
    total: float = json_field("total", default=0.0)


@dataclass
class CreateOrder(JsonModel):
    project_id: str = json_field("project_id", default="")
    card_id: int = json_field("card_id", default=0)
    briefing: str = json_field("briefing", default="")
    source_lang_iso: str = json_field("source_language_iso", default="")
    target_lang_isos: list[str] = json_field("target_language_isos", default_factory=list)
    keys: list[int] = json_field("keys", default_factory=list)
    provider_slug: str = json_field("provider_slug", default="")
    translation_tier_id: int = json_field("translation_tier", default=0)
    dry_run: bool = json_field("dry_run", omitempty=True, default=False)
    translation_style: str = json_field("translation_style", omitempty=True, default="")


@dataclass
class OrdersResponse(Paged):
    orders: list[Order] = json_field("orders", default_factory=list)


def _path(team_id: int) -> str:
    return f"{PATH_TEAMS}/{int(team_id)}/{PATH_ORDERS}"


class OrderService(BaseService):
    """Order endpoints."""

    def list(self, team_id: int) -> OrdersResponse:
        response = self.client.get(_path(team_id), self.page_options.to_query())
        return self._decode(OrdersResponse, response)

    def create(self, team_id: int, order: CreateOrder) -> Order:
        response = self.client.post(_path(team_id), order)
        return self._decode(Order, response)

    def retrieve(self, team_id: int, order_id: str) -> Order:
        response = self.client.get(f"{_path(team_id)}/{order_id}")
        return self._decode(Order, response)