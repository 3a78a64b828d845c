"""Payment cards of the authenticated user."""

from __future__ import annotations

from dataclasses import dataclass

from .common import WithCreationTime, WithUserID
from .pagination import Paged
from .serialization import JsonModel, json_field
from .service import BaseService

PATH_PAYMENT_CARDS = "payment_cards"


@dataclass
class PaymentCard(WithCreationTime):
    card_id: int = json_field("card_id", default=0)
    last4: str = json_field("last4", default="")
    brand: str = json_field("brand", default="")


@dataclass
class CreatePaymentCard(JsonModel):
    number: str = json_field("number", default="")
    cvc: str = json_field("cvc", default="")
    exp_month: int = json_field("exp_month", default=0)
    exp_year: int = json_field("exp_year", default=0)


@dataclass
class PaymentCardsResponse(Paged, WithUserID):
    cards: list[PaymentCard] = json_field("payment_cards", default_factory=list)


@dataclass
class PaymentCardResponse(WithUserID):
    card: PaymentCard = json_field("payment_card", default_factory=PaymentCard)


@dataclass
class DeletePaymentCardResponse(JsonModel):
    card_id: int = json_field("card_id", default=0)
    deleted: bool = json_field("card_deleted", default=False)


def _path_by_id(card_id: int) -> str:
    return f"{PATH_PAYMENT_CARDS}/{int(card_id)}"


class PaymentCardService(BaseService):
    """Payment card endpoints."""

    def create(self, card: CreatePaymentCard) -> PaymentCard:
        response = self.client.post(PATH_PAYMENT_CARDS, card)
        return self._decode(PaymentCard, response)

    def list(self) -> PaymentCardsResponse:
        response = self.client.get(PATH_PAYMENT_CARDS, self.page_options.to_query())
        return self._decode(PaymentCardsResponse, response)

    def retrieve(self, card_id: int) -> PaymentCardResponse:
        response = self.client.get(_path_by_id(card_id))
        return self._decode(PaymentCardResponse, response)

    def delete(self, card_id: int) -> DeletePaymentCardResponse:
        response = self.client.delete(_path_by_id(card_id))
        return self._decode(DeletePaymentCardResponse, response)