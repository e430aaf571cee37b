"""Invoices."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, Mapping
from urllib.parse import urlencode

from xendit_requests import wire
from xendit_requests.models import ResourceBase, path_id


@dataclass(frozen=True)
class Invoice:
    id: str | None = None
    user_id: str | None = None
    external_id: str | None = None
    status: str | None = None
    merchant_name: str | None = None
    merchant_profile_picture_url: str | None = None
    amount: int | Decimal | None = None
    payer_email: str | None = None
    description: str | None = None
    invoice_url: str | None = None
    expiry_date: str | None = None
    should_exclude_credit_card: bool | None = None
    should_send_email: bool | None = None
    created: str | None = None
    updated: str | None = None
    currency: str | None = None
    paid_at: str | None = None
    paid_amount: int | Decimal | None = None
    payment_method: str | None = None
    payment_channel: str | None = None
    payment_destination: str | None = None
    bank_code: str | None = None
    success_redirect_url: str | None = None
    failure_redirect_url: str | None = None
    recurring_payment_id: str | None = None

    WIRE_KEYS: ClassVar[dict[str, str]] = {
        "id": "id",
        "user_id": "user_id",
        "external_id": "external_id",
        "status": "status",
        "merchant_name": "merchant_name",
        "merchant_profile_picture_url": "merchant_profile_picture_url",
        "amount": "amount",
        "payer_email": "payer_email",
        "description": "description",
        "invoice_url": "invoice_url",
        "expiry_date": "expiry_date",
        "should_exclude_credit_card": "should_exclude_credit_card",
        "should_send_email": "should_send_email",
        "created": "created",
        "updated": "updated",
        "currency": "currency",
        "paid_at": "paid_at",
        "paid_amount": "paid_amount",
        "payment_method": "payment_method",
        "payment_channel": "payment_channel",
        "payment_destination": "payment_destination",
        "bank_code": "bank_code",
        "success_redirect_url": "success_redirect_url",
        "failure_redirect_url": "failure_redirect_url",
        "recurring_payment_id": "recurring_payment_id",
    }

    def to_params(self) -> dict[str, Any]:
        return wire.encode(self)


class Invoices(ResourceBase):
    """Operations on ``/v2/invoices``."""

    PATH = "/v2/invoices"

    def create(
        self,
        external_id: str,
        payer_email: str,
        description: str,
        amount: int | Decimal,
    ) -> Invoice:
        params = {
            "external_id": external_id,
            "payer_email": payer_email,
            "description": description,
            "amount": amount,
        }
        return self.create_with_params(params)

    def create_with_params(
        self,
        params: Mapping[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> Invoice:
        return self._client.post(
            self.PATH,
            Invoice,
            params=wire.encode_params(Invoice, params),
            headers=headers,
        )

    def get_by_id(self, invoice_id: str) -> Invoice:
        return self._client.get(f"{self.PATH}/{path_id(invoice_id)}", Invoice)

    def get_all(self, params: Mapping[str, Any] | None = None) -> list[Invoice]:
        """List invoices, filtered by query parameters.

        List values (e.g. ``statuses``) are sent as a JSON array string,
        ``statuses=["SETTLED", "EXPIRED"]``. Strings are sent as given.
        """
        url = self.PATH
        if params:
            query = {
                key: wire.dumps(list(value)) if isinstance(value, (list, tuple)) else value
                for key, value in params.items()
            }
            url = f"{url}?{urlencode(query)}"
        return self._client.get(url, list[Invoice])

    def expire(self, invoice_id: str) -> Invoice:
        return self._client.post(f"/invoices/{path_id(invoice_id)}/expire!", Invoice)
