"""Recurring payments: scheduled invoices billed at a fixed interval."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, Mapping
from urllib.parse import urlencode

from xendit_requests import wire
from xendit_requests.models import ResourceBase, path_id
from xendit_requests.models.invoice import Invoice

DAY = "DAY"
WEEK = "WEEK"
MONTH = "MONTH"
INTERVALS = (DAY, WEEK, MONTH)


@dataclass(frozen=True)
class RecurringPayment:
    """A recurring payment as returned by the API.

    Every field is optional; ``None`` means the value is not set or not known.
    Use ``dataclasses.replace`` to derive a desired state for ``edit``.
    """

    id: str | None = None
    external_id: str | None = None
    payer_email: str | None = None
    description: str | None = None
    amount: int | Decimal | None = None
    interval: str | None = None
    interval_count: int | None = None
    status: str | None = None
    total_recurrence: int | None = None
    invoice_duration: int | None = None
    should_send_email: bool | None = None
    missed_payment_action: str | None = None
    credit_card_token: str | None = None
    start_date: str | None = None
    success_redirect_url: str | None = None
    failure_redirect_url: str | None = None
    recharge: bool | None = None
    charge_immediately: bool | None = None

    WIRE_KEYS: ClassVar[dict[str, str]] = {
        "id": "id",
        "external_id": "external_id",
        "payer_email": "payer_email",
        "description": "description",
        "amount": "amount",
        "interval": "interval",
        "interval_count": "interval_count",
        "status": "status",
        "total_recurrence": "total_recurrence",
        "invoice_duration": "invoice_duration",
        "should_send_email": "should_send_email",
        "missed_payment_action": "missed_payment_action",
        "credit_card_token": "credit_card_token",
        "start_date": "start_date",
        "success_redirect_url": "success_redirect_url",
        "failure_redirect_url": "failure_redirect_url",
        "recharge": "recharge",
        "charge_immediately": "charge_immediately",
    }

    def to_params(self) -> dict[str, Any]:
        """Wire mapping of the fields that are set."""
        return wire.encode(self)


class RecurringPayments(ResourceBase):
    """Operations on ``/recurring_payments``."""

    PATH = "/recurring_payments"

    def create(
        self,
        external_id: str,
        payer_email: str,
        interval: str,
        interval_count: int,
        description: str,
        amount: int | Decimal,
    ) -> RecurringPayment:
        """Create a recurring payment from the required fields only.

        Args:
            external_id: ID of your choice, typically the recurring payment's
                identifier in your system.
            payer_email: Email of the end user being charged.
            interval: One of DAY, WEEK, MONTH.
            interval_count: Number of intervals between invoices, e.g.
                interval=MONTH and interval_count=3 bills every 3 months.
            description: Description for the recurring payment and its invoices.
            amount: Amount per invoice per interval.
        """
        params = {
            "external_id": external_id,
            "payer_email": payer_email,
            "interval": interval,
            "interval_count": interval_count,
            "description": description,
            "amount": amount,
        }
        return self.create_with_params(params)

    def create_with_params(
        self,
        params: Mapping[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> RecurringPayment:
        """Create a recurring payment from a caller-assembled parameter map.

        ``headers`` are sent on top of the client defaults, e.g. an
        idempotency key or ``for-user-id``.
        """
        return self._client.post(
            self.PATH,
            RecurringPayment,
            params=wire.encode_params(RecurringPayment, params),
            headers=headers,
        )

    def edit(self, recurring_payment_id: str, params: Mapping[str, Any]) -> RecurringPayment:
        """PATCH only the supplied fields; nothing is merged client-side."""
        return self._client.patch(
            f"{self.PATH}/{path_id(recurring_payment_id)}",
            RecurringPayment,
            params=wire.encode_params(RecurringPayment, params),
        )

    def get(self, recurring_payment_id: str) -> RecurringPayment:
        return self._client.get(
            f"{self.PATH}/{path_id(recurring_payment_id)}", RecurringPayment
        )

    def _action(self, recurring_payment_id: str, action: str) -> RecurringPayment:
        # The API names action endpoints with a trailing "!"
        return self._client.post(
            f"{self.PATH}/{path_id(recurring_payment_id)}/{action}!", RecurringPayment
        )

    def stop(self, recurring_payment_id: str) -> RecurringPayment:
        return self._action(recurring_payment_id, "stop")

    def pause(self, recurring_payment_id: str) -> RecurringPayment:
        return self._action(recurring_payment_id, "pause")

    def resume(self, recurring_payment_id: str) -> RecurringPayment:
        return self._action(recurring_payment_id, "resume")

    def get_payments_by_id(self, recurring_payment_id: str) -> list[Invoice]:
        """Invoices issued for a recurring payment, in API order."""
        path_id(recurring_payment_id)
        query = urlencode({"recurring_payment_id": recurring_payment_id})
        return self._client.get(f"/v2/invoices?{query}", list[Invoice])
