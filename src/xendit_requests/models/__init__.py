"""Resource records and the operations the Xendit API exposes on them.

Each resource pairs a frozen record type (with a static ``WIRE_KEYS`` table)
with a small service class bound to an ``XenditClient``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from xendit_requests.exceptions import ValidationError

if TYPE_CHECKING:
    from xendit_requests.client import XenditClient


class ResourceBase:
    """Holds the client a resource's operations dispatch through."""

    def __init__(self, client: XenditClient):
        self._client = client


def path_id(resource_id: str) -> str:
    """Validate a resource ID and escape it for use as a path segment."""
    if not resource_id or not str(resource_id).strip():
        raise ValidationError("id", "must not be empty")
    return quote(str(resource_id), safe="")


# Re-export resource classes for convenience
from xendit_requests.models.invoice import Invoice as Invoice
from xendit_requests.models.invoice import Invoices as Invoices
from xendit_requests.models.recurring_payment import DAY as DAY
from xendit_requests.models.recurring_payment import INTERVALS as INTERVALS
from xendit_requests.models.recurring_payment import MONTH as MONTH
from xendit_requests.models.recurring_payment import WEEK as WEEK
from xendit_requests.models.recurring_payment import RecurringPayment as RecurringPayment
from xendit_requests.models.recurring_payment import RecurringPayments as RecurringPayments

__all__ = [
    "ResourceBase",
    "path_id",
    "Invoice",
    "Invoices",
    "RecurringPayment",
    "RecurringPayments",
    "DAY",
    "WEEK",
    "MONTH",
    "INTERVALS",
]
