"""xendit-requests: typed Python client for the Xendit payments API.

Recurring payments and invoices as typed method calls over httpx. Every
response is decoded into a frozen record; every failure raises a
structured error.

Usage:
    from xendit_requests import MONTH, XenditClient, XenditConfig

    client = XenditClient(XenditConfig(api_key="xnd_development_..."))
    payment = client.recurring_payments.create(
        external_id="recurring_31451441",
        payer_email="sample_email@xendit.co",
        interval=MONTH,
        interval_count=1,
        description="Monthly subscription",
        amount=100000,
    )
    client.recurring_payments.pause(payment.id)

    # Or configure from XENDIT_API_KEY / XENDIT_BASE_URL
    client = XenditClient.from_env()
"""

from xendit_requests.client import XenditClient
from xendit_requests.config import XenditConfig
from xendit_requests.exceptions import (
    ApiError,
    ConfigError,
    TransportError,
    ValidationError,
    XenditError,
)
from xendit_requests.models import (
    DAY,
    INTERVALS,
    MONTH,
    WEEK,
    Invoice,
    Invoices,
    RecurringPayment,
    RecurringPayments,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "XenditClient",
    "XenditConfig",
    # Resources
    "RecurringPayment",
    "RecurringPayments",
    "Invoice",
    "Invoices",
    # Recurring intervals
    "DAY",
    "WEEK",
    "MONTH",
    "INTERVALS",
    # Exceptions
    "XenditError",
    "ApiError",
    "TransportError",
    "ValidationError",
    "ConfigError",
]
