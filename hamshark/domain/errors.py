# hamshark/domain/errors.py
"""
Domain exceptions.

    HamSharkError (base)
    ├── ValidationError          - bad composer input, bad cart/order data (not attempted)
    ├── NotFoundError            - order / menu item / cart line absent (no retry)
    ├── TransientSubmissionError - checkout call failed, cart kept, user may retry
    └── CheckoutInProgressError  - a checkout request is already in flight
"""

from typing import Any, Dict, Optional


class HamSharkError(Exception):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(HamSharkError):
    """Input rejected before anything is attempted."""


class NotFoundError(HamSharkError):
    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} not found", {"id": resource_id})
        self.resource = resource
        self.resource_id = resource_id


class TransientSubmissionError(HamSharkError):
    """
    Network or server failure while submitting an order.

    The cart is left untouched; retrying is up to the user.
    """

    def __init__(self, message: str = "Checkout failed, please retry", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class CheckoutInProgressError(HamSharkError):
    def __init__(self):
        super().__init__("Checkout already in progress")
