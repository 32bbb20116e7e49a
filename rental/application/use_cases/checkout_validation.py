from __future__ import annotations

import re
from dataclasses import dataclass, field

from rental.domain.entities.checkout_form import AGE_PLACEHOLDER, CheckoutForm, PaymentMethod

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"[0-9+\-\s()]*")
CARD_LENGTH_MIN = 13
CARD_LENGTH_MAX = 19


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    field_errors: dict[str, str] = field(default_factory=dict)

    @property
    def first_error_field(self) -> str | None:
        return next(iter(self.field_errors), None)


def validate_checkout_form(form: CheckoutForm, payment_method: PaymentMethod | str) -> ValidationResult:
    """Check contact fields, plus card fields when paying by card. Errors keyed by field name, in form order."""
    errors: dict[str, str] = {}

    if not form.mobile.strip():
        errors["mobile"] = "Mobile number is required"
    elif not PHONE_PATTERN.fullmatch(form.mobile):
        errors["mobile"] = "Invalid mobile format"

    if not form.email.strip():
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.fullmatch(form.email):
        errors["email"] = "Invalid email address"

    if not form.first_name.strip():
        errors["first_name"] = "First name is required"
    if not form.last_name.strip():
        errors["last_name"] = "Last name is required"
    if not form.age or form.age == AGE_PLACEHOLDER:
        errors["age"] = "Age is required"

    if PaymentMethod(payment_method) == PaymentMethod.CARD:
        digits = re.sub(r"\D", "", form.card_number)
        if not digits:
            errors["card_number"] = "Card number is required"
        elif not CARD_LENGTH_MIN <= len(digits) <= CARD_LENGTH_MAX:
            errors["card_number"] = "Invalid card length"

        if not form.expiry.strip():
            errors["expiry"] = "Expiration is required"
        if not form.cvc.strip():
            errors["cvc"] = "CVC is required"

    return ValidationResult(valid=not errors, field_errors=errors)


def clear_field_error(errors: dict[str, str], field_name: str) -> dict[str, str]:
    """Drop only field_name's error, as when the user edits that field."""
    if field_name not in errors:
        return errors
    return {k: v for k, v in errors.items() if k != field_name}
