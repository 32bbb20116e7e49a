from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum

AGE_PLACEHOLDER = "Select your age"
AGE_BRACKETS = ("18-20", "21-24", "25+")
COUNTRY_CODES = ("ID +62", "US +1", "MY +60", "SG +65")


class PaymentMethod(str, Enum):
    CARD = "card"
    ALTERNATIVE = "alternative"


@dataclass
class CheckoutForm:
    country_code: str = "ID +62"
    mobile: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    age: str = ""
    # card fields, only validated for PaymentMethod.CARD
    card_number: str = ""
    expiry: str = ""
    cvc: str = ""
    card_country: str = "Indonesia"


FORM_FIELDS = tuple(f.name for f in fields(CheckoutForm))
