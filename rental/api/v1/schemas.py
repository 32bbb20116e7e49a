from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from rental.domain.entities.checkout_form import PaymentMethod
from rental.domain.entities.rate_plan import RatePlan


class FeatureSchema(BaseModel):
    name: str
    category: str


class CarSummarySchema(BaseModel):
    id: str
    title: str
    year: int
    location: str
    image_url: str
    is_sponsored: bool
    rating: float | None = None
    trips: int | None = None
    daily_price: int
    daily_price_display: str
    daily_price_compact: str
    currency: str


class CarDetailSchema(CarSummarySchema):
    host_id: str
    description: str
    available: bool
    features: list[FeatureSchema] = Field(default_factory=list)


class NearbyLinkSchema(BaseModel):
    title: str
    uri: str


class CarInsightsSchema(BaseModel):
    car_id: str
    highlights: list[str]
    nearby_text: str
    nearby_links: list[NearbyLinkSchema] = Field(default_factory=list)


class DescriptionRequestSchema(BaseModel):
    make: str
    model: str
    year: int
    location: str


class DescriptionResponseSchema(BaseModel):
    description: str


class SearchIntentSchema(BaseModel):
    location: str
    date: str = ""


class DateRangeSchema(BaseModel):
    start: str | None = None
    end: str | None = None


class PriceBreakdownSchema(BaseModel):
    subtotal: int
    taxes: int
    protection_fee: int
    discount: int
    total: int


class QuoteSchema(BaseModel):
    currency: str
    daily_rate: int
    days: int
    plan: RatePlan
    breakdown: PriceBreakdownSchema
    total_display: str


class BookingSchema(BaseModel):
    id: str
    reference_code: str
    car_id: str
    start_date: str
    end_date: str
    total_price: int
    currency: str
    status: str
    booked_at: datetime | None = None


class SessionSnapshotSchema(BaseModel):
    session_id: str
    state: str
    car: CarSummarySchema | None = None
    date_range: DateRangeSchema
    unavailable_dates: list[str] = Field(default_factory=list)
    can_proceed: bool
    processing: bool
    currency: str
    rate_plan: RatePlan
    payment_method: PaymentMethod
    quote: QuoteSchema | None = None
    field_errors: dict[str, str] = Field(default_factory=dict)
    last_booking: BookingSchema | None = None


class CalendarDaySchema(BaseModel):
    date: str
    day: int
    status: str
    connector: str | None = None


class MonthGridSchema(BaseModel):
    year: int
    month_index: int
    month_name: str
    weeks: list[list[CalendarDaySchema | None]]


class OpenCarRequestSchema(BaseModel):
    car_id: str


class DayClickRequestSchema(BaseModel):
    date: str


class NavigateMonthRequestSchema(BaseModel):
    step: Literal[-1, 1]


class PlanRequestSchema(BaseModel):
    plan: RatePlan


class CurrencyRequestSchema(BaseModel):
    currency: str


class PaymentMethodRequestSchema(BaseModel):
    method: PaymentMethod


class FieldEditRequestSchema(BaseModel):
    field: str
    value: str


class ProceedResponseSchema(BaseModel):
    proceeded: bool
    session: SessionSnapshotSchema


class SubmitResponseSchema(BaseModel):
    valid: bool
    field_errors: dict[str, str] = Field(default_factory=dict)
    first_error_field: str | None = None
    session: SessionSnapshotSchema


class NavigateRequestSchema(BaseModel):
    target: Literal["home", "trips"]


class RegisterRequestSchema(BaseModel):
    first_name: str
    last_name: str = ""
    email: str
    password: str


class LoginRequestSchema(BaseModel):
    email: str
    password: str


class SocialLoginRequestSchema(BaseModel):
    provider: Literal["google", "apple"]
    email: str
    first_name: str = ""
    last_name: str = ""
    photo_url: str = ""


class LogoutRequestSchema(BaseModel):
    uid: str


class ProfileUpdateRequestSchema(BaseModel):
    uid: str
    updates: dict[str, Any] = Field(default_factory=dict)


class UserProfileSchema(BaseModel):
    uid: str
    display_name: str
    email: str
    photo_url: str = ""
    role: str
    currency: str
    is_host_registered: bool
    join_date: str = ""
    provider: str | None = None
