from __future__ import annotations

from dataclasses import asdict

from rental.api.v1.schemas import (
    BookingSchema,
    CalendarDaySchema,
    CarDetailSchema,
    CarSummarySchema,
    DateRangeSchema,
    FeatureSchema,
    MonthGridSchema,
    PriceBreakdownSchema,
    QuoteSchema,
    SessionSnapshotSchema,
    UserProfileSchema,
)
from rental.application.use_cases.booking_lifecycle import BookingLifecycleController
from rental.application.utils.feature_categories import feature_category
from rental.application.utils.price_converter import convert, format_compact_price, format_price
from rental.domain.entities.booking import Booking
from rental.domain.entities.calendar_day import MonthGrid
from rental.domain.entities.car import Car
from rental.domain.entities.user_profile import UserProfile


def car_summary(car: Car, currency: str) -> CarSummarySchema:
    price = convert(car.price_per_day_idr, currency)
    return CarSummarySchema(
        id=car.id,
        title=car.title,
        year=car.year,
        location=car.location,
        image_url=car.image_url,
        is_sponsored=car.is_sponsored,
        rating=car.rating,
        trips=car.trips,
        daily_price=price,
        daily_price_display=format_price(price, currency),
        daily_price_compact=format_compact_price(price, currency),
        currency=currency,
    )


def car_detail(car: Car, currency: str) -> CarDetailSchema:
    return CarDetailSchema(
        **car_summary(car, currency).model_dump(),
        host_id=car.host_id,
        description=car.description,
        available=car.available,
        features=[FeatureSchema(name=f, category=feature_category(f)) for f in car.features],
    )


def booking(b: Booking) -> BookingSchema:
    return BookingSchema(**asdict(b))


def month_grid(grid: MonthGrid) -> MonthGridSchema:
    return MonthGridSchema(
        year=grid.year,
        month_index=grid.month_index,
        month_name=grid.month_name,
        weeks=[
            [
                CalendarDaySchema(date=c.date, day=c.day, status=c.status.value, connector=c.connector) if c else None
                for c in week
            ]
            for week in grid.weeks
        ],
    )


def snapshot(session_id: str, controller: BookingLifecycleController) -> SessionSnapshotSchema:
    quote = controller.quote()
    date_range = controller.date_range
    car = controller.car
    return SessionSnapshotSchema(
        session_id=session_id,
        state=controller.state.value,
        car=car_summary(car, controller.currency) if car else None,
        date_range=DateRangeSchema(start=date_range.start, end=date_range.end),
        unavailable_dates=sorted(controller.unavailable_dates),
        can_proceed=controller.can_proceed,
        processing=controller.processing,
        currency=controller.currency,
        rate_plan=controller.rate_plan,
        payment_method=controller.payment_method,
        quote=(
            QuoteSchema(
                currency=quote.currency,
                daily_rate=quote.daily_rate,
                days=quote.days,
                plan=quote.plan,
                breakdown=PriceBreakdownSchema(**asdict(quote.breakdown)),
                total_display=quote.formatted_total,
            )
            if quote
            else None
        ),
        field_errors=controller.field_errors,
        last_booking=booking(controller.last_booking) if controller.last_booking else None,
    )


def user_profile(profile: UserProfile) -> UserProfileSchema:
    return UserProfileSchema(**asdict(profile))
