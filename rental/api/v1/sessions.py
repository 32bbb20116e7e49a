from __future__ import annotations

from collections.abc import Callable

from fastapi import APIRouter, Depends, HTTPException, Response

from rental.api.v1 import presenters
from rental.api.v1.schemas import (
    BookingSchema,
    CurrencyRequestSchema,
    DayClickRequestSchema,
    FieldEditRequestSchema,
    MonthGridSchema,
    NavigateMonthRequestSchema,
    NavigateRequestSchema,
    OpenCarRequestSchema,
    PaymentMethodRequestSchema,
    PlanRequestSchema,
    ProceedResponseSchema,
    SessionSnapshotSchema,
    SubmitResponseSchema,
)
from rental.application.exceptions import BookingFlowError, ListingNotFoundError
from rental.application.ports.booking_history import BookingHistoryPort
from rental.application.ports.listing_source import ListingSourcePort
from rental.application.use_cases.booking_lifecycle import BookingLifecycleController
from rental.infrastructure.store.session_registry import MemorySessionRegistry
from rental.wiring.dependencies import (
    get_booking_history,
    get_controller_factory,
    get_listing_source,
    get_session_registry,
)

router = APIRouter()


def _controller(session_id: str, registry: MemorySessionRegistry) -> BookingLifecycleController:
    controller = registry.get(session_id)
    if controller is None:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return controller


def _run(session_id: str, registry: MemorySessionRegistry, action: Callable[[BookingLifecycleController], object]):
    controller = _controller(session_id, registry)
    try:
        action(controller)
    except BookingFlowError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return presenters.snapshot(session_id, controller)


@router.post("/sessions", response_model=SessionSnapshotSchema, status_code=201)
def create_session(
    registry: MemorySessionRegistry = Depends(get_session_registry),
    factory: Callable[[str], BookingLifecycleController] = Depends(get_controller_factory),
):
    session_id, controller = registry.create(factory)
    return presenters.snapshot(session_id, controller)


@router.get("/sessions/{session_id}", response_model=SessionSnapshotSchema)
def get_session(session_id: str, registry: MemorySessionRegistry = Depends(get_session_registry)):
    return presenters.snapshot(session_id, _controller(session_id, registry))


@router.delete("/sessions/{session_id}", status_code=204)
def delete_session(session_id: str, registry: MemorySessionRegistry = Depends(get_session_registry)):
    if not registry.remove(session_id):
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return Response(status_code=204)


@router.post("/sessions/{session_id}/currency", response_model=SessionSnapshotSchema)
def set_currency(
    session_id: str,
    req: CurrencyRequestSchema,
    registry: MemorySessionRegistry = Depends(get_session_registry),
):
    return _run(session_id, registry, lambda c: c.set_currency(req.currency))


@router.post("/sessions/{session_id}/car", response_model=SessionSnapshotSchema)
def open_car(
    session_id: str,
    req: OpenCarRequestSchema,
    registry: MemorySessionRegistry = Depends(get_session_registry),
    listings: ListingSourcePort = Depends(get_listing_source),
):
    try:
        car = listings.get_car(req.car_id)
    except ListingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _run(session_id, registry, lambda c: c.open_car(car))


@router.post("/sessions/{session_id}/close", response_model=SessionSnapshotSchema)
def close_details(session_id: str, registry: MemorySessionRegistry = Depends(get_session_registry)):
    return _run(session_id, registry, lambda c: c.close_details())


@router.get("/sessions/{session_id}/calendar", response_model=MonthGridSchema)
def get_calendar(session_id: str, registry: MemorySessionRegistry = Depends(get_session_registry)):
    controller = _controller(session_id, registry)
    try:
        grid = controller.month_grid()
    except BookingFlowError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return presenters.month_grid(grid)


@router.post("/sessions/{session_id}/calendar/click", response_model=SessionSnapshotSchema)
def click_day(
    session_id: str,
    req: DayClickRequestSchema,
    registry: MemorySessionRegistry = Depends(get_session_registry),
):
    return _run(session_id, registry, lambda c: c.click_day(req.date))


@router.post("/sessions/{session_id}/calendar/navigate", response_model=MonthGridSchema)
def navigate_month(
    session_id: str,
    req: NavigateMonthRequestSchema,
    registry: MemorySessionRegistry = Depends(get_session_registry),
):
    controller = _controller(session_id, registry)
    try:
        controller.navigate_month(req.step)
    except BookingFlowError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return presenters.month_grid(controller.month_grid())


@router.post("/sessions/{session_id}/proceed", response_model=ProceedResponseSchema)
def proceed(session_id: str, registry: MemorySessionRegistry = Depends(get_session_registry)):
    controller = _controller(session_id, registry)
    try:
        proceeded = controller.proceed_to_checkout()
    except BookingFlowError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return ProceedResponseSchema(proceeded=proceeded, session=presenters.snapshot(session_id, controller))


@router.post("/sessions/{session_id}/back", response_model=SessionSnapshotSchema)
def back(session_id: str, registry: MemorySessionRegistry = Depends(get_session_registry)):
    return _run(session_id, registry, lambda c: c.back_to_details())


@router.post("/sessions/{session_id}/plan", response_model=SessionSnapshotSchema)
def select_plan(
    session_id: str,
    req: PlanRequestSchema,
    registry: MemorySessionRegistry = Depends(get_session_registry),
):
    return _run(session_id, registry, lambda c: c.select_plan(req.plan))


@router.post("/sessions/{session_id}/checkout/payment-method", response_model=SessionSnapshotSchema)
def set_payment_method(
    session_id: str,
    req: PaymentMethodRequestSchema,
    registry: MemorySessionRegistry = Depends(get_session_registry),
):
    return _run(session_id, registry, lambda c: c.set_payment_method(req.method))


@router.post("/sessions/{session_id}/checkout/field", response_model=SessionSnapshotSchema)
def edit_field(
    session_id: str,
    req: FieldEditRequestSchema,
    registry: MemorySessionRegistry = Depends(get_session_registry),
):
    return _run(session_id, registry, lambda c: c.edit_field(req.field, req.value))


@router.post("/sessions/{session_id}/checkout/submit", response_model=SubmitResponseSchema)
def submit_checkout(session_id: str, registry: MemorySessionRegistry = Depends(get_session_registry)):
    controller = _controller(session_id, registry)
    try:
        result = controller.submit_checkout()
    except BookingFlowError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return SubmitResponseSchema(
        valid=result.valid,
        field_errors=result.field_errors,
        first_error_field=result.first_error_field,
        session=presenters.snapshot(session_id, controller),
    )


@router.post("/sessions/{session_id}/navigate", response_model=SessionSnapshotSchema)
def navigate(
    session_id: str,
    req: NavigateRequestSchema,
    registry: MemorySessionRegistry = Depends(get_session_registry),
):
    if req.target == "trips":
        return _run(session_id, registry, lambda c: c.navigate_trips())
    return _run(session_id, registry, lambda c: c.navigate_home())


@router.get("/bookings", response_model=list[BookingSchema])
def list_bookings(history: BookingHistoryPort = Depends(get_booking_history)):
    return [presenters.booking(b) for b in history.list_bookings()]
