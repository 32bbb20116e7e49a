from functools import lru_cache
import logging
from collections.abc import Callable

from rental.core.config import settings
from rental.application.ports.auth_gateway import AuthGatewayPort
from rental.application.ports.availability import UnavailableDatesPort
from rental.application.ports.booking_history import BookingHistoryPort
from rental.application.ports.insights import InsightPort
from rental.application.ports.listing_source import ListingSourcePort
from rental.application.ports.scheduler import SchedulerPort
from rental.application.use_cases.booking_lifecycle import BookingLifecycleController
from rental.application.use_cases.car_insights import CarInsightsUseCase
from rental.application.use_cases.car_search import CarSearchUseCase
from rental.infrastructure.auth.http_auth import HttpAuthGateway
from rental.infrastructure.auth.json_auth import JsonFileAuthGateway
from rental.infrastructure.availability.ledger_availability import LedgerUnavailableDates
from rental.infrastructure.availability.mock_availability import MockUnavailableDates
from rental.infrastructure.listings.http_listings import HttpListingSource
from rental.infrastructure.listings.static_listings import StaticListingSource
from rental.infrastructure.llm.mock_insights import MockInsights
from rental.infrastructure.llm.openai_insights import OpenAIInsights
from rental.infrastructure.scheduling.timer_scheduler import TimerScheduler
from rental.infrastructure.store.json_booking_history import JsonBookingHistory
from rental.infrastructure.store.memory_booking_history import MemoryBookingHistory
from rental.infrastructure.store.session_registry import MemorySessionRegistry


_booking_history: BookingHistoryPort | None = None
_session_registry: MemorySessionRegistry | None = None


def _is_local() -> bool:
    return settings.ENV.lower() in {"dev", "local"}


@lru_cache
def get_listing_source() -> ListingSourcePort:
    if settings.LISTINGS_URL:
        return HttpListingSource(settings.LISTINGS_URL, timeout=settings.HTTP_TIMEOUT_SECONDS)
    return StaticListingSource()


def get_booking_history() -> BookingHistoryPort:
    global _booking_history
    if _booking_history is None:
        if _is_local():
            _booking_history = JsonBookingHistory(data_dir=settings.DATA_DIR)
        else:
            _booking_history = MemoryBookingHistory()
    return _booking_history


def get_unavailable_dates() -> UnavailableDatesPort:
    return LedgerUnavailableDates(base=MockUnavailableDates(), history=get_booking_history())


@lru_cache
def get_scheduler() -> SchedulerPort:
    return TimerScheduler()


@lru_cache
def get_insights() -> InsightPort:
    if settings.OPENAI_API_KEY and settings.OPENAI_API_KEY.strip():
        return OpenAIInsights()
    logging.getLogger(__name__).info("Using MockInsights (OPENAI_API_KEY missing)")
    return MockInsights()


def get_insights_use_case() -> CarInsightsUseCase:
    return CarInsightsUseCase(insights=get_insights())


def get_car_search_use_case() -> CarSearchUseCase:
    return CarSearchUseCase(listings=get_listing_source())


@lru_cache
def get_auth_gateway() -> AuthGatewayPort:
    if settings.AUTH_BASE_URL:
        return HttpAuthGateway(settings.AUTH_BASE_URL, timeout=settings.HTTP_TIMEOUT_SECONDS)
    return JsonFileAuthGateway(data_dir=settings.DATA_DIR)


def get_session_registry() -> MemorySessionRegistry:
    global _session_registry
    if _session_registry is None:
        _session_registry = MemorySessionRegistry(
            max_idle_seconds=settings.SESSION_IDLE_SECONDS,
            max_sessions=settings.MAX_SESSIONS,
        )
    return _session_registry


def get_controller_factory() -> Callable[[str], BookingLifecycleController]:
    availability = get_unavailable_dates()
    history = get_booking_history()
    scheduler = get_scheduler()

    def build(session_id: str) -> BookingLifecycleController:
        return BookingLifecycleController(
            availability=availability,
            history=history,
            scheduler=scheduler,
            currency=settings.DEFAULT_CURRENCY,
            payment_delay_seconds=settings.PAYMENT_DELAY_SECONDS,
            session_id=session_id,
        )

    return build
