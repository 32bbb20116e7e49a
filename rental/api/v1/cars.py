from fastapi import APIRouter, Depends, HTTPException, Query

from rental.api.v1 import presenters
from rental.api.v1.schemas import (
    CarDetailSchema,
    CarInsightsSchema,
    CarSummarySchema,
    DescriptionRequestSchema,
    DescriptionResponseSchema,
    NearbyLinkSchema,
    SearchIntentSchema,
)
from rental.application.exceptions import ListingNotFoundError
from rental.application.ports.listing_source import ListingSourcePort
from rental.application.use_cases.car_insights import CarInsightsUseCase
from rental.application.use_cases.car_search import CarSearchUseCase
from rental.core.config import settings
from rental.wiring.dependencies import get_car_search_use_case, get_insights_use_case, get_listing_source

router = APIRouter()


@router.get("/cars", response_model=list[CarSummarySchema])
def search_cars(
    location: str | None = Query(None),
    currency: str = Query(settings.DEFAULT_CURRENCY),
    uc: CarSearchUseCase = Depends(get_car_search_use_case),
):
    currency = currency.upper()
    return [presenters.car_summary(car, currency) for car in uc.execute(location)]


@router.get("/cars/{car_id}", response_model=CarDetailSchema)
def car_detail(
    car_id: str,
    currency: str = Query(settings.DEFAULT_CURRENCY),
    listings: ListingSourcePort = Depends(get_listing_source),
):
    try:
        car = listings.get_car(car_id)
    except ListingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return presenters.car_detail(car, currency.upper())


@router.get("/cars/{car_id}/insights", response_model=CarInsightsSchema)
def car_insights(
    car_id: str,
    listings: ListingSourcePort = Depends(get_listing_source),
    uc: CarInsightsUseCase = Depends(get_insights_use_case),
):
    try:
        car = listings.get_car(car_id)
    except ListingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    nearby = uc.nearby(car.location)
    return CarInsightsSchema(
        car_id=car.id,
        highlights=uc.highlights(car),
        nearby_text=nearby.text,
        nearby_links=[NearbyLinkSchema(title=l.get("title", ""), uri=l.get("uri", "")) for l in nearby.links],
    )


@router.post("/cars/description", response_model=DescriptionResponseSchema)
def generate_description(req: DescriptionRequestSchema, uc: CarInsightsUseCase = Depends(get_insights_use_case)):
    return DescriptionResponseSchema(description=uc.description(req.make, req.model, req.year, req.location))


@router.get("/search/parse", response_model=SearchIntentSchema | None)
def parse_search(q: str = Query(...), uc: CarInsightsUseCase = Depends(get_insights_use_case)):
    intent = uc.parse_search(q)
    if intent is None:
        return None
    return SearchIntentSchema(location=intent.location, date=intent.date)
