from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, Request

from api.dependencies.language import RequestLanguageDep
from api.dependencies.rate_limits import CONTENT_RATE_LIMIT, get_limiter
from infrastructure.caching import CacheKeyBuilder
from infrastructure.services import CityServiceDep, ResponseCacheDep
from modules.cities import CityFilters, CityHeritage, CitySummary, Region
from modules.heritage import HeritageCategory

router = APIRouter(prefix="/cities", tags=["Cities"])
limiter = get_limiter()


@router.get("")
@limiter.limit(CONTENT_RATE_LIMIT)
async def list_cities(
    request: Request,  # pylint: disable=unused-argument
    language: RequestLanguageDep,
    cities: CityServiceDep,
    cache: ResponseCacheDep,
    state: Annotated[Optional[str], Query(max_length=100)] = None,
    region: Optional[Region] = None,
    search: Annotated[Optional[str], Query(max_length=255)] = None,
):
    """List cities, optionally filtered by state, region or search term."""
    filters = CityFilters(state=state, region=region, search=search)
    key = CacheKeyBuilder.cities(
        language,
        state=state,
        region=region.value if region else None,
        search=search,
    )

    async def load():
        result = await cities.list_cities(language, filters)
        return [city.to_payload() for city in result]

    return {"cities": await cache.get_or_set(key, load)}


@router.get("/{city_id}/heritage")
@limiter.limit(CONTENT_RATE_LIMIT)
async def list_city_heritage(
    request: Request,  # pylint: disable=unused-argument
    city_id: UUID,
    language: RequestLanguageDep,
    cities: CityServiceDep,
    cache: ResponseCacheDep,
    category: Optional[HeritageCategory] = None,
):
    """Get a city and its heritage items, optionally one category only."""
    key = CacheKeyBuilder.city_heritage(
        city_id, language, category.value if category else None
    )

    async def load():
        city = await cities.get_city(city_id, language)
        if city is None:
            return None
        items = await cities.list_city_heritage(city_id, language, category)
        return CityHeritage(
            city=CitySummary(
                id=city.id, name=city.name, state=city.state, region=city.region
            ),
            heritage_items=items,
        ).to_payload()

    payload = await cache.get_or_set(key, load)
    if payload is None:
        raise HTTPException(status_code=404, detail="City not found")
    return payload
