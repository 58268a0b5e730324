from uuid import UUID

from fastapi import APIRouter, HTTPException, Request, Response

from api.dependencies.language import RequestLanguageDep
from api.dependencies.rate_limits import CONTENT_RATE_LIMIT, get_limiter
from infrastructure.caching import CacheKeyBuilder
from infrastructure.services import HeritageServiceDep, ResponseCacheDep

router = APIRouter(prefix="/heritage", tags=["Heritage"])
limiter = get_limiter()

# Image URLs are immutable once published
IMAGE_CACHE_HEADERS = {
    "Cache-Control": "public, max-age=31536000, immutable",
    "CDN-Cache-Control": "public, max-age=31536000",
    "Vary": "Accept",
}


@router.get("/{heritage_id}")
@limiter.limit(CONTENT_RATE_LIMIT)
async def get_heritage(
    request: Request,  # pylint: disable=unused-argument
    heritage_id: UUID,
    language: RequestLanguageDep,
    heritage: HeritageServiceDep,
    cache: ResponseCacheDep,
):
    """Get a heritage item with translated descriptions and images."""

    async def load():
        detail = await heritage.get_heritage(heritage_id, language)
        return detail.to_payload() if detail is not None else None

    payload = await cache.get_or_set(CacheKeyBuilder.heritage(heritage_id, language), load)
    if payload is None:
        raise HTTPException(status_code=404, detail="Heritage item not found")
    return payload


@router.get("/{heritage_id}/images")
@limiter.limit(CONTENT_RATE_LIMIT)
async def list_heritage_images(
    request: Request,  # pylint: disable=unused-argument
    heritage_id: UUID,
    response: Response,
    heritage: HeritageServiceDep,
    cache: ResponseCacheDep,
):
    """List a heritage item's images in display order."""

    async def load():
        images = await heritage.list_images(heritage_id)
        return [image.to_payload() for image in images]

    images = await cache.get_or_set(CacheKeyBuilder.heritage_images(heritage_id), load)
    response.headers.update(IMAGE_CACHE_HEADERS)
    return {"images": images}
