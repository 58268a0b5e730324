from fastapi import APIRouter, Request

from api.dependencies.rate_limits import CONTENT_RATE_LIMIT, get_limiter

from infrastructure.caching import CacheKeyBuilder
from infrastructure.services import ResponseCacheDep, TranslationServiceDep

router = APIRouter(tags=["Languages"])
limiter = get_limiter()


@router.get("/languages")
@limiter.limit(CONTENT_RATE_LIMIT)
async def list_languages(
    request: Request,  # pylint: disable=unused-argument
    translation: TranslationServiceDep,
    cache: ResponseCacheDep,
):
    """List every supported language."""

    async def load():
        languages = await translation.get_supported_languages()
        return [language.to_dict() for language in languages]

    languages = await cache.get_or_set(
        CacheKeyBuilder.languages(),
        load,
        ttl_seconds=cache.languages_ttl_seconds,
    )
    return {"languages": languages}
