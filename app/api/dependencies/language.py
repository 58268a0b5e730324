"""Request language dependency."""

from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, Query

from infrastructure.i18n import normalize_language_code
from infrastructure.services import (
    LanguageNegotiatorDep,
    SettingsDep,
    TranslationServiceDep,
)


async def get_request_language(
    translation: TranslationServiceDep,
    negotiator: LanguageNegotiatorDep,
    settings: SettingsDep,
    language: Annotated[Optional[str], Query(max_length=10)] = None,
    accept_language: Annotated[Optional[str], Header()] = None,
) -> str:
    """Language the request is served in.

    The ``language`` query parameter wins when supported, then the
    Accept-Language header, then the fallback language. With
    I18N_STRICT_LANGUAGE enabled an unsupported ``language`` parameter is
    rejected instead.
    """
    languages = await translation.get_supported_languages()
    supported = [descriptor.code for descriptor in languages]

    if (
        settings.i18n.STRICT_LANGUAGE
        and language
        and normalize_language_code(language) not in supported
    ):
        raise HTTPException(status_code=400, detail=f"Unsupported language: {language}")

    return negotiator.negotiate(
        supported,
        requested=language,
        accept_language=accept_language,
    )


RequestLanguageDep = Annotated[str, Depends(get_request_language)]
