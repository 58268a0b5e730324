"""Request language negotiation.

Chooses the language a request is served in from the ``language`` query
parameter and the Accept-Language header, restricted to the languages the
catalog supports.
"""

from typing import Iterable, List, Optional, Tuple

from infrastructure.logging import get_module_logger

logger = get_module_logger()


def normalize_language_code(value: str) -> str:
    """Reduce a language tag to its lower-case primary subtag.

    Example:
        >>> normalize_language_code("hi-IN")
        'hi'
    """
    return value.strip().split("-")[0].split("_")[0].lower()


def parse_accept_language(header: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into primary subtags by preference.

    Parses "hi-IN,hi;q=0.9,en;q=0.8" -> ["hi", "hi", "en"]. Entries with an
    unparseable quality keep q=1.0; "*" and q=0 entries are skipped. The sort
    is stable, so equal-quality entries keep header order.

    Args:
        header: Raw header value, may be None or empty.

    Returns:
        Primary language subtags, most preferred first.
    """
    if not header:
        return []

    preferences: List[Tuple[str, float]] = []
    for part in header.split(","):
        lang_range, _, params = part.partition(";")
        lang_range = lang_range.strip()
        if not lang_range or lang_range == "*":
            continue

        quality = 1.0
        for param in params.split(";"):
            name, _, value = param.partition("=")
            if name.strip().lower() != "q":
                continue
            try:
                quality = float(value)
            except ValueError:
                quality = 1.0
            break
        if quality <= 0:
            continue

        preferences.append((normalize_language_code(lang_range), quality))

    preferences.sort(key=lambda item: item[1], reverse=True)
    return [code for code, _ in preferences]


class LanguageNegotiator:
    """Picks the served language for a request.

    Resolution order:
    1. ``language`` query parameter, if supported
    2. First supported entry of Accept-Language, by quality
    3. Fallback language
    """

    def __init__(self, fallback_language: str = "en"):
        self.fallback_language = fallback_language

    def negotiate(
        self,
        supported_codes: Iterable[str],
        requested: Optional[str] = None,
        accept_language: Optional[str] = None,
    ) -> str:
        """Resolve the served language.

        Args:
            supported_codes: Codes from the language catalog.
            requested: Value of the ``language`` query parameter.
            accept_language: Accept-Language header value.

        Returns:
            A supported language code, or the fallback language.
        """
        supported = set(supported_codes)

        if requested:
            code = normalize_language_code(requested)
            if code in supported:
                return code
            logger.info("unsupported_language_requested", requested=requested)

        for code in parse_accept_language(accept_language):
            if code in supported:
                return code

        return self.fallback_language
