"""Multilingual content feature settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Translation resolution configuration.

    Environment Variables:
        I18N_FALLBACK_LANGUAGE: Language used when a field has no translation
            in the requested language (default: en)
        I18N_STRICT_LANGUAGE: Reject unsupported ``language`` query parameters
            with a 400 instead of negotiating a fallback (default: False)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        fallback = settings.i18n.FALLBACK_LANGUAGE
        ```
    """

    FALLBACK_LANGUAGE: str = Field(default="en", alias="I18N_FALLBACK_LANGUAGE")
    STRICT_LANGUAGE: bool = Field(default=False, alias="I18N_STRICT_LANGUAGE")

    @field_validator("FALLBACK_LANGUAGE")
    @classmethod
    def normalize_language(cls, v: str) -> str:
        """Language codes are stored lower-case."""
        v = v.strip().lower()
        if not v:
            raise ValueError("I18N_FALLBACK_LANGUAGE must not be empty")
        return v
