"""Server infrastructure settings."""

from typing import List

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        API_TITLE: Title shown in the OpenAPI document
        CORS_ALLOWED_ORIGINS: Comma separated list of allowed origins
        PLACEHOLDER_IMAGE_URL: Image served when a stored URL is empty

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        origins = settings.server.cors_origins
        ```
    """

    API_TITLE: str = Field(default="Culture Content API", alias="API_TITLE")
    CORS_ALLOWED_ORIGINS: str = Field(
        default="http://localhost:5173,http://127.0.0.1:5173",
        alias="CORS_ALLOWED_ORIGINS",
    )
    PLACEHOLDER_IMAGE_URL: str = Field(
        default="https://via.placeholder.com/300x200?text=No+Image",
        alias="PLACEHOLDER_IMAGE_URL",
    )

    @property
    def cors_origins(self) -> List[str]:
        """Allowed origins as a list, blanks removed."""
        return [
            origin.strip()
            for origin in self.CORS_ALLOWED_ORIGINS.split(",")
            if origin.strip()
        ]
