"""Infrastructure modules for the content service.

Centralized infrastructure components:
- configuration: Settings management (Settings)
- logging: Structured logging (configure_logging, get_module_logger)
- persistence: asyncpg database access (Database, StoreError)
- i18n: Translation resolution and language catalog
- caching: Response cache and cache keys
- services: Dependency injection providers and type aliases
"""
