"""
FastAPI dependencies for dependency injection.

The code strategy is a process-wide singleton built from settings; the
link service is built per request around the request's database session.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from shortlink_app.config import settings
from shortlink_app.database.connection import get_db
from shortlink_app.services.link_service import LinkService, RESERVED_CODES
from shortlink_app.services.short_code_strategies import (
    ShortCodeStrategy,
    RandomShortCodeStrategy
)


@lru_cache()
def get_short_code_strategy() -> ShortCodeStrategy:
    """
    Get short code strategy instance (singleton).
    
    @lru_cache ensures this is called only once.
    """
    return RandomShortCodeStrategy(
        length=settings.short_code_length,
        alphabet=settings.short_code_alphabet,
        max_attempts=settings.short_code_max_attempts,
        max_length=settings.short_code_max_length,
        reserved=RESERVED_CODES
    )


def get_link_service(
    db: Session = Depends(get_db),
    strategy: ShortCodeStrategy = Depends(get_short_code_strategy)
) -> LinkService:
    """
    Get LinkService with all dependencies injected.
    
    Controllers depend on the service; the service depends on the session
    and the strategy. Configuration is passed in here, once.
    """
    pattern = settings.custom_code_pattern if settings.enforce_custom_code_format else None
    return LinkService(
        db=db,
        strategy=strategy,
        base_url=settings.base_url,
        custom_code_pattern=pattern
    )
