import logging
import re
from typing import Iterable, List, Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError
from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shortlink_app.models.link import Link, utcnow
from shortlink_app.schemas.link import LinkSummary
from shortlink_app.services.exceptions import Conflict, InvalidInput, NotFound
from shortlink_app.services.short_code_strategies import ShortCodeStrategy

logger = logging.getLogger(__name__)

# Paths served by the app itself; a link with one of these codes could never be reached
RESERVED_CODES = frozenset({"api", "docs", "redoc", "openapi.json", "health"})

# Characters that keep a code from round-tripping as a single path segment
_UNROUTABLE_CODE = re.compile(r"[/?#%\\\s]")

_url_adapter = TypeAdapter(AnyUrl)


class LinkService:
    """
    Link service with dependency injection for the code strategy.

    All state lives in the database session; the base URL used to build
    short links is handed in explicitly rather than read from settings.
    """

    def __init__(
        self,
        db: Session,
        strategy: ShortCodeStrategy,
        base_url: str = "",
        custom_code_pattern: Optional[str] = None,
        reserved_codes: Iterable[str] = RESERVED_CODES
    ):
        """
        Initialize link service with dependencies.

        Args:
            db: Database session
            strategy: Generates codes when the caller supplies none
            base_url: Prefix for fully-qualified short URLs ("" for relative)
            custom_code_pattern: If set, custom codes must fully match it
            reserved_codes: Codes that may never be assigned
        """
        self.db = db
        self.strategy = strategy
        self.base_url = base_url.rstrip("/")
        self.custom_code_pattern = (
            re.compile(custom_code_pattern) if custom_code_pattern else None
        )
        self.reserved_codes = frozenset(reserved_codes)

    def short_url_for(self, short_code: str) -> str:
        return f"{self.base_url}/{short_code}"

    def create_link(self, url: Optional[str], short_code: Optional[str] = None) -> Link:
        """Create a new link

        Note: Always creates a new link even if the URL already exists, so
        the same destination can be shared under several codes.

        Process:
        1. Validate the URL (absolute, with scheme and host)
        2. Resolve the code: custom alias or generated by the strategy
        3. Insert; a unique constraint violation means someone else took the code
        """
        url = self._clean_url(url)

        if short_code:
            code = self._claim_custom_code(short_code)
        else:
            code = self.strategy.generate(self.db)

        link = Link(short_code=code, original_url=url, clicks=0)
        self.db.add(link)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Short code %r taken concurrently", code)
            raise Conflict()
        self.db.refresh(link)

        logger.info("Created link %s -> %s", link.short_code, link.original_url)
        return link

    def list_links(self) -> List[Link]:
        """All links, newest first"""
        return (
            self.db.query(Link)
            .order_by(Link.created_at.desc())
            .all()
        )

    def get_link(self, short_code: str) -> Link:
        link = self._find(short_code)
        if link is None:
            raise NotFound()
        return link

    def delete_link(self, short_code: str) -> None:
        """Delete a link (hard delete)"""
        link = self._find(short_code)
        if link is None:
            raise NotFound()

        self.db.delete(link)
        self.db.commit()
        logger.info("Deleted link %s", short_code)

    def resolve_and_count(self, short_code: str) -> str:
        """
        Resolve a code for redirection and record the click.

        The counter is bumped with a single UPDATE so concurrent clicks
        don't overwrite each other. It is committed before the caller
        redirects; a failure after the commit can drop a redirect but
        never counts one twice.
        """
        link = self._find(short_code)
        if link is None:
            raise NotFound()

        target = link.original_url
        self.db.execute(
            update(Link)
            .where(Link.id == link.id)
            .values(clicks=Link.clicks + 1, last_clicked_at=utcnow())
        )
        self.db.commit()

        logger.info("Redirect %s -> %s", short_code, target)
        return target

    def summary(self) -> LinkSummary:
        """Aggregate numbers for the dashboard"""
        total_links, total_clicks = self.db.query(
            func.count(Link.id),
            func.coalesce(func.sum(Link.clicks), 0)
        ).one()

        average = round(total_clicks / total_links, 2) if total_links else 0.0
        return LinkSummary(
            total_links=total_links,
            total_clicks=total_clicks,
            average_clicks=average
        )

    def _find(self, short_code: str) -> Optional[Link]:
        return self.db.query(Link).filter(Link.short_code == short_code).first()

    def _claim_custom_code(self, short_code: str) -> str:
        if _UNROUTABLE_CODE.search(short_code):
            raise InvalidInput("Invalid short code format")
        if self.custom_code_pattern and not self.custom_code_pattern.fullmatch(short_code):
            raise InvalidInput("Invalid short code format")
        if short_code in self.reserved_codes or self._find(short_code) is not None:
            raise Conflict()
        return short_code

    @staticmethod
    def _clean_url(url: Optional[str]) -> str:
        """Return the trimmed URL that gets validated and stored"""
        url = (url or "").strip()
        if not url:
            raise InvalidInput("URL is required")
        try:
            parsed = _url_adapter.validate_python(url)
        except ValidationError:
            raise InvalidInput("Invalid URL format")
        if not parsed.host:
            raise InvalidInput("Invalid URL format")
        return url
