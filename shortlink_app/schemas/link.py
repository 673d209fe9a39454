from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LinkCreate(CamelModel):
    # Both optional so a missing URL is reported by the service as a 400
    url: Optional[str] = None
    short_code: Optional[str] = None


class LinkCreated(CamelModel):
    original_url: str
    short_code: str
    short_url: str


class LinkRead(CamelModel):
    """Full link record plus the derived short URL"""
    id: str
    short_code: str
    original_url: str
    clicks: int
    last_clicked_at: Optional[datetime] = None
    created_at: datetime
    short_url: str

    @field_validator("last_clicked_at", "created_at")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # SQLite hands timestamps back without an offset; they are stored in UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @classmethod
    def from_link(cls, link, short_url: str) -> "LinkRead":
        return cls(
            id=link.id,
            short_code=link.short_code,
            original_url=link.original_url,
            clicks=link.clicks,
            last_clicked_at=link.last_clicked_at,
            created_at=link.created_at,
            short_url=short_url,
        )


class LinkSummary(CamelModel):
    total_links: int
    total_clicks: int
    average_clicks: float
