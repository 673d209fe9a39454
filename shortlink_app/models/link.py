import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime
from shortlink_app.database.connection import Base


def _new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Link(Base):
    """
    A shortened link.
    
    Only the redirect handler mutates a row (clicks, last_clicked_at);
    everything else is fixed at creation.
    """
    __tablename__ = "links"

    id = Column(String(32), primary_key=True, default=_new_id)
    # unique=True also creates the index used for point lookups
    short_code = Column(String, unique=True, nullable=False, index=True)
    original_url = Column(String, nullable=False)
    clicks = Column(Integer, nullable=False, default=0)
    last_clicked_at = Column(DateTime(timezone=True), nullable=True)
    # Set in Python so rows created within the same second still order correctly
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
