from fastapi import APIRouter, Depends
from shortlink_app.schemas.link import LinkSummary
from shortlink_app.services.link_service import LinkService
from shortlink_app.dependencies import get_link_service

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=LinkSummary)
def get_summary(link_service: LinkService = Depends(get_link_service)):
    """Dashboard totals: link count, click count and average clicks per link"""
    return link_service.summary()
