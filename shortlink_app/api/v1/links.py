from typing import List

from fastapi import APIRouter, Body, Depends, status
from shortlink_app.schemas.link import LinkCreate, LinkCreated, LinkRead
from shortlink_app.services.link_service import LinkService
from shortlink_app.dependencies import get_link_service

router = APIRouter(prefix="/links", tags=["links"])


@router.get("", response_model=List[LinkRead])
def list_links(link_service: LinkService = Depends(get_link_service)):
    """List all links, newest first. Searching is left to the client."""
    return [
        LinkRead.from_link(link, link_service.short_url_for(link.short_code))
        for link in link_service.list_links()
    ]


@router.post("", response_model=LinkCreated, status_code=status.HTTP_201_CREATED)
def create_link(
    link_data: LinkCreate = Body(...),
    link_service: LinkService = Depends(get_link_service)
):
    """Create a short link, with a custom alias if one is given"""
    link = link_service.create_link(link_data.url, link_data.short_code)
    return LinkCreated(
        original_url=link.original_url,
        short_code=link.short_code,
        short_url=link_service.short_url_for(link.short_code)
    )


@router.get("/{short_code}", response_model=LinkRead)
def get_link(
    short_code: str,
    link_service: LinkService = Depends(get_link_service)
):
    """Get a single link with its click statistics"""
    link = link_service.get_link(short_code)
    return LinkRead.from_link(link, link_service.short_url_for(link.short_code))


@router.delete("/{short_code}")
def delete_link(
    short_code: str,
    link_service: LinkService = Depends(get_link_service)
):
    """Delete a link permanently"""
    link_service.delete_link(short_code)
    return {}
