from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse, RedirectResponse
from shortlink_app.services.exceptions import NotFound
from shortlink_app.services.link_service import LinkService
from shortlink_app.dependencies import get_link_service

router = APIRouter(tags=["redirect"])

NOT_FOUND_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>404 - Page Not Found</title>
</head>
<body>
  <h1>404</h1>
  <h2>Page Not Found</h2>
  <p>The page you're looking for doesn't exist or the short link has been deleted.</p>
  <p><a href="/">Go Home</a></p>
</body>
</html>
"""


@router.get("/{short_code}", include_in_schema=False)
def redirect_to_original_url(
    short_code: str,
    link_service: LinkService = Depends(get_link_service)
):
    """
    Redirect to the original URL.
    
    Flow:
    1. Look up the link (404 page if unknown, nothing is written)
    2. Record the click (clicks + 1, last_clicked_at = now)
    3. Redirect
    """
    try:
        original_url = link_service.resolve_and_count(short_code)
    except NotFound:
        return HTMLResponse(NOT_FOUND_PAGE, status_code=status.HTTP_404_NOT_FOUND)
    
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
