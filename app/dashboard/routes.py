from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from app.config import settings
from app.data.articles import ARTICLES, saved_articles
from app.dependencies import get_app_secret, get_settings, limiter
from app.services.bookmark_cookie import no_store_headers
from app.services.bookmark_service import (
    apply_read_headers,
    read_bookmarks,
    safe_return_to,
    signed_cookie_header,
    toggle_bookmark,
)

router = APIRouter(tags=["pages"])
logger = logging.getLogger(__name__)


@router.get("/", response_class=HTMLResponse)
async def index_page(request: Request, secret: str = Depends(get_app_secret)):
    result = read_bookmarks(request.headers.get("cookie"), secret)
    templates = request.app.state.templates
    response = templates.TemplateResponse(request, "index.html", {
        "articles": ARTICLES,
        "bookmarked": result.ids,
        "bookmarked_count": len(result.ids),
        "cookie_invalid": result.invalid,
    })
    return apply_read_headers(response, result)


@router.get("/saved", response_class=HTMLResponse)
async def saved_page(request: Request, secret: str = Depends(get_app_secret)):
    result = read_bookmarks(request.headers.get("cookie"), secret)
    templates = request.app.state.templates
    response = templates.TemplateResponse(request, "saved.html", {
        "saved": saved_articles(result.ids),
        "cookie_invalid": result.invalid,
    })
    return apply_read_headers(response, result)


@router.post("/toggle")
@limiter.limit(lambda: settings.toggle_rate_limit)
async def toggle_bookmark_action(
    request: Request,
    article_id: str = Form("", alias="articleId"),
    return_to: str = Form("", alias="returnTo"),
    secret: str = Depends(get_app_secret),
):
    """Bookmark form action: flip one id, re-sign the cookie, redirect back."""
    if not article_id:
        raise HTTPException(status_code=400, detail="Invalid articleId.")
    location = safe_return_to(return_to)

    current = read_bookmarks(request.headers.get("cookie"), secret)
    if current.invalid:
        logger.info("Discarding invalid bookmark cookie before toggle")
    ids = toggle_bookmark(current, article_id)

    max_age = get_settings(request).cookie_max_age
    response = RedirectResponse(url=location, status_code=302, headers=no_store_headers())
    response.headers.append("set-cookie", signed_cookie_header(ids, secret, max_age))
    return response
