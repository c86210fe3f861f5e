"""
Bookmark state as JSON.
Same read path as the pages: no-store always, clear-cookie when the cookie is broken.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from app.data.articles import saved_articles
from app.dependencies import get_app_secret
from app.schemas.bookmark import ArticleResponse, BookmarkStateResponse, SavedArticlesResponse
from app.services.bookmark_service import apply_read_headers, read_bookmarks

router = APIRouter(prefix="/api/bookmarks", tags=["bookmarks"])


@router.get("", response_model=BookmarkStateResponse)
async def get_bookmarks(
    request: Request,
    response: Response,
    secret: str = Depends(get_app_secret),
):
    """Verified bookmark ids from the edge_saved cookie"""
    result = read_bookmarks(request.headers.get("cookie"), secret)
    apply_read_headers(response, result)
    return BookmarkStateResponse(
        bookmarked_ids=sorted(result.ids),
        bookmarked_count=len(result.ids),
        cookie_invalid=result.invalid,
    )


@router.get("/saved", response_model=SavedArticlesResponse)
async def get_saved_articles(
    request: Request,
    response: Response,
    secret: str = Depends(get_app_secret),
):
    """Bookmarked articles in catalogue order"""
    result = read_bookmarks(request.headers.get("cookie"), secret)
    apply_read_headers(response, result)
    return SavedArticlesResponse(
        saved=[
            ArticleResponse(id=a.id, title=a.title, description=a.description)
            for a in saved_articles(result.ids)
        ],
        cookie_invalid=result.invalid,
    )
