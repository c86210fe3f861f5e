from __future__ import annotations

from pydantic import BaseModel


class ArticleResponse(BaseModel):
    id: str
    title: str
    description: str


class BookmarkStateResponse(BaseModel):
    bookmarked_ids: list[str]
    bookmarked_count: int
    cookie_invalid: bool


class SavedArticlesResponse(BaseModel):
    saved: list[ArticleResponse]
    cookie_invalid: bool
