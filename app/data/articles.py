from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Article:
    id: str
    title: str
    description: str


ARTICLES: tuple[Article, ...] = (
    Article("a1", "Edge SSR Basics", "How SSR works at the edge and why it matters."),
    Article("a2", "Signed Cookies 101", "Protecting client state using HMAC signatures."),
    Article("a3", "Cache-Control Gotchas", "Avoid leaking user-specific SSR responses."),
    Article("a4", "Workers Runtime", "Differences between Node.js and Cloudflare Workers."),
    Article("a5", "React Router v7 Loaders", "Server loaders and actions in a modern router."),
    Article("a6", "Error Boundaries", "Building user-friendly error UIs for SSR apps."),
    Article("a7", "Secure by Default", "Cookie attributes and practical security defaults."),
    Article("a8", "No DB Required", "Building stateful experiences without databases."),
    Article("a9", "HMAC vs JWT", "When to sign payloads and how to validate integrity."),
    Article("a10", "SSR Debugging", "Tracing SSR issues in edge environments."),
)

_BY_ID = {a.id: a for a in ARTICLES}


def get_article(article_id: str) -> Article | None:
    return _BY_ID.get(article_id)


def saved_articles(ids: set[str]) -> list[Article]:
    """Bookmarked articles in catalogue order. Unknown ids are ignored."""
    return [a for a in ARTICLES if a.id in ids]
