from app.schemas.bookmark import ArticleResponse, BookmarkStateResponse, SavedArticlesResponse
