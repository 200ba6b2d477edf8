import logging
from typing import Optional

from .models import NewsCreate, NewsArticle
from siglon.shared.errors import NotFound

logger = logging.getLogger("news.manager")


async def list_news(store, limit: Optional[int] = None) -> list[NewsArticle]:
    return await store.list_news(limit=limit)


async def add_news(store, article: NewsCreate) -> NewsArticle:
    logger.info(f"Admin is adding news article '{article.title}'")
    created = await store.insert_news(article)
    logger.info(f"News article {created.id} added successfully")
    return created


async def delete_news(store, news_id: int) -> None:
    if not await store.delete_news(news_id):
        logger.warning(f"News article {news_id} not found for deletion")
        raise NotFound(f"News article {news_id} not found")
    logger.info(f"News article {news_id} deleted")
