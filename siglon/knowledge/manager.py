import logging
from typing import Optional

from .models import KnowledgeCreate, KnowledgeArticle
from siglon.shared.errors import NotFound

logger = logging.getLogger("knowledge.manager")


async def list_knowledge(store, category: Optional[str] = None) -> list[KnowledgeArticle]:
    return await store.list_knowledge(category=category)


async def add_knowledge(store, article: KnowledgeCreate) -> KnowledgeArticle:
    logger.info(f"Admin is adding knowledge article '{article.title}' ({article.category})")
    return await store.insert_knowledge(article)


async def delete_knowledge(store, article_id: int) -> None:
    if not await store.delete_knowledge(article_id):
        logger.warning(f"Knowledge article {article_id} not found for deletion")
        raise NotFound(f"Knowledge article {article_id} not found")
    logger.info(f"Knowledge article {article_id} deleted")
