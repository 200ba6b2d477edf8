from fastapi import APIRouter, Depends, Query
from typing import Optional

from .models import KnowledgeCreate
from .manager import list_knowledge, add_knowledge, delete_knowledge
from siglon.auth.manager import require_admin
from siglon.shared.response import success_response
from siglon.shared.store import get_store

router = APIRouter()

@router.get("/")
async def get_articles(category: Optional[str] = Query(None), store=Depends(get_store)):
    articles = await list_knowledge(store, category)
    return success_response(articles, "Knowledge articles retrieved successfully")

@router.post("/")
async def create_article(article: KnowledgeCreate, store=Depends(get_store), admin: dict = Depends(require_admin)):
    created = await add_knowledge(store, article)
    return success_response(created, "Knowledge article added successfully", status_code=201)

@router.delete("/{article_id}")
async def remove_article(article_id: int, store=Depends(get_store), admin: dict = Depends(require_admin)):
    await delete_knowledge(store, article_id)
    return success_response({"id": article_id}, "Knowledge article deleted successfully")
