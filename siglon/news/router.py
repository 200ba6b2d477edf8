from fastapi import APIRouter, Depends, Query
from typing import Optional

from .models import NewsCreate
from .manager import list_news, add_news, delete_news
from siglon.auth.manager import require_admin
from siglon.shared.response import success_response
from siglon.shared.store import get_store

router = APIRouter()

@router.get("/")
async def get_news(limit: Optional[int] = Query(None, ge=1), store=Depends(get_store)):
    articles = await list_news(store, limit)
    return success_response(articles, "News retrieved successfully")

@router.post("/")
async def create_news(article: NewsCreate, store=Depends(get_store), admin: dict = Depends(require_admin)):
    created = await add_news(store, article)
    return success_response(created, "News added successfully", status_code=201)

@router.delete("/{news_id}")
async def remove_news(news_id: int, store=Depends(get_store), admin: dict = Depends(require_admin)):
    await delete_news(store, news_id)
    return success_response({"id": news_id}, "News deleted successfully")
