import datetime
from pydantic import BaseModel, Field
from typing import Optional


class NewsCreate(BaseModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    date: datetime.date
    summary: Optional[str] = None
    category: str = "Berita"
    image: Optional[str] = None
    source_url: Optional[str] = None


class NewsArticle(NewsCreate):
    id: int
