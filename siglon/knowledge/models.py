from pydantic import BaseModel, Field
from typing import Optional


class KnowledgeCreate(BaseModel):
    category: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    image: Optional[str] = None


class KnowledgeArticle(KnowledgeCreate):
    id: int
