from pydantic import BaseModel, Field
from typing import Optional, Literal

PENDING = "pending"
APPROVED = "approved"
REJECTED = "rejected"

ReportStatus = Literal["pending", "approved", "rejected"]


class ReportSubmit(BaseModel):
    reporter_name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    deaths: Optional[int] = Field(None, ge=0)
    injuries: Optional[int] = Field(None, ge=0)
    damaged_homes: Optional[int] = Field(None, ge=0)
    photo: Optional[str] = None


class Report(ReportSubmit):
    id: int
    status: ReportStatus = PENDING

    @property
    def location(self) -> str:
        return f"{self.latitude}, {self.longitude}"

    @property
    def is_pending(self) -> bool:
        return self.status == PENDING
