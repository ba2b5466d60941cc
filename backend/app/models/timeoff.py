# 파일 위치: backend/app/models/timeoff.py

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.user import PyObjectId

TimeOffType = Literal["vacation", "dayOff", "sickLeave", "other"]
TimeOffStatus = Literal["pending", "approved", "rejected"]


class TimeOffInDB(BaseModel):
    """
    MongoDB의 'timeoffs' 컬렉션 문서.
    dayOff 이면 end_date == start_date (핸들러에서 보장).
    """
    id: PyObjectId = Field(..., alias="_id")
    user_id: str
    type: TimeOffType
    start_date: str  # "YYYY-MM-DD"
    end_date: str    # "YYYY-MM-DD"
    description: Optional[str] = None
    status: TimeOffStatus = "pending"
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(populate_by_name=True)
