# 파일 위치: backend/app/models/schedule.py

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.user import PyObjectId


class DaySlotInDB(BaseModel):
    start_time: str  # "HH:MM"
    end_time: str    # "HH:MM"


class ScheduleInDB(BaseModel):
    """
    MongoDB의 'schedules' 컬렉션 문서. 유저당 1개 (user_id unique 인덱스).
    저장 키는 모두 snake_case (요일도 소문자: "monday.start_time").
    API 응답에서만 "Monday": {"startTime": ...} 형태로 바뀝니다.
    """
    id: PyObjectId = Field(..., alias="_id")
    user_id: str
    sunday: Optional[DaySlotInDB] = None
    monday: Optional[DaySlotInDB] = None
    tuesday: Optional[DaySlotInDB] = None
    wednesday: Optional[DaySlotInDB] = None
    thursday: Optional[DaySlotInDB] = None
    friday: Optional[DaySlotInDB] = None
    saturday: Optional[DaySlotInDB] = None

    model_config = ConfigDict(populate_by_name=True)
