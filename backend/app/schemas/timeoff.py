# 파일 위치: backend/app/schemas/timeoff.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# --- API 요청(Request) 스키마 ---

class TimeOffWrite(BaseModel):
    """
    [요청] POST /api/timeoff, PUT /api/timeoff/{id}
    생성/수정 모두 같은 구조입니다. user_id는 토큰에서 가져오므로 보내지 않습니다.
    type/날짜 규칙 검사는 resolve_time_off_range()에서 합니다.
    """
    model_config = ConfigDict(populate_by_name=True)

    type: Optional[str] = None
    start_date: Optional[str] = Field(None, alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")
    description: Optional[str] = None


# --- API 응답(Response) 스키마 ---

class TimeOffRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")  # 기존 클라이언트 호환: 문서 id는 "_id"
    user_id: str = Field(alias="userId")
    type: str
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    description: Optional[str] = None
    status: str
    created_at: datetime = Field(alias="createdAt")


class TimeOffResponse(BaseModel):
    message: str
    time_off: TimeOffRead = Field(alias="timeOff")

    model_config = ConfigDict(populate_by_name=True)
