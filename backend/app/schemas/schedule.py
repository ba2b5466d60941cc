from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

DEFAULT_START_TIME = "09:00"
DEFAULT_END_TIME = "17:30"


class DaySlot(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")


class DaySlotUpdate(BaseModel):
    """
    요일 하나에 대한 부분 수정. 보낸 필드만 반영됩니다.
    """
    model_config = ConfigDict(populate_by_name=True)

    start_time: Optional[str] = Field(None, alias="startTime")
    end_time: Optional[str] = Field(None, alias="endTime")


# --- API 요청(Request) 스키마 ---

class ScheduleUpdate(BaseModel):
    """
    [요청] PUT /api/schedule
    일곱 요일 중 일부만 보내도 됩니다. 요일 이외의 키는 무시합니다.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sunday: Optional[DaySlotUpdate] = Field(None, alias="Sunday")
    monday: Optional[DaySlotUpdate] = Field(None, alias="Monday")
    tuesday: Optional[DaySlotUpdate] = Field(None, alias="Tuesday")
    wednesday: Optional[DaySlotUpdate] = Field(None, alias="Wednesday")
    thursday: Optional[DaySlotUpdate] = Field(None, alias="Thursday")
    friday: Optional[DaySlotUpdate] = Field(None, alias="Friday")
    saturday: Optional[DaySlotUpdate] = Field(None, alias="Saturday")

    def days(self):
        """(요일명, DaySlotUpdate) 를 일요일부터 순서대로 반환 (값이 있는 요일만)"""
        for day in WEEKDAYS:
            slot = getattr(self, day.lower())
            if slot is not None:
                yield day, slot


# --- API 응답(Response) 스키마 ---

class ScheduleRead(BaseModel):
    """
    [응답] GET /api/schedule
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")  # 기존 클라이언트 호환: 문서 id는 "_id"
    user_id: str = Field(alias="userId")
    sunday: Optional[DaySlot] = Field(None, alias="Sunday")
    monday: Optional[DaySlot] = Field(None, alias="Monday")
    tuesday: Optional[DaySlot] = Field(None, alias="Tuesday")
    wednesday: Optional[DaySlot] = Field(None, alias="Wednesday")
    thursday: Optional[DaySlot] = Field(None, alias="Thursday")
    friday: Optional[DaySlot] = Field(None, alias="Friday")
    saturday: Optional[DaySlot] = Field(None, alias="Saturday")


class ScheduleUpdateResponse(BaseModel):
    message: str
    schedule: ScheduleRead
