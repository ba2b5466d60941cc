# backend/app/crud/schedules.py
from typing import Optional

from pymongo import ReturnDocument

from app.db.mongo import get_db
from app.models.schedule import ScheduleInDB
from app.schemas.schedule import (
    DEFAULT_END_TIME,
    DEFAULT_START_TIME,
    WEEKDAYS,
    ScheduleUpdate,
)


def get_schedules_collection():
    return get_db()["schedules"]


def default_week() -> dict:
    return {
        day.lower(): {"start_time": DEFAULT_START_TIME, "end_time": DEFAULT_END_TIME}
        for day in WEEKDAYS
    }


def serialize_schedule(schedule) -> ScheduleInDB:
    return ScheduleInDB(**schedule)


# READ (없으면 기본값으로 생성)
async def get_or_create_schedule(user_id: str) -> ScheduleInDB:
    """
    $setOnInsert upsert 한 번으로 "조회 후 없으면 생성"을 원자적으로 처리합니다.
    user_id unique 인덱스와 함께 유저당 스케줄 1개를 보장합니다.
    """
    doc = await get_schedules_collection().find_one_and_update(
        {"user_id": user_id},
        {"$setOnInsert": default_week()},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return serialize_schedule(doc)


# READ ONE
async def get_schedule(user_id: str) -> Optional[ScheduleInDB]:
    doc = await get_schedules_collection().find_one({"user_id": user_id})
    return serialize_schedule(doc) if doc else None


# UPDATE (요일/필드 단위 부분 수정)
async def update_schedule(user_id: str, schedule_data: ScheduleUpdate) -> Optional[ScheduleInDB]:
    update_fields = {}
    for day, slot in schedule_data.days():
        if slot.start_time is not None:
            update_fields[f"{day.lower()}.start_time"] = slot.start_time.strip()
        if slot.end_time is not None:
            update_fields[f"{day.lower()}.end_time"] = slot.end_time.strip()

    if not update_fields:
        return await get_schedule(user_id)

    doc = await get_schedules_collection().find_one_and_update(
        {"user_id": user_id},
        {"$set": update_fields},
        return_document=ReturnDocument.AFTER,
    )
    return serialize_schedule(doc) if doc else None
