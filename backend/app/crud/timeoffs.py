# backend/app/crud/timeoffs.py
from datetime import datetime, timezone
from typing import List, Optional

from pymongo import DESCENDING, ReturnDocument

from app.crud.users import safe_object_id
from app.db.mongo import get_db
from app.models.timeoff import TimeOffInDB


def get_timeoffs_collection():
    return get_db()["timeoffs"]


def serialize_timeoff(doc) -> TimeOffInDB:
    return TimeOffInDB(**doc)


def _owned_filter(user_id: str, timeoff_id: str) -> Optional[dict]:
    """
    id + 소유자 동시 매칭 필터. id 형식이 잘못되면 None (= 찾을 수 없음).
    """
    oid = safe_object_id(timeoff_id)
    if oid is None:
        return None
    return {"_id": oid, "user_id": user_id}


# CREATE
async def create_timeoff(
    user_id: str,
    *,
    type_: str,
    start_date: str,
    end_date: str,
    description: Optional[str] = None,
) -> TimeOffInDB:
    collection = get_timeoffs_collection()
    new_timeoff = {
        "user_id": user_id,
        "type": type_,
        "start_date": start_date,
        "end_date": end_date,
        "description": description,
        "status": "pending",
        "created_at": datetime.now(timezone.utc),
    }
    result = await collection.insert_one(new_timeoff)
    saved = await collection.find_one({"_id": result.inserted_id})
    return serialize_timeoff(saved)


# READ ALL (최신 생성순)
async def get_timeoffs(user_id: str) -> List[TimeOffInDB]:
    cursor = get_timeoffs_collection().find({"user_id": user_id}).sort(
        [("created_at", DESCENDING), ("_id", DESCENDING)]
    )
    return [serialize_timeoff(doc) async for doc in cursor]


# UPDATE (type/날짜/설명 전체 교체, status는 건드리지 않음)
async def update_timeoff(
    user_id: str,
    timeoff_id: str,
    *,
    type_: str,
    start_date: str,
    end_date: str,
    description: Optional[str] = None,
) -> Optional[TimeOffInDB]:
    query = _owned_filter(user_id, timeoff_id)
    if query is None:
        return None

    doc = await get_timeoffs_collection().find_one_and_update(
        query,
        {"$set": {
            "type": type_,
            "start_date": start_date,
            "end_date": end_date,
            "description": description,
        }},
        return_document=ReturnDocument.AFTER,
    )
    return serialize_timeoff(doc) if doc else None


# DELETE
async def delete_timeoff(user_id: str, timeoff_id: str) -> bool:
    query = _owned_filter(user_id, timeoff_id)
    if query is None:
        return False
    result = await get_timeoffs_collection().delete_one(query)
    return result.deleted_count == 1
