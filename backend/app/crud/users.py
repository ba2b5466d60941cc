# backend/app/crud/users.py

from datetime import datetime, timezone
from typing import Optional, Union

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import Conflict
from app.db.mongo import get_db
from app.models.user import UserInDB


def get_users_collection():
    """
    Motor DB 핸들에서 users 컬렉션을 가져옵니다.
    connect_to_mongo() 이후에 db가 세팅되어 있어야 합니다.
    """
    return get_db()["users"]


def safe_object_id(value: Union[str, ObjectId]) -> Optional[ObjectId]:
    """
    str/ObjectId 입력을 안전하게 ObjectId로 변환합니다. 변환 불가면 None.
    """
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str):
        value = value.strip()
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def _now() -> datetime:
    return datetime.now(timezone.utc)


# ---------- READ ----------

async def get_user_by_id(user_id: Union[str, ObjectId]) -> Optional[UserInDB]:
    oid = safe_object_id(user_id)
    if oid is None:
        return None
    user = await get_users_collection().find_one({"_id": oid})
    return UserInDB(**user) if user else None


async def get_user_by_username(username: str) -> Optional[UserInDB]:
    user = await get_users_collection().find_one({"username": username})
    return UserInDB(**user) if user else None


async def user_exists(*, username: str, email: str) -> bool:
    found = await get_users_collection().find_one(
        {"$or": [{"email": email}, {"username": username}]},
        projection={"_id": 1},
    )
    return found is not None


# ---------- CREATE ----------

async def create_user(*, username: str, email: str, password_hash: str) -> UserInDB:
    user_data = {
        "username": username,
        "email": email,
        "password_hash": password_hash,
        "created_at": _now(),
    }
    try:
        result = await get_users_collection().insert_one(user_data)
    except DuplicateKeyError as e:
        # 동시 가입 경합: 사전 조회를 통과했어도 unique 인덱스가 최종 방어선
        raise Conflict() from e

    user_data["_id"] = result.inserted_id
    return UserInDB(**user_data)
