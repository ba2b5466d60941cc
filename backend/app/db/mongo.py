# backend/app/db/mongo.py
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

logger = logging.getLogger(__name__)

client: AsyncIOMotorClient | None = None
db: AsyncIOMotorDatabase | None = None


async def connect_to_mongo(uri: str, db_name: str):
    global client, db
    client = AsyncIOMotorClient(uri, tz_aware=True)
    db = client[db_name]
    logger.info("MongoDB connected (db=%s)", db_name)


async def close_mongo_connection():
    global client, db
    if client:
        client.close()
        logger.info("MongoDB connection closed")
    client = None
    db = None


def get_db() -> AsyncIOMotorDatabase:
    """
    connect_to_mongo() 이후의 DB 핸들을 반환합니다.
    (모듈 변수 db를 직접 import 하면 None이 고정되는 문제 방지)
    """
    if db is None:
        raise RuntimeError("MongoDB is not connected")
    return db


async def ensure_indexes():
    """
    username/email 중복 방지, 유저당 스케줄 1개 보장을 위한 unique 인덱스.
    """
    database = get_db()
    await database["users"].create_index([("username", ASCENDING)], unique=True)
    await database["users"].create_index([("email", ASCENDING)], unique=True)
    await database["schedules"].create_index([("user_id", ASCENDING)], unique=True)
    await database["timeoffs"].create_index(
        [("user_id", ASCENDING), ("created_at", DESCENDING)]
    )
