# 파일 위치: backend/app/models/user.py
from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

# MongoDB의 ObjectId를 문자열로 다루기 위한 타입
PyObjectId = Annotated[str, BeforeValidator(str)]


class UserInDB(BaseModel):
    """
    MongoDB 'users' 컬렉션에 저장되는 완전한 형태의 User 모델입니다.
    username / email 은 unique 인덱스로 중복이 막혀 있습니다.
    """
    id: PyObjectId = Field(..., alias="_id")
    username: str
    email: str
    password_hash: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(
        populate_by_name=True,  # 'id'라는 이름으로 값을 넣어도 '_id' 필드에 할당 허용
    )
