# backend/app/api/endpoints/timeoff.py
import logging
from typing import List

from fastapi import APIRouter, Depends, status

from app.api.deps import get_current_user_id
from app.core.exceptions import AppError, InternalError, NotFound
from app.crud import timeoffs as timeoff_crud
from app.models.timeoff import TimeOffInDB
from app.schemas.timeoff import TimeOffRead, TimeOffResponse, TimeOffWrite
from app.schemas.user import MessageResponse
from app.utils.validators import resolve_time_off_range

logger = logging.getLogger(__name__)

router = APIRouter(tags=["TimeOff"])

NOT_FOUND_MESSAGE = "Time off request not found"


def _to_timeoff_read(timeoff: TimeOffInDB) -> TimeOffRead:
    data = timeoff.model_dump(by_alias=False)
    data["id"] = str(timeoff.id)
    return TimeOffRead(**data)


# READ ALL
@router.get("", response_model=List[TimeOffRead])
async def read_timeoffs(user_id: str = Depends(get_current_user_id)):
    try:
        return [_to_timeoff_read(t) for t in await timeoff_crud.get_timeoffs(user_id)]
    except AppError:
        raise
    except Exception as e:
        logger.exception("Get time off error")
        raise InternalError() from e


# CREATE
@router.post("", response_model=TimeOffResponse, status_code=status.HTTP_201_CREATED)
async def create_timeoff(
    payload: TimeOffWrite,
    user_id: str = Depends(get_current_user_id),
):
    try:
        start_date, end_date = resolve_time_off_range(
            payload.type, payload.start_date, payload.end_date
        )
        timeoff = await timeoff_crud.create_timeoff(
            user_id,
            type_=payload.type,
            start_date=start_date,
            end_date=end_date,
            description=payload.description,
        )
        logger.info("User %s created time off %s (%s)", user_id, timeoff.id, timeoff.type)
        return TimeOffResponse(
            message="Time off request created successfully",
            time_off=_to_timeoff_read(timeoff),
        )
    except AppError:
        raise
    except Exception as e:
        logger.exception("Create time off error")
        raise InternalError() from e


# UPDATE
@router.put("/{timeoff_id}", response_model=TimeOffResponse)
async def update_timeoff(
    timeoff_id: str,
    payload: TimeOffWrite,
    user_id: str = Depends(get_current_user_id),
):
    try:
        start_date, end_date = resolve_time_off_range(
            payload.type, payload.start_date, payload.end_date
        )
        updated = await timeoff_crud.update_timeoff(
            user_id,
            timeoff_id,
            type_=payload.type,
            start_date=start_date,
            end_date=end_date,
            description=payload.description,
        )
        if updated is None:
            raise NotFound(NOT_FOUND_MESSAGE)

        logger.info("User %s updated time off %s", user_id, timeoff_id)
        return TimeOffResponse(
            message="Time off request updated successfully",
            time_off=_to_timeoff_read(updated),
        )
    except AppError:
        raise
    except Exception as e:
        logger.exception("Update time off error")
        raise InternalError() from e


# DELETE
@router.delete("/{timeoff_id}", response_model=MessageResponse)
async def delete_timeoff(
    timeoff_id: str,
    user_id: str = Depends(get_current_user_id),
):
    try:
        deleted = await timeoff_crud.delete_timeoff(user_id, timeoff_id)
        if not deleted:
            raise NotFound(NOT_FOUND_MESSAGE)

        logger.info("User %s deleted time off %s", user_id, timeoff_id)
        return MessageResponse(message="Time off request deleted successfully")
    except AppError:
        raise
    except Exception as e:
        logger.exception("Delete time off error")
        raise InternalError() from e
