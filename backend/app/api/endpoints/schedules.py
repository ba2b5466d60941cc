# backend/app/api/endpoints/schedules.py
import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_current_user_id
from app.core.exceptions import AppError, InternalError, NotFound, ValidationError
from app.crud import schedules as schedule_crud
from app.models.schedule import ScheduleInDB
from app.schemas.schedule import ScheduleRead, ScheduleUpdate, ScheduleUpdateResponse
from app.utils.validators import is_valid_time

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Schedule"])


def _to_schedule_read(schedule: ScheduleInDB) -> ScheduleRead:
    data = schedule.model_dump(by_alias=False)
    data["id"] = str(schedule.id)
    return ScheduleRead(**data)


def _validate_times(payload: ScheduleUpdate):
    """일요일부터 순서대로, 처음 발견한 잘못된 시간 하나만 보고합니다."""
    for day, slot in payload.days():
        if slot.start_time is not None and not is_valid_time(slot.start_time):
            raise ValidationError(f"Invalid start time format for {day}")
        if slot.end_time is not None and not is_valid_time(slot.end_time):
            raise ValidationError(f"Invalid end time format for {day}")


# READ (없으면 기본 스케줄 생성)
@router.get("", response_model=ScheduleRead)
async def read_schedule(user_id: str = Depends(get_current_user_id)):
    try:
        schedule = await schedule_crud.get_or_create_schedule(user_id)
        return _to_schedule_read(schedule)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Get schedule error")
        raise InternalError() from e


# UPDATE
@router.put("", response_model=ScheduleUpdateResponse)
async def update_schedule(
    payload: ScheduleUpdate,
    user_id: str = Depends(get_current_user_id),
):
    try:
        _validate_times(payload)

        updated = await schedule_crud.update_schedule(user_id, payload)
        if updated is None:
            raise NotFound("Schedule not found")

        return ScheduleUpdateResponse(
            message="Schedule updated successfully",
            schedule=_to_schedule_read(updated),
        )
    except AppError:
        raise
    except Exception as e:
        logger.exception("Update schedule error")
        raise InternalError() from e
