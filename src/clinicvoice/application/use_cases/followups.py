"""Follow-up queue use cases."""

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ...core.utils.datetime_utils import is_valid_date
from ...domain.entities.followup import FollowUpItem
from ...domain.enums.clinical import FollowUpStatus
from ...domain.errors import FollowUpNotFoundError, InvalidScheduleRequestError
from ..dto.clinic_dto import FollowUpQueue, UpdateFollowUpRequest
from ..ports.repositories.followup_repo import FollowUpRepository

logger = logging.getLogger(__name__)


class GetFollowUpsUseCase:
    """The queue ordered overdue first, then by urgency (high, medium, low).

    Items are returned as copies carrying their effective status, so an
    upcoming item past its due date shows as overdue without rewriting the
    stored record.
    """

    def __init__(self, followup_repository: FollowUpRepository):
        self._followup_repository = followup_repository

    async def execute(self, today: Optional[date] = None) -> FollowUpQueue:
        today = today or date.today()
        items = [
            replace(item, status=item.effective_status(today))
            for item in await self._followup_repository.find_all()
        ]
        items.sort(key=lambda f: (f.status != FollowUpStatus.OVERDUE, f.urgency.rank))

        return FollowUpQueue(
            followups=items,
            total=len(items),
            overdue=sum(1 for f in items if f.status == FollowUpStatus.OVERDUE),
            upcoming=sum(1 for f in items if f.status == FollowUpStatus.UPCOMING),
        )


class UpdateFollowUpUseCase:
    def __init__(self, followup_repository: FollowUpRepository):
        self._followup_repository = followup_repository

    async def execute(self, request: UpdateFollowUpRequest) -> FollowUpItem:
        item = await self._followup_repository.find_by_patient(request.patient_id)
        if not item:
            raise FollowUpNotFoundError(request.patient_id)

        if request.due_date is not None:
            if not is_valid_date(request.due_date):
                raise InvalidScheduleRequestError("due_date", request.due_date)
            item.due_date = request.due_date
            # Rescheduling reopens an overdue item
            if request.status is None and item.status == FollowUpStatus.OVERDUE:
                item.status = FollowUpStatus.UPCOMING
        if request.status is not None:
            item.status = request.status

        await self._followup_repository.save(item)
        logger.info(f"Follow-up for patient={item.patient_id} now {item.status.value} due {item.due_date}")
        return item
