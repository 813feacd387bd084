from fastapi import APIRouter, Depends, status

from ....application.dtos import TrackingEventDTO
from ....application.ports.inbound import TrackEventUseCase
from ..dependencies import get_track_event_service

router = APIRouter(tags=["tracking"])


@router.post("/track", status_code=status.HTTP_201_CREATED)
async def track_event(
    dto: TrackingEventDTO,
    use_case: TrackEventUseCase = Depends(get_track_event_service),
) -> dict:
    """Record a marketing analytics event."""
    data = await use_case.execute(dto)
    return {"success": True, "data": data}
