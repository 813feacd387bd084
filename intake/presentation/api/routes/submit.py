from fastapi import APIRouter, Depends, status

from ....application.dtos import ConsultationSubmissionDTO
from ....application.ports.inbound import SubmitConsultationUseCase
from ..dependencies import get_submit_consultation_service

router = APIRouter(tags=["consultations"])


@router.post("/submit", status_code=status.HTTP_201_CREATED)
async def submit_consultation(
    dto: ConsultationSubmissionDTO,
    use_case: SubmitConsultationUseCase = Depends(get_submit_consultation_service),
) -> dict:
    """Store a consultation request and notify the team (best-effort)."""
    data = await use_case.execute(dto)
    return {"success": True, "data": data}
