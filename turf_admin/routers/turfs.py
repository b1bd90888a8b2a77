from typing import Annotated

from fastapi import APIRouter, Depends

from turf_admin.dependencies import AdminSessionDep, PaginationParams, TurfServiceDep
from turf_admin.models import TurfListResponse

router = APIRouter(prefix="/api/turfs", tags=["turfs"])


@router.get(
    "",
    response_model=TurfListResponse,
    operation_id="listTurfs",
    summary="List turfs (paginated by the turf API)",
)
async def list_turfs(
    session: AdminSessionDep,
    service: TurfServiceDep,
    pagination: Annotated[PaginationParams, Depends()],
) -> TurfListResponse:
    turfs, meta = await service.list_turfs(
        session, page=pagination.page, page_size=pagination.page_size
    )
    return TurfListResponse(items=turfs, meta=meta)
