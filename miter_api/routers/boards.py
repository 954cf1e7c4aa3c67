from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from miter_core.cutlist import build_cut_list, total_length

from ..schemas import BoardModel, CutListRequest, CutListResponse

router = APIRouter(prefix="/boards", tags=["boards"])


@router.post("/cutlist", response_model=CutListResponse)
async def cut_list(body: CutListRequest) -> CutListResponse:
    try:
        config = body.config.to_config()
        segments = [item.to_segment() for item in body.segments]
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    reports = build_cut_list(segments, config)
    return CutListResponse(
        boards=[BoardModel(**r.asdict()) for r in reports],
        total=total_length(segments, config),
    )
