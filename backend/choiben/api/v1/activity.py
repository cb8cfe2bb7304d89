from fastapi import APIRouter, HTTPException
from ...schemas.activity import Heatmap, HeatmapIn
from ...services.heatmap import build_heatmap

router = APIRouter()

@router.post("/activity/heatmap", response_model=Heatmap)
def heatmap(body: HeatmapIn):
    try:
        return build_heatmap(body.completed_at, body.start, body.end)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
