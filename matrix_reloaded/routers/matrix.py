from fastapi import APIRouter, HTTPException, Request

from matrix_reloaded.core.exceptions import LoadError
from matrix_reloaded.core.logfire_config import log_error

router = APIRouter(prefix="/api", tags=["matrix"])


@router.get("/matrix")
async def get_matrix(request: Request):
    """
    Current contents of the watched file.
    Loaded fresh on every request, so the viewer always sees what is on disk.
    """
    pipeline = request.app.state.pipeline
    try:
        matrix = await pipeline.load()
    except LoadError as e:
        log_error("Failed to load matrix", error=e, path=str(pipeline.file_path))
        raise HTTPException(status_code=500, detail=f"Failed to load matrix: {e.reason}")

    return matrix.model_dump(exclude_none=True)
