from .matrix import router as matrix_router
from .viewer import router as viewer_router

__all__ = ["matrix_router", "viewer_router"]
