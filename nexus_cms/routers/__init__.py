from .function import router as function_router
from .auth import router as auth_router
from .upload import router as upload_router

__all__ = [
    "function_router", "auth_router", "upload_router"
]
