# nexus_cms/core/exceptions.py

from fastapi import HTTPException, status

class BadRequestException(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

class AuthException(HTTPException):
    def __init__(self, detail: str = "Invalid credentials", headers: dict = None):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail, headers=headers)

class NotFoundException(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

class ConflictException(HTTPException):
    def __init__(self, detail: str = "Duplicate value for a unique field"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)

class InternalServerError(HTTPException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)

# =======================================================
# MEDIA STORE
# =======================================================
class MediaStoreError(Exception):
    """
    Raised when the external media store rejects or fails an upload/delete.
    The message is echoed back to the caller as the error detail.
    """
    def __init__(self, message: str = "Error communicating with the media store"):
        self.message = message
        super().__init__(self.message)
