import logging
from typing import Any, Dict, Optional
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from ucsb_backend.repositories.base import DuplicateError, NotFoundError, RepositoryError

logger = logging.getLogger(__name__)

class ForbiddenException(HTTPException):
    def __init__(self,detail: Any = None, headers: Optional[Dict[str, str]] = None):
        self.headers = headers
        self.status_code = status.HTTP_403_FORBIDDEN
        self.detail = detail or "Forbidden"

# Repository failures are reported as {type, message} payloads
REPOSITORY_ERROR_RESPONSES = [
    (NotFoundError, status.HTTP_404_NOT_FOUND, "EntityNotFoundException"),
    (DuplicateError, status.HTTP_409_CONFLICT, "DuplicateEntityException"),
    (RepositoryError, status.HTTP_500_INTERNAL_SERVER_ERROR, "RepositoryException"),
]

def error_payload(exc: RepositoryError) -> tuple[int, dict]:
    for error_type, status_code, type_name in REPOSITORY_ERROR_RESPONSES:
        if isinstance(exc, error_type):
            return status_code, {"type": type_name, "message": str(exc)}

    return status.HTTP_500_INTERNAL_SERVER_ERROR, {"type": "RepositoryException", "message": str(exc)}

async def repository_exception_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    status_code, payload = error_payload(exc)

    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc}")

    return JSONResponse(status_code=status_code, content=payload)

