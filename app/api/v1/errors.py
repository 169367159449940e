from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from app.core.exceptions import EnigmaError
from app.models.schemas import ErrorResponse


def error_body(error: EnigmaError) -> dict:
    """Render a machine error as an ErrorResponse dict."""
    return ErrorResponse(
        error=type(error).__name__,
        message=error.message,
        details=error.details,
    ).model_dump()


def bad_request(error: EnigmaError) -> HTTPException:
    """Map a machine error to a 400 response carrying an ErrorResponse."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=error_body(error),
    )


async def enigma_error_handler(request: Request, exc: EnigmaError) -> JSONResponse:
    """Catch machine errors raised outside an endpoint body, e.g. in dependencies."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": error_body(exc)},
    )
