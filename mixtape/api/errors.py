from fastapi.responses import JSONResponse
from pydantic import BaseModel

from mixtape.core import ImportErrorKind

STATUS_BY_KIND = {
    ImportErrorKind.NOT_FOUND: 404,
    ImportErrorKind.EMPTY_RESULT: 404,
    ImportErrorKind.INVALID_INPUT: 400,
    ImportErrorKind.UNPARSEABLE: 500,
}


class ErrorResponse(BaseModel):
    error: str


def error_response(status_code: int, message: str) -> JSONResponse:
    """Error body shared by every route: {"error": message}."""
    return JSONResponse(status_code=status_code, content={"error": message})
