# fieldops/core/responses.py
from typing import Any

from fastapi.responses import JSONResponse


def success_response(data: Any, message: str = "Success") -> dict:
    return {"status": "success", "message": message, "data": data}


def error_response(message: str = "Error", status_code: int = 400, **extra: Any) -> JSONResponse:
    body = {"status": "error", "message": message}
    body.update(extra)
    return JSONResponse(body, status_code=status_code)
