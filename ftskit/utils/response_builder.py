from fastapi.responses import JSONResponse
from typing import Any, Optional
from pydantic import BaseModel


def serialize_data(data: Any):
    """Helper to convert Pydantic models and containers of them."""
    if isinstance(data, BaseModel):
        return data.model_dump()
    if isinstance(data, (list, tuple)):
        return [serialize_data(item) for item in data]
    if isinstance(data, dict):
        return {key: serialize_data(value) for key, value in data.items()}
    return data


def success_response(
    message: str, data: Optional[Any] = None, status_code: int = 200
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "success",
            "message": message,
            "data": serialize_data(data),
        },
    )
