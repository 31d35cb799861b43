from fastapi.responses import JSONResponse
from typing import Any, Optional
from pydantic import BaseModel
import dataclasses
import datetime
import math


def serialize_data(data: Any):
    """Helper to convert Pydantic models, result dataclasses and datetimes cleanly."""
    if isinstance(data, BaseModel):
        return data.model_dump()
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return {f.name: serialize_data(getattr(data, f.name)) for f in dataclasses.fields(data)}
    if isinstance(data, (list, tuple)):
        return [serialize_data(item) for item in data]
    if isinstance(data, dict):
        return {key: serialize_data(value) for key, value in data.items()}
    if isinstance(data, datetime.datetime):
        return data.isoformat()
    if isinstance(data, float) and not math.isfinite(data):
        return None
    return data


def success_response(
    message: str, data: Optional[Any] = None, status_code: int = 200
) -> JSONResponse:
    serialized_data = serialize_data(data)

    return JSONResponse(
        status_code=status_code,
        content={
            "status": "success",
            "message": message,
            "data": serialized_data,
        },
    )
