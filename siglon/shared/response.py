from fastapi.responses import JSONResponse
from pydantic import BaseModel

import decimal
from datetime import date, datetime


def serialize_data(obj):
    if isinstance(obj, BaseModel):
        return serialize_data(obj.model_dump())
    elif isinstance(obj, dict):
        return {k: serialize_data(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [serialize_data(item) for item in obj]
    elif isinstance(obj, (datetime, date)):
        return obj.isoformat()
    elif isinstance(obj, decimal.Decimal):
        return float(obj)
    else:
        return obj


def success_response(data=None, message="Success", status_code=200):
    """Return standardized success response"""
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "success",
            "message": message,
            "data": serialize_data(data)
        }
    )

def error_response(message, status_code=400, data=None):
    """Return standardized error response"""
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "error",
            "message": message,
            "data": serialize_data(data)
        }
    )
