# barbershop/deps.py

import json
from datetime import date, time
from typing import Dict, Mapping, Optional

from fastapi import Depends, Request

from .db import get_engine
from .errors import ValidationError
from .appointments import AppointmentManager
from .models import AppointmentStatus
from .repository import AccountRepository, ServiceCatalog


async def form_payload(request: Request) -> Dict[str, str]:
    """Decode a request body into a flat ``key -> str`` mapping.

    Accepts ``application/x-www-form-urlencoded`` (what the mobile client
    sends), multipart forms and JSON objects. Null JSON values are dropped.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise ValidationError("Malformed JSON body")
        if not isinstance(body, dict):
            raise ValidationError("Request body must be an object")
        return {str(key): str(value) for key, value in body.items() if value is not None}

    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def require_text(payload: Mapping[str, str], key: str, strip: bool = True) -> str:
    # strip=False keeps values such as passwords exactly as sent
    value = payload.get(key) or ""
    if not value.strip():
        raise ValidationError(f"Missing {key}")
    return value.strip() if strip else value


def require_int(payload: Mapping[str, str], key: str) -> int:
    value = require_text(payload, key)
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{key} must be an integer")


def optional_int(value: Optional[str], key: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{key} must be an integer")


def require_date(payload: Mapping[str, str], key: str) -> date:
    try:
        return date.fromisoformat(require_text(payload, key))
    except ValueError:
        raise ValidationError(f"{key} must be a YYYY-MM-DD date")


def require_time(payload: Mapping[str, str], key: str) -> time:
    try:
        return time.fromisoformat(require_text(payload, key))
    except ValueError:
        raise ValidationError(f"{key} must be a HH:MM time")


def require_status(payload: Mapping[str, str], key: str) -> AppointmentStatus:
    value = require_text(payload, key).lower()
    try:
        return AppointmentStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in AppointmentStatus)
        raise ValidationError(f"status must be one of: {allowed}")


def get_accounts(engine=Depends(get_engine)) -> AccountRepository:
    return AccountRepository(engine)


def get_catalog(engine=Depends(get_engine)) -> ServiceCatalog:
    return ServiceCatalog(engine)


def get_appointments(engine=Depends(get_engine)) -> AppointmentManager:
    return AppointmentManager(engine)
