# barbershop/routers/users_routes.py

from typing import Dict, Optional

from fastapi import APIRouter, Depends, Query

from barbershop.deps import form_payload, get_accounts, optional_int, require_int
from barbershop.errors import NotFoundError, ValidationError
from barbershop.registry import parse_kind
from barbershop.repository import AccountRepository
from barbershop.schemas import AccountRecord, MessageResult
from barbershop.updates import build_update

router = APIRouter(
    prefix="/profile",
    tags=["users"],
)


@router.get("", response_model=AccountRecord)
def read_profile(
    raw_id: Optional[str] = Query(None, alias="id"),
    raw_kind: Optional[str] = Query(None, alias="type"),
    accounts: AccountRepository = Depends(get_accounts),
):
    entity_id = optional_int(raw_id, "id")
    if entity_id is None:
        raise ValidationError("Missing id or type")
    kind = parse_kind(raw_kind)

    record = accounts.find_by_id(kind, entity_id)
    if record is None:
        raise NotFoundError("User not found")
    return record


@router.put("", response_model=MessageResult)
def update_profile(
    payload: Dict[str, str] = Depends(form_payload),
    accounts: AccountRepository = Depends(get_accounts),
):
    entity_id = require_int(payload, "id")
    kind = parse_kind(payload.get("type"))

    # raises NoFieldsProvidedError before the store is touched
    plan = build_update(kind, payload)

    if accounts.apply_update(kind, entity_id, plan) == 0:
        raise NotFoundError("User not found")
    return {"success": True, "message": "Profile updated"}
