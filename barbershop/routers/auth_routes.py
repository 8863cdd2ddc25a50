# barbershop/routers/auth_routes.py

import logging
from typing import Dict

from fastapi import APIRouter, Depends

from barbershop.deps import form_payload, get_accounts, require_text
from barbershop.errors import ConflictError, InvalidCredentialsError
from barbershop.registry import parse_kind
from barbershop.repository import AccountRepository
from barbershop.schemas import AccountRecord, SignupResult

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["auth"],
)


@router.post("/signup", response_model=SignupResult, status_code=201)
def signup(
    payload: Dict[str, str] = Depends(form_payload),
    accounts: AccountRepository = Depends(get_accounts),
):
    kind = parse_kind(payload.get("type"))
    fields = {
        "full_name": require_text(payload, "fullName"),
        "username": require_text(payload, "username"),
        "email": require_text(payload, "email"),
        "password": require_text(payload, "password", strip=False),
    }

    # 1) Check if username already exists
    if accounts.username_taken(kind, fields["username"]):
        raise ConflictError("Username already registered")

    # 2) Create account in DB
    new_id = accounts.insert(kind, fields)
    return {"message": "Registration successful", "id": new_id}


@router.post("/login", response_model=AccountRecord)
def login(
    payload: Dict[str, str] = Depends(form_payload),
    accounts: AccountRepository = Depends(get_accounts),
):
    kind = parse_kind(payload.get("type"))
    username = require_text(payload, "username")
    password = payload.get("password", "")

    record = accounts.authenticate(kind, username, password)
    if record is None:
        logger.warning("Failed %s login for %r", kind.value, username)
        raise InvalidCredentialsError()

    return record
