# barbershop/routers/barbers_routes.py

from fastapi import APIRouter, Depends

from barbershop.deps import get_accounts
from barbershop.errors import NotFoundError
from barbershop.models import EntityKind
from barbershop.repository import AccountRepository
from barbershop.schemas import BarberPublic

router = APIRouter(
    prefix="/barbers",
    tags=["barbers"],
)


@router.get("", response_model=list[BarberPublic])
def list_barbers(accounts: AccountRepository = Depends(get_accounts)):
    return accounts.list_all(EntityKind.barber)


@router.get("/{barber_id}", response_model=BarberPublic)
def get_barber(barber_id: int, accounts: AccountRepository = Depends(get_accounts)):
    record = accounts.find_by_id(EntityKind.barber, barber_id)
    if record is None:
        raise NotFoundError("Barber not found")
    return record
