# barbershop/registry.py
"""Per-kind field schema for account entities.

Everything that turns an entity kind into a table or a column name goes
through this module, so only the identifiers declared here ever reach a
statement.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple, Type

from sqlmodel import SQLModel

from .errors import ValidationError
from .models import Barber, Customer, EntityKind


class AppliesTo(str, Enum):
    customer = "customer"
    barber = "barber"
    both = "both"


@dataclass(frozen=True)
class FieldDescriptor:
    name: str  # payload key
    column: str
    applies_to: AppliesTo
    blank_values: FrozenSet[str] = frozenset({""})

    def applies(self, kind: EntityKind) -> bool:
        return self.applies_to == AppliesTo.both or self.applies_to.value == kind.value

    def is_supplied(self, value: Optional[str]) -> bool:
        return value is not None and value not in self.blank_values


# Order matters: it fixes the SET order of generated updates
UPDATABLE_FIELDS: Tuple[FieldDescriptor, ...] = (
    FieldDescriptor("fullName", "full_name", AppliesTo.both),
    FieldDescriptor("email", "email", AppliesTo.both),
    # the mobile client sends the literal "undefined" for an untouched password
    FieldDescriptor("password", "password", AppliesTo.both, frozenset({"", "undefined"})),
    FieldDescriptor("bio", "bio", AppliesTo.barber),
    FieldDescriptor("profileImage", "image_url", AppliesTo.barber),
)

_MODELS: Dict[EntityKind, Type[SQLModel]] = {
    EntityKind.customer: Customer,
    EntityKind.barber: Barber,
}

_PUBLIC_COLUMNS: Dict[EntityKind, Tuple[str, ...]] = {
    EntityKind.customer: ("id", "full_name", "email", "username"),
    EntityKind.barber: ("id", "full_name", "email", "username", "bio", "image_url"),
}


def fields_for(kind: EntityKind) -> Tuple[FieldDescriptor, ...]:
    return tuple(field for field in UPDATABLE_FIELDS if field.applies(kind))


def model_for(kind: EntityKind) -> Type[SQLModel]:
    return _MODELS[kind]


def public_columns(kind: EntityKind) -> Tuple[str, ...]:
    return _PUBLIC_COLUMNS[kind]


def parse_kind(value: Optional[str]) -> EntityKind:
    """Map an external ``type`` value onto the closed set of kinds."""
    if not value:
        raise ValidationError("Missing id or type")
    try:
        return EntityKind(value.strip().lower())
    except ValueError:
        raise ValidationError("type must be 'customer' or 'barber'")
