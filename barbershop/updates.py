# barbershop/updates.py

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .errors import NoFieldsProvidedError
from .models import EntityKind
from .registry import fields_for


@dataclass(frozen=True)
class UpdatePlan:
    """Ordered column assignments plus the id predicate they apply under."""

    kind: EntityKind
    assignments: Tuple[Tuple[str, str], ...]
    id_column: str = "id"

    @property
    def columns(self) -> Tuple[str, ...]:
        return tuple(column for column, _ in self.assignments)

    def __len__(self) -> int:
        return len(self.assignments)


def build_update(kind: EntityKind, payload: Mapping[str, Optional[str]]) -> UpdatePlan:
    """Turn a sparse payload into an UpdatePlan for ``kind``.

    Keys the kind does not declare are ignored. Raises NoFieldsProvidedError
    when nothing is left to assign.
    """
    assignments = []
    for field in fields_for(kind):
        value = payload.get(field.name)
        if field.is_supplied(value):
            assignments.append((field.column, value))

    if not assignments:
        raise NoFieldsProvidedError()

    return UpdatePlan(kind=kind, assignments=tuple(assignments))
