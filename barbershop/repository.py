# barbershop/repository.py

import logging
from typing import List, Mapping, Optional

from sqlalchemy import update
from sqlmodel import select

from .db import session_scope
from .errors import ValidationError
from .models import EntityKind, Service
from .registry import model_for, public_columns
from .updates import UpdatePlan

logger = logging.getLogger(__name__)

SIGNUP_COLUMNS = ("full_name", "username", "email", "password")


def _to_record(kind: EntityKind, row: Mapping) -> dict:
    record = {
        "id": row["id"],
        "name": row["full_name"],
        "email": row["email"],
        "username": row["username"],
        "type": kind.value,
    }
    if kind == EntityKind.barber:
        record["bio"] = row["bio"] or ""
        record["imageUrl"] = row["image_url"] or None
    return record


class AccountRepository:
    """Customer and barber rows, addressed by kind through the registry."""

    def __init__(self, engine):
        self.engine = engine

    def _public_select(self, kind: EntityKind):
        model = model_for(kind)
        return select(*[getattr(model, column) for column in public_columns(kind)])

    def find_by_id(self, kind: EntityKind, entity_id: int) -> Optional[dict]:
        model = model_for(kind)
        with session_scope(self.engine) as session:
            row = session.exec(
                self._public_select(kind).where(model.id == entity_id)
            ).first()
        if row is None:
            return None
        return _to_record(kind, row._mapping)

    def list_all(self, kind: EntityKind) -> List[dict]:
        with session_scope(self.engine) as session:
            rows = session.exec(self._public_select(kind)).all()
        return [_to_record(kind, row._mapping) for row in rows]

    def update_statement(self, kind: EntityKind, entity_id: int, plan: UpdatePlan):
        if plan.kind != kind:
            raise ValidationError(f"Update built for {plan.kind.value}, not {kind.value}")
        # SET order follows the plan; the id is bound last
        model = model_for(kind)
        return (
            update(model)
            .where(getattr(model, plan.id_column) == entity_id)
            .ordered_values(*plan.assignments)
        )

    def apply_update(self, kind: EntityKind, entity_id: int, plan: UpdatePlan) -> int:
        stmt = self.update_statement(kind, entity_id, plan)
        with session_scope(self.engine) as session:
            rows_affected = session.exec(stmt).rowcount
            session.commit()
        logger.info(
            "Updated %s %s columns=%s rows=%s",
            kind.value, entity_id, ",".join(plan.columns), rows_affected,
        )
        return rows_affected

    def authenticate(self, kind: EntityKind, username: str, password: str) -> Optional[dict]:
        # TODO: compare against a password hash once signup stores one
        model = model_for(kind)
        with session_scope(self.engine) as session:
            row = session.exec(
                self._public_select(kind)
                .where(model.username == username)
                .where(model.password == password)
            ).first()
        if row is None:
            return None
        return _to_record(kind, row._mapping)

    def username_taken(self, kind: EntityKind, username: str) -> bool:
        model = model_for(kind)
        with session_scope(self.engine) as session:
            existing = session.exec(
                select(model.id).where(model.username == username)
            ).first()
        return existing is not None

    def insert(self, kind: EntityKind, fields: Mapping[str, str]) -> int:
        model = model_for(kind)
        db_account = model(**{column: fields[column] for column in SIGNUP_COLUMNS})
        with session_scope(self.engine) as session:
            session.add(db_account)
            session.commit()
            session.refresh(db_account)  # fills db_account.id
            new_id = db_account.id
        logger.info("Registered %s %s", kind.value, new_id)
        return new_id


def _service_record(service: Service) -> dict:
    return {
        "id": service.id,
        "name": service.name,
        "description": service.description or "",
        "price": service.price,
        "imageUrl": service.image_url or None,
    }


class ServiceCatalog:
    """Read-only access to the services the shop offers."""

    def __init__(self, engine):
        self.engine = engine

    def list_all(self) -> List[dict]:
        with session_scope(self.engine) as session:
            services = session.exec(select(Service).order_by(Service.id)).all()
            return [_service_record(s) for s in services]

    def find_by_id(self, service_id: int) -> Optional[dict]:
        with session_scope(self.engine) as session:
            service = session.get(Service, service_id)
            if service is None:
                return None
            return _service_record(service)
