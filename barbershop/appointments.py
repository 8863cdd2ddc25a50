# barbershop/appointments.py

import logging
from datetime import date, time
from typing import List

from sqlalchemy import update
from sqlmodel import select

from .db import session_scope
from .errors import NotFoundError
from .models import Appointment, AppointmentStatus, Barber, Customer, Service

logger = logging.getLogger(__name__)


def _view(appt: Appointment, customer_name, barber_name, service_name) -> dict:
    return {
        "id": appt.id,
        "customerId": appt.customer_id,
        "customerName": customer_name,
        "barberId": appt.barber_id,
        "barberName": barber_name,
        "serviceId": appt.service_id,
        "serviceName": service_name,
        "date": appt.appointment_date.isoformat(),
        "time": appt.appointment_time.strftime("%H:%M"),
        "status": appt.status,
    }


class AppointmentManager:
    """Booking, status changes and listings for appointments.

    Every appointment starts as ``pending``. Status updates are not checked
    against a transition table; any AppointmentStatus value is accepted.
    """

    def __init__(self, engine):
        self.engine = engine

    def _view_select(self):
        # outer joins: a dangling reference shows up with a None name
        return (
            select(
                Appointment,
                Customer.full_name.label("customer_name"),
                Barber.full_name.label("barber_name"),
                Service.name.label("service_name"),
            )
            .select_from(Appointment)
            .join(Customer, Customer.id == Appointment.customer_id, isouter=True)
            .join(Barber, Barber.id == Appointment.barber_id, isouter=True)
            .join(Service, Service.id == Appointment.service_id, isouter=True)
        )

    def _list(self, criterion) -> List[dict]:
        stmt = (
            self._view_select()
            .where(criterion)
            .order_by(Appointment.appointment_date.desc(), Appointment.appointment_time.desc())
        )
        with session_scope(self.engine) as session:
            rows = session.exec(stmt).all()
            return [_view(*row) for row in rows]

    def book(
        self,
        customer_id: int,
        barber_id: int,
        service_id: int,
        appointment_date: date,
        appointment_time: time,
    ) -> int:
        db_appt = Appointment(
            customer_id=customer_id,
            barber_id=barber_id,
            service_id=service_id,
            appointment_date=appointment_date,
            appointment_time=appointment_time,
            status=AppointmentStatus.pending.value,
        )
        with session_scope(self.engine) as session:
            session.add(db_appt)
            session.commit()
            session.refresh(db_appt)  # fills db_appt.id
            appointment_id = db_appt.id

        logger.info(
            "Booked appointment %s for customer %s with barber %s on %s %s",
            appointment_id, customer_id, barber_id, appointment_date, appointment_time,
        )
        return appointment_id

    def _update(self, appointment_id: int, **values) -> None:
        stmt = update(Appointment).where(Appointment.id == appointment_id).values(**values)
        with session_scope(self.engine) as session:
            rows_affected = session.exec(stmt).rowcount
            session.commit()
        if rows_affected == 0:
            raise NotFoundError("Appointment not found")

    def update_status(self, appointment_id: int, status: AppointmentStatus) -> None:
        self._update(appointment_id, status=status.value)
        logger.info("Appointment %s status set to %s", appointment_id, status.value)

    def reschedule(self, appointment_id: int, appointment_date: date, appointment_time: time) -> None:
        self._update(
            appointment_id,
            appointment_date=appointment_date,
            appointment_time=appointment_time,
        )
        logger.info(
            "Appointment %s rescheduled to %s %s", appointment_id, appointment_date, appointment_time
        )

    def get(self, appointment_id: int) -> dict:
        with session_scope(self.engine) as session:
            row = session.exec(
                self._view_select().where(Appointment.id == appointment_id)
            ).first()
            if row is None:
                raise NotFoundError("Appointment not found")
            return _view(*row)

    def list_for_barber(self, barber_id: int) -> List[dict]:
        return self._list(Appointment.barber_id == barber_id)

    def list_for_customer(self, customer_id: int) -> List[dict]:
        return self._list(Appointment.customer_id == customer_id)
