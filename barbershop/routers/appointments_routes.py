# barbershop/routers/appointments_routes.py

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends

from barbershop.appointments import AppointmentManager
from barbershop.deps import (
    form_payload,
    get_appointments,
    optional_int,
    require_date,
    require_int,
    require_status,
    require_time,
)
from barbershop.errors import ValidationError
from barbershop.schemas import AppointmentView, BookingResult, MessageResult

router = APIRouter(
    prefix="/appointment",
    tags=["appointments"],
)


@router.post("", response_model=BookingResult, status_code=201)
def book_appointment(
    payload: Dict[str, str] = Depends(form_payload),
    appointments: AppointmentManager = Depends(get_appointments),
):
    appointment_id = appointments.book(
        customer_id=require_int(payload, "customerId"),
        barber_id=require_int(payload, "barberId"),
        service_id=require_int(payload, "serviceId"),
        appointment_date=require_date(payload, "appointmentDate"),
        appointment_time=require_time(payload, "appointmentTime"),
    )
    return {"success": True, "appointmentId": appointment_id}


@router.get("", response_model=List[AppointmentView])
def list_appointments(
    barberId: Optional[str] = None,
    customerId: Optional[str] = None,
    appointments: AppointmentManager = Depends(get_appointments),
):
    barber_id = optional_int(barberId, "barberId")
    customer_id = optional_int(customerId, "customerId")

    # barber filter wins when both are given
    if barber_id is not None:
        return appointments.list_for_barber(barber_id)
    if customer_id is not None:
        return appointments.list_for_customer(customer_id)
    raise ValidationError("barberId or customerId is required")


@router.get("/{appointment_id}", response_model=AppointmentView)
def get_appointment(
    appointment_id: int,
    appointments: AppointmentManager = Depends(get_appointments),
):
    return appointments.get(appointment_id)


@router.put("", response_model=MessageResult)
def update_appointment_status(
    payload: Dict[str, str] = Depends(form_payload),
    appointments: AppointmentManager = Depends(get_appointments),
):
    appointment_id = require_int(payload, "appointmentId")
    status = require_status(payload, "status")

    appointments.update_status(appointment_id, status)
    return {"success": True, "message": f"Appointment status updated to {status.value}"}


@router.put("/reschedule", response_model=MessageResult)
def reschedule_appointment(
    payload: Dict[str, str] = Depends(form_payload),
    appointments: AppointmentManager = Depends(get_appointments),
):
    appointment_id = require_int(payload, "appointmentId")
    appointment_date = require_date(payload, "appointmentDate")
    appointment_time = require_time(payload, "appointmentTime")

    appointments.reschedule(appointment_id, appointment_date, appointment_time)
    return {"success": True, "message": "Appointment rescheduled successfully"}
