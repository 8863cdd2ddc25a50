# barbershop/models.py

from typing import Optional
from datetime import date as Date, time
from enum import Enum

from sqlmodel import SQLModel, Field


class EntityKind(str, Enum):
    customer = "customer"
    barber = "barber"


class AppointmentStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"
    completed = "completed"


class AccountBase(SQLModel):
    full_name: str
    username: str = Field(index=True, unique=True)
    email: str
    password: str  # plaintext, compared as-is on login


class Customer(AccountBase, table=True):
    __tablename__ = "customer"

    id: Optional[int] = Field(default=None, primary_key=True)


class Barber(AccountBase, table=True):
    __tablename__ = "barber"

    id: Optional[int] = Field(default=None, primary_key=True)
    bio: Optional[str] = None
    image_url: Optional[str] = None


class Service(SQLModel, table=True):
    __tablename__ = "service"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: Optional[str] = None
    price: float = 0
    image_url: Optional[str] = None


class Appointment(SQLModel, table=True):
    __tablename__ = "appointment"

    id: Optional[int] = Field(default=None, primary_key=True)

    customer_id: int = Field(foreign_key="customer.id", index=True)
    barber_id: int = Field(foreign_key="barber.id", index=True)
    service_id: int = Field(foreign_key="service.id")
    appointment_date: Date
    appointment_time: time
    status: str = AppointmentStatus.pending.value
