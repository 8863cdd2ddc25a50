# barbershop/schemas.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, Literal, Optional, Union


class AccountPublic(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    username: str


class CustomerPublic(AccountPublic):
    type: Literal["customer"] = "customer"


class BarberPublic(AccountPublic):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["barber"] = "barber"
    bio: str = ""
    image_url: Optional[str] = Field(default=None, alias="imageUrl")


# login and profile answer with whichever kind was asked for
AccountRecord = Annotated[Union[CustomerPublic, BarberPublic], Field(discriminator="type")]


class SignupResult(BaseModel):
    message: str = "Registration successful"
    id: int


class MessageResult(BaseModel):
    success: bool = True
    message: str


class BookingResult(BaseModel):
    success: bool = True
    appointmentId: int


class ServicePublic(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    description: str = ""
    price: float
    image_url: Optional[str] = Field(default=None, alias="imageUrl")


class AppointmentView(BaseModel):
    id: int
    customerId: int
    customerName: Optional[str] = None
    barberId: int
    barberName: Optional[str] = None
    serviceId: int
    serviceName: Optional[str] = None
    date: str
    time: str
    status: str
