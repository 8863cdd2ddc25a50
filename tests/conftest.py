"""Shared fixtures: an in-memory database and a client wired to it."""
from datetime import date, time

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from barbershop.appointments import AppointmentManager
from barbershop.db import create_tables, get_engine
from barbershop.main import app
from barbershop.models import Barber, Customer, Service
from barbershop.repository import AccountRepository, ServiceCatalog


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def accounts(engine):
    return AccountRepository(engine)


@pytest.fixture
def catalog(engine):
    return ServiceCatalog(engine)


@pytest.fixture
def appointments(engine):
    return AppointmentManager(engine)


@pytest.fixture
def seeded(engine):
    """Customer 1, barbers 1-2 and services 1-3."""
    with Session(engine) as session:
        session.add(Customer(full_name="Jane Doe", username="jane", email="j@x.com", password="p1"))
        session.add(Barber(full_name="Tony Blade", username="tony", email="t@x.com", password="b1"))
        session.add(
            Barber(
                full_name="Sam Fade",
                username="sam",
                email="s@x.com",
                password="b2",
                bio="Fades and tapers",
                image_url="http://x/old.png",
            )
        )
        session.add(Service(name="Haircut", description="Classic cut", price=25))
        session.add(Service(name="Beard Trim", price=15))
        session.add(Service(name="Full Package", price=45))
        session.commit()
    return engine


@pytest.fixture
def client(engine):
    app.dependency_overrides[get_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def booked(seeded, appointments):
    """Two appointments for customer 1 with barber 2, on different days."""
    first = appointments.book(1, 2, 3, date(2025, 6, 1), time(10, 0))
    second = appointments.book(1, 2, 1, date(2025, 6, 8), time(9, 30))
    return first, second
