from barbershop.repository import AccountRepository


def signup(client, **overrides):
    form = {
        "fullName": "Jane Doe",
        "username": "jane",
        "email": "j@x.com",
        "password": "p1",
        "type": "customer",
    }
    form.update(overrides)
    return client.post("/signup", data=form)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_signup_then_login(client):
    response = signup(client)
    assert response.status_code == 201
    new_id = response.json()["id"]

    response = client.post("/login", data={"username": "jane", "password": "p1", "type": "customer"})
    assert response.status_code == 200
    assert response.json()["id"] == new_id
    assert response.json()["type"] == "customer"
    assert "password" not in response.json()


def test_signup_accepts_json_body(client):
    response = client.post(
        "/signup",
        json={"fullName": "Tony", "username": "tony", "email": "t@x.com", "password": "b1", "type": "barber"},
    )
    assert response.status_code == 201


def test_duplicate_signup_conflicts(client):
    signup(client)
    response = signup(client, email="other@x.com")
    assert response.status_code == 409


def test_signup_missing_field(client):
    response = signup(client, email="")
    assert response.status_code == 400
    assert response.json() == {"detail": "Missing email"}


def test_signup_rejects_unknown_type(client):
    response = signup(client, type="service")
    assert response.status_code == 400


def test_login_wrong_password(client):
    signup(client)
    response = client.post("/login", data={"username": "jane", "password": "nope", "type": "customer"})
    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid credentials"}


def test_barber_login_includes_image(seeded, client):
    response = client.post("/login", data={"username": "sam", "password": "b2", "type": "barber"})
    assert response.status_code == 200
    assert response.json()["imageUrl"] == "http://x/old.png"


def test_profile_read(seeded, client):
    response = client.get("/profile", params={"id": 1, "type": "customer"})
    assert response.status_code == 200
    assert response.json() == {
        "id": 1,
        "name": "Jane Doe",
        "email": "j@x.com",
        "username": "jane",
        "type": "customer",
    }


def test_profile_read_missing(seeded, client):
    assert client.get("/profile", params={"id": 50, "type": "customer"}).status_code == 404
    assert client.get("/profile", params={"type": "customer"}).status_code == 400


def test_profile_update_only_changes_supplied_fields(seeded, client):
    response = client.put(
        "/profile",
        data={"id": "2", "type": "barber", "bio": "", "profileImage": "http://x/y.png"},
    )
    assert response.status_code == 200

    barber = client.get("/barbers/2").json()
    assert barber["imageUrl"] == "http://x/y.png"
    assert barber["bio"] == "Fades and tapers"


def test_profile_update_without_fields_never_hits_store(seeded, client, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("store must not be touched")

    monkeypatch.setattr(AccountRepository, "apply_update", fail)
    response = client.put(
        "/profile",
        data={"id": "1", "type": "customer", "fullName": "", "password": "undefined"},
    )
    assert response.status_code == 400
    assert response.json() == {"detail": "No fields provided"}


def test_profile_update_missing_user(seeded, client):
    response = client.put("/profile", data={"id": "77", "type": "customer", "email": "a@b.c"})
    assert response.status_code == 404


def test_list_and_get_barbers(seeded, client):
    barbers = client.get("/barbers").json()
    assert {b["username"] for b in barbers} == {"tony", "sam"}
    assert client.get("/barbers/99").status_code == 404


def test_services(seeded, client):
    services = client.get("/services").json()
    assert [s["name"] for s in services] == ["Haircut", "Beard Trim", "Full Package"]
    assert client.get("/services/2").json()["price"] == 15
    assert client.get("/services/9").status_code == 404


def book(client, **overrides):
    form = {
        "customerId": "1",
        "barberId": "2",
        "serviceId": "3",
        "appointmentDate": "2025-06-01",
        "appointmentTime": "10:00",
    }
    form.update(overrides)
    return client.post("/appointment", data=form)


def test_book_and_list_for_customer(seeded, client):
    response = book(client)
    assert response.status_code == 201
    appointment_id = response.json()["appointmentId"]

    listing = client.get("/appointment", params={"customerId": 1}).json()
    assert {"id": appointment_id, "status": "pending"}.items() <= listing[0].items()
    assert listing[0]["barberName"] == "Sam Fade"
    assert listing[0]["serviceName"] == "Full Package"


def test_book_rejects_bad_date(seeded, client):
    response = book(client, appointmentDate="06/01/2025")
    assert response.status_code == 400


def test_list_requires_a_filter(client):
    assert client.get("/appointment").status_code == 400


def test_barber_filter_wins(seeded, client):
    book(client)
    listing = client.get("/appointment", params={"customerId": 1, "barberId": 1}).json()
    assert listing == []


def test_status_update_then_reread(seeded, client):
    appointment_id = book(client).json()["appointmentId"]

    response = client.put("/appointment", data={"appointmentId": appointment_id, "status": "confirmed"})
    assert response.status_code == 200
    assert client.get(f"/appointment/{appointment_id}").json()["status"] == "confirmed"


def test_status_update_rejects_unknown_status(seeded, client):
    appointment_id = book(client).json()["appointmentId"]
    response = client.put("/appointment", data={"appointmentId": appointment_id, "status": "maybe"})
    assert response.status_code == 400
    assert client.get(f"/appointment/{appointment_id}").json()["status"] == "pending"


def test_status_update_missing_appointment(seeded, client):
    response = client.put("/appointment", data={"appointmentId": 404, "status": "confirmed"})
    assert response.status_code == 404
    assert response.json() == {"detail": "Appointment not found"}


def test_reschedule(seeded, client):
    appointment_id = book(client).json()["appointmentId"]
    response = client.put(
        "/appointment/reschedule",
        data={"appointmentId": appointment_id, "appointmentDate": "2025-06-03", "appointmentTime": "15:30"},
    )
    assert response.status_code == 200

    view = client.get(f"/appointment/{appointment_id}").json()
    assert (view["date"], view["time"], view["status"]) == ("2025-06-03", "15:30", "pending")


def test_reschedule_missing_appointment(seeded, client):
    response = client.put(
        "/appointment/reschedule",
        data={"appointmentId": 404, "appointmentDate": "2025-06-03", "appointmentTime": "15:30"},
    )
    assert response.status_code == 404


def test_store_errors_are_generic(client, engine):
    from sqlmodel import SQLModel

    SQLModel.metadata.drop_all(engine)
    response = client.get("/barbers")
    assert response.status_code == 500
    assert response.json() == {"detail": "Server error"}


def test_signup_keeps_password_exactly_as_sent(client):
    new_id = signup(client, password=" p1 ").json()["id"]

    response = client.post("/login", data={"username": "jane", "password": " p1 ", "type": "customer"})
    assert response.status_code == 200
    assert response.json()["id"] == new_id

    response = client.post("/login", data={"username": "jane", "password": "p1", "type": "customer"})
    assert response.status_code == 401


def test_signup_rejects_blank_password(client):
    response = signup(client, password="   ")
    assert response.status_code == 400
    assert response.json() == {"detail": "Missing password"}


def test_malformed_json_body(client):
    response = client.post(
        "/signup", content=b'{"fullName": ', headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"detail": "Malformed JSON body"}


def test_json_body_with_invalid_utf8(client):
    response = client.post(
        "/signup", content=b'{"fullName": "\xff"}', headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"detail": "Malformed JSON body"}


def test_json_body_must_be_an_object(client):
    response = client.post(
        "/signup", content=b'["jane", "p1"]', headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"detail": "Request body must be an object"}


def test_barber_profile_read(seeded, client):
    response = client.get("/profile", params={"id": 2, "type": "barber"})
    assert response.status_code == 200
    assert response.json() == {
        "id": 2,
        "name": "Sam Fade",
        "email": "s@x.com",
        "username": "sam",
        "type": "barber",
        "bio": "Fades and tapers",
        "imageUrl": "http://x/old.png",
    }


def test_customer_login_has_no_barber_fields(seeded, client):
    response = client.post("/login", data={"username": "jane", "password": "p1", "type": "customer"})
    assert response.status_code == 200
    assert set(response.json()) == {"id", "name", "email", "username", "type"}


def test_run_serves_app_on_configured_address(monkeypatch):
    from barbershop import main

    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    main.run()
    assert calls == [(main.app, {"host": main.HOST, "port": main.PORT})]
