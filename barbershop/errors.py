# barbershop/errors.py

from typing import Optional


class BookingError(Exception):
    """Base for every failure a request can end in.

    ``detail`` is what the caller sees, so it must never carry store error text.
    """

    status_code = 500
    default_detail = "Server error"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(BookingError):
    status_code = 400
    default_detail = "Invalid request"


class NotFoundError(BookingError):
    status_code = 404
    default_detail = "Not found"


class NoFieldsProvidedError(BookingError):
    status_code = 400
    default_detail = "No fields provided"


class InvalidCredentialsError(BookingError):
    status_code = 401
    default_detail = "Invalid credentials"


class ConflictError(BookingError):
    status_code = 409
    default_detail = "Already exists"


class RepositoryError(BookingError):
    status_code = 500
    default_detail = "Server error"

    def __init__(self):
        super().__init__(self.default_detail)
