"""Static and generated test data shared by the UI and API suites."""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

from .config import Settings

VIN_ALPHABET = "ABCDEFGHJKLMNPRSTUVWXYZ0123456789"  # no I, O, Q
VIN_LENGTH = 17
ORDER_SUFFIX_SPACE = 100_000


class RepairOrderStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    AWAITING_PARTS = "Awaiting Parts"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class ServiceType(str, Enum):
    OIL_CHANGE = "Oil Change"
    TIRE_ROTATION = "Tire Rotation"
    BRAKE_SERVICE = "Brake Service"
    MAINTENANCE = "Maintenance"
    DIAGNOSTICS = "Diagnostics"
    REPAIR = "Repair"


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str


@dataclass(frozen=True)
class RepairOrderForm:
    """Values for the repair-order form.

    ``None`` means "leave this field alone", which is what makes partial
    payloads usable for validation scenarios.
    """

    customer_name: str | None = None
    vehicle_vin: str | None = None
    vehicle_make: str | None = None
    vehicle_model: str | None = None
    vehicle_year: str | None = None
    description: str | None = None
    estimated_cost: str | None = None
    status: str | None = None


@dataclass(frozen=True)
class AppointmentForm:
    """Values for the appointment form; ``None`` fields are not touched."""

    customer_name: str | None = None
    phone_number: str | None = None
    email: str | None = None
    service_type: str | None = None
    vehicle_vin: str | None = None
    preferred_date: str | None = None
    preferred_time: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class ExistingRepairOrder:
    order_number: str
    customer_name: str
    vehicle_vin: str
    status: str


@dataclass(frozen=True)
class ExistingAppointment:
    appointment_id: str
    customer_name: str
    scheduled_date: str
    scheduled_time: str


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------


def valid_user(settings: Settings) -> Credentials:
    """The configured account (``DMS_USER`` / ``DMS_PASS``)."""
    return Credentials(settings.username, settings.password)


INVALID_USER = Credentials("invalid.user@example.com", "wrongpassword")
EMPTY_USER = Credentials("", "")

SQL_INJECTION_PAYLOAD = "' OR '1'='1"
XSS_PAYLOAD = "<script>alert('XSS')</script>"

# ---------------------------------------------------------------------------
# Repair orders
# ---------------------------------------------------------------------------

EXISTING_ORDER = ExistingRepairOrder(
    order_number="RO-2024-001",
    customer_name="John Smith",
    vehicle_vin="1HGBH41JXMN109186",
    status=RepairOrderStatus.IN_PROGRESS.value,
)

NEW_ORDER = RepairOrderForm(
    customer_name="Jane Doe",
    vehicle_vin="1FADP3K29JL234567",
    vehicle_make="Ford",
    vehicle_model="Fusion",
    vehicle_year="2024",
    description="Oil change and tire rotation",
    estimated_cost="150.00",
)

VALID_ORDER_NUMBER = "RO-2024-001"
INVALID_ORDER_NUMBER = "RO-9999-999"
CUSTOMER_NAME_FILTER = "Smith"
DATE_RANGE_START = "2024-01-01"
DATE_RANGE_END = "2024-12-31"

REPAIR_ORDER_STATUSES = tuple(status.value for status in RepairOrderStatus)

# ---------------------------------------------------------------------------
# Appointments
# ---------------------------------------------------------------------------

EXISTING_APPOINTMENT = ExistingAppointment(
    appointment_id="APT-2024-001",
    customer_name="Bob Williams",
    scheduled_date="2024-06-15",
    scheduled_time="2:00 PM",
)

SERVICE_TYPES = tuple(service.value for service in ServiceType)
APPOINTMENT_STATUSES = ("Scheduled", "Completed", "Cancelled")

# ---------------------------------------------------------------------------
# API payloads
# ---------------------------------------------------------------------------

CREATE_REPAIR_ORDER_PAYLOAD = {
    "customerName": "API Test Customer",
    "vehicleVin": "1HGCM82633A123456",
    "serviceType": ServiceType.OIL_CHANGE.value,
    "priority": "Normal",
    "notes": "Created via API automation test",
}

UPDATE_REPAIR_ORDER_PAYLOAD = {
    "status": RepairOrderStatus.COMPLETED.value,
    "completionNotes": "Service completed successfully",
    "actualCost": "125.00",
}

CREATE_APPOINTMENT_PAYLOAD = {
    "customerName": "API Test Customer",
    "phoneNumber": "(555) 987-6543",
    "email": "apitest@example.com",
    "serviceType": ServiceType.OIL_CHANGE.value,
    "vehicleVin": "1HGCM82633A987654",
    "scheduledDate": "2024-07-01",
    "scheduledTime": "10:00 AM",
}

# ---------------------------------------------------------------------------
# Expected messages and timeouts
# ---------------------------------------------------------------------------

ERROR_MESSAGES = {
    "login": {
        "invalid_credentials": "Invalid username or password",
        "empty_username": "Username is required",
        "empty_password": "Password is required",
    },
    "repair_order": {
        "order_not_found": "Repair order not found",
        "invalid_vin": "Invalid VIN format",
        "required_field": "This field is required",
    },
    "appointment": {
        "past_date": "Cannot schedule appointments in the past",
        "invalid_phone": "Invalid phone number format",
        "invalid_email": "Invalid email format",
    },
}

# Milliseconds: short for clicks and input, medium for page loads, long for API calls.
TIMEOUTS = {"short": 5_000, "medium": 10_000, "long": 30_000}

# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------

_order_sequence = itertools.count(random.randrange(ORDER_SUFFIX_SPACE))


def generate_order_number(today: date | None = None) -> str:
    """Return ``RO-<year>-<5 digits>``.

    The suffix walks a process-local sequence that starts at a random offset,
    so it only repeats after 100000 calls in one process.  Separate worker
    processes can still collide, which callers must tolerate.
    """
    year = (today or date.today()).year
    suffix = next(_order_sequence) % ORDER_SUFFIX_SPACE
    return f"RO-{year}-{suffix:05d}"


def generate_vin(rng: random.Random | None = None) -> str:
    """Return a random 17-character VIN using only VIN-legal characters."""
    chooser = rng or random
    return "".join(chooser.choices(VIN_ALPHABET, k=VIN_LENGTH))


def next_business_day(today: date | None = None) -> date:
    """Tomorrow, unless today is Friday or Saturday, in which case next Monday."""
    today = today or date.today()
    weekday = today.weekday()  # Monday == 0
    if weekday == 4:
        days = 3
    elif weekday == 5:
        days = 2
    else:
        days = 1
    return today + timedelta(days=days)


def new_appointment(today: date | None = None) -> AppointmentForm:
    """A complete, valid appointment scheduled for the next business day."""
    return AppointmentForm(
        customer_name="Alice Johnson",
        phone_number="(555) 123-4567",
        email="alice.johnson@example.com",
        service_type=ServiceType.MAINTENANCE.value,
        vehicle_vin="1G1ZD5ST8JF123456",
        preferred_date=next_business_day(today).isoformat(),
        preferred_time="10:00 AM",
        notes="Customer prefers morning appointments",
    )
