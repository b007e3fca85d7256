import pytest

from clinic_scheduling.models import Department, Doctor, Patient, Room, Specialty


class FakeAudit:
    def __init__(self):
        self.calls = []

    def log(self, action, patient_key, doctor_key=None, room_key=None, success=True, details=None):
        self.calls.append((action, patient_key, doctor_key, room_key, success, details or {}))


@pytest.fixture
def cardiology():
    return Department(name="Cardiology Ward", specialty=Specialty.CARDIOLOGY)


@pytest.fixture
def pediatrics():
    return Department(name="Children's Ward", specialty=Specialty.PEDIATRICS)


@pytest.fixture
def patient():
    return Patient(national_id="30111222", first_name="Ana", last_name="Lopez", phone="555-0101", address="Main St 1")


@pytest.fixture
def other_patient():
    return Patient(national_id="30999888", first_name="Luis", last_name="Diaz", phone="555-0102", address="Main St 2")


@pytest.fixture
def cardiologist():
    return Doctor(national_id="20123456", specialty=Specialty.CARDIOLOGY, first_name="Carla", last_name="Gomez", license_number="MP-1001")


@pytest.fixture
def second_cardiologist():
    return Doctor(national_id="20654321", specialty=Specialty.CARDIOLOGY, first_name="Pedro", last_name="Ruiz", license_number="MP-1002")


@pytest.fixture
def pediatrician():
    return Doctor(national_id="20777777", specialty=Specialty.PEDIATRICS, first_name="Marta", last_name="Sosa", license_number="MP-2001")


@pytest.fixture
def cardio_room(cardiology):
    return Room(number="101", department=cardiology, kind="consulting")


@pytest.fixture
def cardio_room_2(cardiology):
    return Room(number="102", department=cardiology, kind="consulting")


@pytest.fixture
def pediatrics_room(pediatrics):
    return Room(number="201", department=pediatrics, kind="consulting")


@pytest.fixture
def audit():
    return FakeAudit()
