"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from utils.config import Settings
from utils.storage import InMemoryDoctorStore, JsonFileDoctorStore


def make_doctor(**overrides):
    doc = {
        "id": "doc1",
        "name": "Dr. Test",
        "specialization": "General Physician",
        "experience": 5,
        "languages": ["English"],
        "location": "Bangalore",
        "availability": ["mon", "tue"],
        "consultationFee": 500,
        "imageUrl": "https://example.com/doc.png",
    }
    doc.update(overrides)
    return doc


def valid_payload(**overrides):
    payload = make_doctor(**overrides)
    payload.pop("id")
    return payload


@pytest.fixture
def doctors():
    return [
        make_doctor(id="d1", name="Dr. Asha Rao", specialization="Cardiology", experience=10,
                    location="Bangalore", availability=["mon", "tue", "wed"], consultationFee=800, gender="female"),
        make_doctor(id="d2", name="dr. bala", specialization="General Physician", experience=5,
                    location="Chennai", availability=["mon"], consultationFee=400, gender="male"),
        make_doctor(id="d3", name="Dr. Chitra", specialization="Internal Medicine", experience=5,
                    location="Bangalore", availability=["tue", "thu"], consultationFee=600, gender="female"),
        make_doctor(id="d4", name="Dr. Dev", specialization="Pediatric Cardiology", experience=2,
                    location="Mumbai", availability=["mon", "wed", "fri"], consultationFee=300, gender="male"),
    ]


@pytest.fixture
def settings(tmp_path):
    return Settings(data_dir=tmp_path, log_level="DEBUG")


@pytest.fixture
def memory_store(doctors):
    return InMemoryDoctorStore(doctors)


@pytest.fixture
def client(memory_store, settings):
    return TestClient(create_app(store=memory_store, settings=settings))


@pytest.fixture
def file_store(tmp_path):
    return JsonFileDoctorStore(tmp_path / "doctors.json")
