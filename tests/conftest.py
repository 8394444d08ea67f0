# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import random

import pytest

from health_insights.core.models import RecordDescriptor


@pytest.fixture
def lab_record():
    """Lab Results record with an elevated blood pressure reading"""
    return RecordDescriptor(
        title="Annual Blood Panel",
        record_type="Lab Results",
        service_date="2024-01-15",
        description="Blood pressure 150/95, total cholesterol 245 mg/dL.",
    )


@pytest.fixture
def empty_lab_record():
    """Lab Results record uploaded without any description"""
    return RecordDescriptor(
        title="Uploaded Lab Report",
        record_type="Lab Results",
        service_date="2024-01-15",
    )


@pytest.fixture
def prescription_record():
    """Prescription record with a JPG attachment"""
    return RecordDescriptor(
        title="Lisinopril Prescription",
        record_type="prescription",
        service_date="2024-02-01",
        description="Lisinopril 10mg daily",
        file_url="https://storage.example.com/records/rx.jpg",
        file_name="rx.jpg",
    )


@pytest.fixture
def generic_record():
    return RecordDescriptor(
        title="Visit Notes",
        record_type="Consultation",
        service_date="2024-03-10",
        description="General follow-up visit.",
    )


@pytest.fixture
def seeded_rng():
    """Deterministic jitter for the local generator"""
    return random.Random(1234)


@pytest.fixture
def no_credentials_config():
    """Config with every provider key cleared, regardless of the environment"""
    return {
        "groq_api_key": "",
        "vite_groq_api_key": "",
        "debug_groq_api_key": None,
        "openai_api_key": "",
        "huggingface_api_key": "",
        "enable_ocr": False,
    }


@pytest.fixture
def groq_config(no_credentials_config):
    """Config with only a primary key set"""
    return {**no_credentials_config, "groq_api_key": "gsk_test_key_123456"}


class FakeResponse:
    """Async context manager standing in for an aiohttp response"""

    def __init__(self, status, body=None, raw=b""):
        self.status = status
        self._body = body
        self._raw = raw

    async def json(self, content_type=None):
        return self._body

    async def text(self):
        return "error body"

    async def read(self):
        return self._raw

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


class FakeSession:
    """Answers every request with one canned FakeResponse"""

    def __init__(self, response, **kwargs):
        self.response = response
        self.closed = False

    def post(self, url, json=None, headers=None):
        return self.response

    def get(self, url):
        return self.response

    async def close(self):
        self.closed = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


@pytest.fixture
def fake_session():
    """Build a FakeSession around a response with the given status"""
    def _build(status, body=None, raw=b""):
        return FakeSession(FakeResponse(status, body=body, raw=raw))
    return _build
