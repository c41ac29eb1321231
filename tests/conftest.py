"""Pytest configuration and shared fixtures."""

import logging
from datetime import datetime, timezone

import pytest

from icsgen.config.env import EnvConfig
from icsgen.ics import ICS

FIXED_NOW = datetime(2024, 1, 31, 23, 30, 45, tzinfo=timezone.utc)
FIXED_UID = "fixed-uid"

@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW

@pytest.fixture
def fixed_uid():
    """UID factory that always returns FIXED_UID."""
    return lambda: FIXED_UID

@pytest.fixture
def ics(fixed_clock, fixed_uid):
    """ICS instance with a fixed clock and UID, reading dates as UTC."""
    return ICS(clock=fixed_clock, uid_factory=fixed_uid, timezone="UTC")

@pytest.fixture
def sample_event():
    """Event record exercising every optional field."""
    return {
        "title": "Bolder Boulder 10k",
        "description": "Annual 10-kilometer run",
        "fileName": "example.ics",
        "start": "",
        "end": "",
        "url": "http://www.google.com",
        "location": "Folsom Field, University of Colorado at Boulder",
        "categories": ["running", "races", "boulder", "huzzah"],
        "attachments": ["/Users/gibber/img/chip.png", "/Users/gibber/img/hokie.jpg"],
        "geo": {"lat": 37.386013, "lon": -122.082932},
        "status": "TENTATIVE",
        "organizer": {
            "name": "greenpioneersolutions",
            "email": "info@greenpioneersolutions.com"
        },
        "attendees": [
            {
                "name": "Support Team",
                "email": "Support@greenpioneersolutions.com",
                "rsvp": True
            },
            {
                "name": "Accounting Team",
                "email": "Accounting@greenpioneersolutions.com"
            }
        ]
    }

@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch, tmp_path):
    """Isolate environment variables and root logger state."""
    for env_var in EnvConfig.ENV_MAPPING:
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.setenv("ICSGEN_CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("ICSGEN_TIMEZONE", "UTC")
    
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    
    yield
    
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
