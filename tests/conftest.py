"""Shared fixtures: raw proxy records and a fake HTTP session."""

import copy
from unittest.mock import MagicMock

import pytest

RAW_CAPSULES = [
    {
        "capsule_serial": "C101",
        "capsule_id": "dragon1",
        "status": "retired",
        "original_launch": "2010-12-08T15:43:00.000Z",
        "original_launch_unix": 1291822980,
        "missions": [{"name": "COTS 1", "flight": 7}],
        "landings": 1,
        "type": "Dragon 1.0",
        "details": "Reentered after three weeks in orbit",
        "reuse_count": 0,
    },
    {
        "capsule_serial": "C201",
        "capsule_id": "dragon2",
        "status": "active",
        "original_launch": "2019-03-02T07:45:00.000Z",
        "original_launch_unix": 1551512700,
        "missions": [{"name": "DM-1", "flight": 74}, {"name": "CRS-20", "flight": 91}],
        "landings": 1,
        "type": "Dragon 2.0",
        "details": "Capsule used to test crew configuration",
        "reuse_count": 1,
    },
    {
        "capsule_serial": "C112",
        "capsule_id": "dragon1",
        "status": "unknown",
        "original_launch": None,
        "original_launch_unix": None,
        "missions": [],
        "landings": 0,
        "type": "Dragon 1.1",
        "details": None,
        "reuse_count": 0,
    },
]


@pytest.fixture
def raw_capsules():
    return copy.deepcopy(RAW_CAPSULES)


def make_session(payload=None, exc=None, status_error=None):
    """MagicMock standing in for requests.Session; every get() returns `payload`."""
    session = MagicMock()
    if exc is not None:
        session.get.side_effect = exc
        return session
    resp = MagicMock()
    resp.json.return_value = payload
    if status_error is not None:
        resp.raise_for_status.side_effect = status_error
    session.get.return_value = resp
    return session


@pytest.fixture
def session_factory():
    return make_session
