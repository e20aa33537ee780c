from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from starlette.testclient import TestClient

from branchdesk.core.dependencies import get_branch_store, get_employee_store
from branchdesk.main import app
from branchdesk.services.store import BranchStore, EmployeeStore

SAMPLE_BRANCH = {
    "name": "Winnipeg Main",
    "address": "123 Portage Ave",
    "phone": "204-555-0101",
}

SAMPLE_EMPLOYEE = {
    "name": "Alice Johnson",
    "position": "Branch Manager",
    "department": "Management",
    "email": "alice.johnson@example.com",
    "phone": "204-555-0199",
    "branchId": 1,
}


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def branch_store():
    return BranchStore()


@pytest.fixture
def employee_store():
    return EmployeeStore()


def _broken_store(store_cls: type) -> MagicMock:
    store = MagicMock(spec=store_cls)
    for method in ("list_all", "create", "get_by_id", "update", "delete"):
        getattr(store, method).side_effect = RuntimeError("store exploded")
    return store


@pytest.fixture
def failing_client():
    app.dependency_overrides[get_branch_store] = lambda: _broken_store(BranchStore)
    app.dependency_overrides[get_employee_store] = lambda: _broken_store(EmployeeStore)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
