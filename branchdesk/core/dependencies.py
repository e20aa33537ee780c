from __future__ import annotations

from fastapi import Request

from branchdesk.services.store import BranchStore, EmployeeStore


def get_branch_store(request: Request) -> BranchStore:
    return request.app.state.branch_store


def get_employee_store(request: Request) -> EmployeeStore:
    return request.app.state.employee_store
