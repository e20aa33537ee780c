"""Employee models.

The branch reference travels as ``branchId`` on the wire and is exposed as
``branch_id`` in Python. It is not checked against the branch store.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EmployeeCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    position: str
    department: str
    email: str
    phone: str
    branch_id: int = Field(alias="branchId")


class Employee(EmployeeCreate):
    id: int


class EmployeeUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    position: str | None = None
    department: str | None = None
    email: str | None = None
    phone: str | None = None
    branch_id: int | None = Field(default=None, alias="branchId")
