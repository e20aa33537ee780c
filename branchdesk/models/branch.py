"""Branch models."""

from __future__ import annotations

from pydantic import BaseModel


class BranchCreate(BaseModel):
    """Fields a client supplies when creating a branch."""

    name: str
    address: str
    phone: str


class Branch(BranchCreate):
    id: int


class BranchUpdate(BaseModel):
    """Partial update; only fields sent with a value are applied."""

    name: str | None = None
    address: str | None = None
    phone: str | None = None
