"""Response envelope shared by the entity endpoints."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class MessageResponse(BaseModel):
    message: str


class DataResponse(MessageResponse, Generic[DataT]):
    data: DataT
