from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from branchdesk.core.dependencies import get_branch_store
from branchdesk.models.branch import Branch, BranchCreate, BranchUpdate
from branchdesk.models.common import DataResponse, MessageResponse
from branchdesk.services.store import BranchStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/branches", tags=["branches"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse, "description": "Branch not found"}}


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Branch not found")


@router.get("", response_model=DataResponse[list[Branch]], summary="Retrieve a list of all branches")
async def list_branches(store: BranchStore = Depends(get_branch_store)):  # noqa: B008
    try:
        branches = store.list_all()
    except Exception as err:
        logger.exception("Failed to list branches")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        ) from err
    return {"message": "Branches retrieved", "data": branches}


@router.post(
    "",
    response_model=DataResponse[Branch],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new branch",
)
async def create_branch(
    payload: BranchCreate,
    store: BranchStore = Depends(get_branch_store),  # noqa: B008
):
    try:
        branch = store.create(payload)
    except Exception as err:
        logger.exception("Failed to create branch")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Bad Request") from err
    return {"message": "Branch created", "data": branch}


@router.get(
    "/{branch_id}",
    response_model=DataResponse[Branch],
    responses=_NOT_FOUND,
    summary="Retrieve a branch by its ID",
)
async def get_branch(
    branch_id: str,
    store: BranchStore = Depends(get_branch_store),  # noqa: B008
):
    try:
        branch = store.get_by_id(branch_id)
    except Exception as err:
        logger.exception("Failed to get branch %s", branch_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        ) from err

    if branch is None:
        raise _not_found()

    return {"message": "Branch found", "data": branch}


@router.put(
    "/{branch_id}",
    response_model=DataResponse[Branch],
    responses=_NOT_FOUND,
    summary="Update a branch by its ID",
)
async def update_branch(
    branch_id: str,
    payload: BranchUpdate,
    store: BranchStore = Depends(get_branch_store),  # noqa: B008
):
    try:
        branch = store.update(branch_id, payload)
    except Exception as err:
        logger.exception("Failed to update branch %s", branch_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Bad Request") from err

    if branch is None:
        raise _not_found()

    return {"message": "Branch updated", "data": branch}


@router.delete(
    "/{branch_id}",
    response_model=MessageResponse,
    responses=_NOT_FOUND,
    summary="Delete a branch by its ID",
)
async def delete_branch(
    branch_id: str,
    store: BranchStore = Depends(get_branch_store),  # noqa: B008
):
    try:
        removed = store.delete(branch_id)
    except Exception as err:
        logger.exception("Failed to delete branch %s", branch_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        ) from err

    if not removed:
        raise _not_found()

    return {"message": "Branch deleted"}
