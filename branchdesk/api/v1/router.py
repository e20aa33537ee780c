from fastapi import APIRouter

from branchdesk.api.v1.endpoints import branches, employees, health

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(branches.router)
api_router.include_router(employees.router)
