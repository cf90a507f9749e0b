from fastapi import APIRouter

from app.api.routers import insurance_policies

api_router = APIRouter()

api_router.include_router(insurance_policies.router)
