from fastapi import APIRouter

from scriptoria.api.v1.routes.export import router as export_router
from scriptoria.api.v1.routes.generation import router as generation_router

api_router = APIRouter()
api_router.include_router(generation_router, tags=["generation"])
api_router.include_router(export_router, tags=["export"])
