from fastapi import APIRouter, Security

from fields_api.routers.api_v1.endpoints import assets, fields
from fields_api.utils.security import get_api_key


api_router = APIRouter(dependencies=[Security(get_api_key)])

api_router.include_router(fields.router, prefix="/collections", tags=["Fields"])
api_router.include_router(assets.router, prefix="/collections", tags=["Assets"])
