from fastapi import APIRouter

from i18n_proxy.app.api.routes import catalog, home

api_router = APIRouter()

api_router.include_router(home.router)
api_router.include_router(catalog.router)
