from fastapi import APIRouter
from i18n_proxy.app.catalog.schema import WelcomeSchema
from i18n_proxy.app.core.logging import get_logger
from i18n_proxy.app.core.translation import interceptor
from i18n_proxy.app.translation.responses import EntityResponse

logger = get_logger()

router = APIRouter(prefix="/home", tags=["home"])


@router.get("/", response_model=WelcomeSchema)
@interceptor.i18n
async def home():
    return EntityResponse(
        WelcomeSchema(message="Welcome to the catalog API!", version="1.0")
    )
