from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.templating import Jinja2Templates

from routers.auth_router import is_authenticated, login_redirect
from schemas import ConfigResponse
from services.config_service import ConfigNotExposedError, ConfigService

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def get_config_service(request: Request) -> ConfigService:
    """Dependency to get the config service from app state"""
    return request.app.state.config_service


async def configs_page(request: Request):
    """Configuration page; mounted by create_app at the configured path"""
    if not is_authenticated(request):
        return login_redirect()
    return templates.TemplateResponse(
        request, 'configs.html', {'render_delay_ms': request.app.state.render_delay_ms}
    )


@router.get('/api/v2/config', response_model=ConfigResponse)
async def get_config(request: Request, service: ConfigService = Depends(get_config_service)):
    if not is_authenticated(request):
        raise HTTPException(status_code=401, detail="Not authenticated")
    try:
        return service.get_config()
    except ConfigNotExposedError as e:
        raise HTTPException(status_code=403, detail=e.message)
