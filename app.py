"""Stub admin UI reproducing the Configuration page DOM contract.

The e2e suite targets it when no TEST_BASE_URL is configured, and the page
objects are verified against it.
"""
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional
import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from config import DEFAULT_FORBIDDEN_MESSAGE, settings
from routers import auth_router, config_router
from services.config_service import ConfigService

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent

# Credentials accepted when none are configured
STUB_USERNAME = "admin"
STUB_PASSWORD = "admin"
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def create_app(
    expose_config: bool = True,
    forbidden_message: str = DEFAULT_FORBIDDEN_MESSAGE,
    sections: Optional[Dict[str, Dict[str, str]]] = None,
    render_delay_ms: int = 0,
    username: str = STUB_USERNAME,
    password: str = STUB_PASSWORD,
    require_login: bool = False,
    config_path: str = "/configs",
) -> FastAPI:
    """Build a stub UI instance; each instance keeps its own sessions and config."""
    app = FastAPI()

    app.state.config_service = ConfigService(
        sections=sections,
        expose_config=expose_config,
        forbidden_message=forbidden_message,
    )
    app.state.render_delay_ms = render_delay_ms
    app.state.credentials = (username, password)
    app.state.require_login = require_login
    app.state.sessions = set()
    app.state.config_path = config_path

    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")
    app.include_router(auth_router.router)
    app.include_router(config_router.router)
    app.add_api_route(config_path, config_router.configs_page, methods=["GET"], response_class=HTMLResponse)

    @app.get('/', response_class=HTMLResponse)
    async def index(request: Request):
        if not auth_router.is_authenticated(request):
            return auth_router.login_redirect()
        return templates.TemplateResponse(request, 'index.html')

    @app.get('/health')
    async def health_check():
        """Health check endpoint used to detect server start-up"""
        return {
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "expose_config": expose_config,
        }

    logger.debug(f"Created stub UI (expose_config={expose_config}, render_delay_ms={render_delay_ms})")
    return app


if __name__ == '__main__':
    import uvicorn
    from logging_config import setup_logging

    setup_logging(settings.log_level, settings.log_format)
    uvicorn.run(
        create_app(
            expose_config=settings.config_page.expects_table_data,
            forbidden_message=settings.config_page.forbidden_message,
            username=settings.username or STUB_USERNAME,
            password=settings.password or STUB_PASSWORD,
            require_login=settings.has_credentials,
            config_path=settings.config_page.path,
        ),
        host="127.0.0.1",
        port=8080,
    )
