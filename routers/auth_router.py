from pathlib import Path
import secrets
import logging

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from schemas import LoginForm

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

SESSION_COOKIE = "session"


def is_authenticated(request: Request) -> bool:
    """True when login is not required or the request carries a live session"""
    if not request.app.state.require_login:
        return True
    token = request.cookies.get(SESSION_COOKIE)
    return token is not None and token in request.app.state.sessions


def login_redirect() -> RedirectResponse:
    return RedirectResponse('/login', status_code=303)


@router.get('/login', response_class=HTMLResponse)
async def login_page(request: Request):
    return templates.TemplateResponse(request, 'login.html', {'error': None})


@router.post('/login', response_class=HTMLResponse)
async def login(request: Request, username: str = Form(""), password: str = Form("")):
    try:
        form = LoginForm(username=username, password=password)
    except ValidationError:
        return templates.TemplateResponse(
            request, 'login.html', {'error': 'Invalid credentials'}, status_code=401
        )

    expected_username, expected_password = request.app.state.credentials
    valid = (
        secrets.compare_digest(form.username, expected_username)
        and secrets.compare_digest(form.password, expected_password)
    )
    if not valid:
        logger.info(f"Rejected login for {form.username}")
        return templates.TemplateResponse(
            request, 'login.html', {'error': 'Invalid credentials'}, status_code=401
        )

    token = secrets.token_urlsafe(16)
    request.app.state.sessions.add(token)
    response = RedirectResponse('/', status_code=303)
    response.set_cookie(SESSION_COOKIE, token, httponly=True)
    return response
