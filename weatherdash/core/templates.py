from pathlib import Path
from typing import Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from weatherdash.core.config import settings

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(request: Request, name: str, view: Optional[BaseModel] = None, status_code: int = 200):
    """
    Renders a template with one explicit view object, exposed as `view`.
    """
    context = {"view": view, "app_name": settings.APP_NAME}
    return templates.TemplateResponse(request, name, context, status_code=status_code)
