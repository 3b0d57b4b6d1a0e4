from pathlib import Path
from typing import Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(request: Request, name: str, context: Optional[dict] = None, status_code: int = 200):
    return templates.TemplateResponse(request, name, context or {}, status_code=status_code)


def render_not_found(request: Request, message: str = "Page not found"):
    return render(request, "not-found.html", {"message": message}, status_code=404)


def render_error(request: Request, message: str):
    return render(request, "error.html", {"message": message}, status_code=500)
