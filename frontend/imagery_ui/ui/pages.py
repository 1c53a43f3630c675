from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from imagery_ui.ui.tree import Node

PACKAGE_DIR = Path(__file__).resolve().parent.parent
STATIC_DIR = PACKAGE_DIR / "static"

templates = Jinja2Templates(directory=str(PACKAGE_DIR / "templates"))


def page_context(body: Node, title: str, refresh_seconds: int = 0) -> dict:
    return {"body": body, "title": title, "refresh_seconds": refresh_seconds}


def to_document(body: Node, title: str, refresh_seconds: int = 0) -> str:
    return templates.get_template("index.html").render(page_context(body, title, refresh_seconds))


def page_response(request: Request, body: Node, title: str, refresh_seconds: int = 0):
    return templates.TemplateResponse(request, "index.html", page_context(body, title, refresh_seconds))
