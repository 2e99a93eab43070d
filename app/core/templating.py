"""
Jinja2 template configuration for secure access gateway.
"""
from pathlib import Path

from fastapi.templating import Jinja2Templates

from core.config import settings
from core.i18n import translate

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["_"] = translate
templates.env.globals["settings"] = settings
