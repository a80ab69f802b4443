from pathlib import Path

from fastapi.templating import Jinja2Templates

from academy.settings import settings

BASE_DIR = Path(__file__).resolve().parent
STATIC_DIR = BASE_DIR / "static"

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
templates.env.globals["languages"] = settings.supported_languages
templates.env.globals["default_language"] = settings.default_language
