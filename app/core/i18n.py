"""
Localization loader for secure access gateway.

Loads the gettext catalog for the plugin text domain. Missing catalogs fall
back to the untranslated source strings.
"""
import gettext
import logging
from pathlib import Path
from typing import Optional

from core.config import settings

logger = logging.getLogger(__name__)

APP_DIR = Path(__file__).resolve().parent.parent

_translations: Optional[gettext.NullTranslations] = None


def load_text_domain(domain: str, localedir: str, locale: str = "") -> gettext.NullTranslations:
    """載入指定 text domain 的翻譯檔"""
    global _translations

    path = Path(localedir)
    if not path.is_absolute():
        path = APP_DIR / path

    languages = [locale] if locale else None
    _translations = gettext.translation(domain, str(path), languages=languages, fallback=True)
    logger.debug(f"載入 text domain: {domain} ({path}, locale={locale or 'default'})")
    return _translations


def translate(message: str) -> str:
    """翻譯訊息，尚未載入時使用設定值載入"""
    if _translations is None:
        load_text_domain(settings.text_domain, settings.languages_dir, settings.locale)
    return _translations.gettext(message)
