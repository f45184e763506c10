# barberapp/formatting.py

from typing import Any, Optional

from babel.core import Locale, UnknownLocaleError
from babel.dates import format_datetime
from babel.numbers import format_currency as babel_format_currency

from barberapp.core import parse_appointment_date
from barberapp.data import shop_settings
from barberapp.i18n import Message, translate
from barberapp.logging_config import get_logger

logger = get_logger(__name__)

# storefront locale -> formatting conventions
BABEL_LOCALES = {
    "en": "en_US",
    "es": "es_ES",
    "pt": "pt_BR",
}


def babel_locale(locale: Optional[str]) -> Locale:
    """Raises UnknownLocaleError, ValueError or TypeError for unusable tags."""
    tag = BABEL_LOCALES.get(locale, locale)
    return Locale.parse(tag.replace("-", "_"))


def format_currency(price: float, locale: Optional[str] = "pt") -> str:
    """Format ``price`` in the shop currency using ``locale`` conventions.

    Never raises on a bad locale: falls back to ``R$25.00`` style output.
    """
    currency = shop_settings["currency"]
    try:
        return babel_format_currency(price, currency, locale=babel_locale(locale))
    except (UnknownLocaleError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("currency_format_fallback", locale=locale, error=str(exc))
        return f"{shop_settings['currency_symbol']}{float(price):.2f}"


def format_appointment_date(value: Any, locale: str = "en") -> str:
    """Localized date-time for display, or the localized "Invalid Date" marker."""
    parsed = parse_appointment_date(value)
    if parsed is None:
        return translate(Message("admin_appointment.invalid_date"), locale)
    try:
        return format_datetime(parsed, "medium", locale=babel_locale(locale))
    except (UnknownLocaleError, ValueError, TypeError, AttributeError):
        return parsed.strftime("%Y-%m-%d %H:%M UTC")
