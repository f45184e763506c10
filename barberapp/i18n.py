"""Locale-keyed message lookup.

The stores never produce UI text. They emit ``Message(key, params)`` values
and this module resolves them against the en/es/pt string tables.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from barberapp.locales import en, es, pt

FALLBACK_LOCALE = "en"

TABLES = {
    "en": en.STRINGS,
    "es": es.STRINGS,
    "pt": pt.STRINGS,
}


@dataclass(frozen=True)
class Message:
    """A translatable message key plus interpolation parameters."""

    key: str
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Notification:
    """Toast-style outcome of an admin or booking action."""

    title: Message
    description: Message
    variant: str = "default"  # "default" or "destructive"

    @property
    def ok(self) -> bool:
        return self.variant != "destructive"


def resolve_locale(value: Optional[str], default: str = FALLBACK_LOCALE) -> str:
    """Map ``pt-BR``, ``es_ES`` or an Accept-Language header onto a supported locale."""
    if not value:
        return default
    for part in value.split(","):
        tag = part.split(";")[0].strip().replace("_", "-").lower()
        language = tag.split("-")[0]
        if language in TABLES:
            return language
    return default


def _lookup(table: Dict[str, Any], key: str) -> Optional[str]:
    node: Any = table
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translate(message: Message, locale: str = FALLBACK_LOCALE) -> str:
    """Resolve ``message`` for ``locale``; unknown keys render as the key itself."""
    template = _lookup(TABLES.get(locale, {}), message.key)
    if template is None:
        template = _lookup(TABLES[FALLBACK_LOCALE], message.key)
    if template is None:
        return message.key

    params = {
        name: translate(value, locale) if isinstance(value, Message) else value
        for name, value in message.params.items()
    }
    try:
        return template.format(**params)
    except (KeyError, IndexError):
        # missing parameter: show the raw template rather than fail the render
        return template


def render_notification(notification: Notification, locale: str) -> Dict[str, str]:
    return {
        "title": translate(notification.title, locale),
        "description": translate(notification.description, locale),
        "variant": notification.variant,
    }
