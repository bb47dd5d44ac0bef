from __future__ import annotations

"""
User-facing Message Catalog.

Loads a JSON catalog from interface/locales and resolves dotted keys such as
'cli.status.success'. The locale is taken from the TREEFORGE_LANG environment
variable; an unknown locale falls back to English.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALE_ENV_VAR = "TREEFORGE_LANG"
LOCALES_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "interface", "locales"
)


class _KeepMissing(dict):
    """format_map() mapping that leaves unknown placeholders in place."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class I18n:
    """
    Message catalog for one locale.

    Lookups never fail: a key that does not resolve to a string yields the
    explicit default, or the key itself.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_dir: str = LOCALES_DIR):
        self.locales_dir = locales_dir
        self._locale = ""
        self._catalog: Dict[str, Any] = {}

        if not self.load_locale(locale) and locale != DEFAULT_LOCALE:
            self.load_locale(DEFAULT_LOCALE)

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def is_loaded(self) -> bool:
        return bool(self._catalog)

    def available_locales(self) -> List[str]:
        try:
            names = os.listdir(self.locales_dir)
        except OSError:
            return []
        return sorted(os.path.splitext(n)[0] for n in names if n.endswith(".json"))

    def load_locale(self, locale: str) -> bool:
        """
        Replace the active catalog with the one for `locale`.

        Returns:
            bool: False if the catalog is missing or malformed; the previous
                  catalog then stays active.
        """
        path = os.path.join(self.locales_dir, f"{locale}.json")
        try:
            with open(path, "r", encoding="utf-8") as f:
                catalog = json.load(f)
        except FileNotFoundError:
            logger.warning(f"No message catalog for locale '{locale}' in {self.locales_dir}")
            return False
        except (OSError, ValueError) as e:
            logger.error(f"Unreadable message catalog '{path}': {e}")
            return False

        if not isinstance(catalog, dict):
            logger.error(f"Message catalog '{path}' is not a JSON object")
            return False

        self._catalog = catalog
        self._locale = locale
        logger.debug(f"Message catalog loaded: {locale}")
        return True

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve a dotted key and fill in its placeholders.

        Args:
            key: Dotted path into the catalog.
            default: Text used when the key does not resolve.
            **kwargs: Values for the template placeholders.
        """
        node: Any = self._catalog
        for part in key.split("."):
            node = node.get(part) if isinstance(node, dict) else None

        template = node if isinstance(node, str) else default
        if template is None:
            return key
        if not kwargs:
            return template
        try:
            return template.format_map(_KeepMissing(kwargs))
        except (ValueError, IndexError):
            return template


i18n = I18n(os.environ.get(LOCALE_ENV_VAR, DEFAULT_LOCALE))
