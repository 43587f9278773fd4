#    Copyright 2025 FAO
#
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.
#
#    Author: Carlo Cancellieri (ccancellieri@gmail.com)
#    Company: FAO, Viale delle Terme di Caracalla, 00100 Rome, Italy
#    Contact: copyright@fao.org - http://fao.org/contact-us/terms/en/

"""
SettingsLocaleResolver: Implementation of LocaleResolverProtocol.
"""

import contextvars
import logging
from contextlib import contextmanager
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from translatable.models.exceptions import InvalidLocaleError
from translatable.models.protocols.localization import LocaleResolverProtocol
from translatable.modules.store.store_config import TranslatableSettings, get_settings

logger = logging.getLogger(__name__)

# Scoped overrides, keyed by resolver instance id. One variable for the whole process.
_locale_overrides: contextvars.ContextVar[Mapping[int, str]] = contextvars.ContextVar(
    "translatable_locale_overrides", default=MappingProxyType({})
)


class SettingsLocaleResolver(LocaleResolverProtocol):
    """
    Resolves the current locale from settings, with per-context overrides.

    Overrides are scoped with use_locale() and kept in a ContextVar, so
    concurrent requests handled in separate contexts do not see each other's
    locale, and two resolvers never see each other's override.
    """

    def __init__(self, settings: Optional[TranslatableSettings] = None):
        self._settings = settings or get_settings()

    def get_locale(self) -> str:
        return _locale_overrides.get().get(id(self)) or self._settings.default_locale

    @contextmanager
    def use_locale(self, locale: str) -> Iterator[str]:
        """Makes locale the current one for the enclosed block."""
        if not locale:
            raise InvalidLocaleError("Locale code must not be empty.")
        overrides = dict(_locale_overrides.get())
        overrides[id(self)] = locale
        token = _locale_overrides.set(MappingProxyType(overrides))
        logger.debug(f"Current locale set to '{locale}'")
        try:
            yield locale
        finally:
            _locale_overrides.reset(token)
