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
Records with translatable columns.

A record class declares which of its columns are translatable:

    class Product(TranslatableRecord):
        translatable = ("name", "description")
        casts = {"price": "decimal"}

Translatable columns hold JSON text such as {"en": "Chair", "da": "Stol"}.
Values are read and written either in an explicit locale
(get_translation / set_translation) or in the caller's current locale
(get_attribute / set_attribute), which is always passed in explicitly.
"""

import logging
from typing import Any, ClassVar, Dict, Mapping, Optional, Set, Tuple, Union

from translatable.models.exceptions import UnknownAttributeError
from translatable.models.localization import TranslatedField
from translatable.modules.store.casts import CastRegistry, TranslatableCast
from translatable.modules.store.locale_attribute_store import LocaleAttributeStore

logger = logging.getLogger(__name__)


class TranslatableRecord:
    """
    Base class for records owning one or more translatable columns.
    """

    translatable: ClassVar[Tuple[str, ...]] = ()
    casts: ClassVar[Dict[str, str]] = {}

    def __init__(self, attributes: Optional[Dict[str, Any]] = None, store: Optional[LocaleAttributeStore] = None):
        self.attributes: Dict[str, Any] = dict(attributes or {})
        self.store = store or LocaleAttributeStore()
        self._cast = TranslatableCast(self.store)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(attributes={self.attributes!r})"

    # --- Casts ---

    def get_casts(self) -> Dict[str, str]:
        """
        Returns the record's own casts merged with the casts contributed
        through CastRegistry. Contributed casts win on conflicts.
        """
        merged = dict(self.casts)
        merged.update(CastRegistry.casts_for(type(self)))
        return merged

    def cast_attributes(self) -> Dict[str, Any]:
        """Returns all attributes decoded through their declared casts."""
        casts = self.get_casts()
        return {
            key: CastRegistry.get_cast(casts[key]).get(value) if key in casts else value
            for key, value in self.attributes.items()
        }

    # --- Explicit locale access ---

    def is_translatable(self, key: str) -> bool:
        return key in self.translatable

    def get_translations(self, key: str) -> TranslatedField:
        """Returns every stored translation of a translatable column."""
        self._ensure_translatable(key)
        return self._cast.get(self.attributes.get(key))

    def get_locales(self, key: str) -> Set[str]:
        return self.store.locales(self.get_translations(key))

    def get_translation(self, key: str, locale: str) -> str:
        """
        Returns the value of key in locale.
        Raises LocaleNotFoundError if that locale has no value.
        """
        return self.store.get_value(self.get_translations(key), locale)

    def set_translation(self, key: str, locale: str, value: str) -> None:
        """Sets the value of key in locale, keeping the other locales."""
        field = self.store.set_value(self.get_translations(key), locale, value)
        self._write(key, field)
        logger.debug(f"{self.__class__.__name__}.{key}: set translation for '{locale}'")

    def set_translations(self, key: str, values: Mapping[str, str]) -> None:
        field = self.store.set_many_values(self.get_translations(key), values)
        self._write(key, field)

    # --- Current locale access ---

    def get_attribute(self, key: str, current_locale: str) -> Any:
        """
        Returns translatable columns in current_locale, any other column as stored.
        """
        if self.is_translatable(key):
            return self.get_translation(key, current_locale)
        return self.attributes.get(key)

    def set_attribute(self, key: str, value: Union[str, Mapping[str, str], Any], current_locale: str) -> None:
        """
        Stores value under key.

        For translatable columns a mapping sets many locales at once and a
        plain value sets current_locale. Other columns are stored as given.
        """
        if not self.is_translatable(key):
            self.attributes[key] = value
            return
        field = self.store.set(self.get_translations(key), current_locale, value)
        self._write(key, field)

    def translate(self, locale: str) -> Dict[str, Any]:
        """
        Returns all attributes with every translatable column resolved to locale.
        Raises LocaleNotFoundError for the first column without that locale.
        """
        return {
            key: self.get_translation(key, locale) if self.is_translatable(key) else value
            for key, value in self.attributes.items()
        }

    def _ensure_translatable(self, key: str) -> None:
        if not self.is_translatable(key):
            raise UnknownAttributeError(
                f"'{key}' is not a translatable attribute of {self.__class__.__name__}. "
                f"Translatable attributes: {list(self.translatable)}"
            )

    def _write(self, key: str, field: TranslatedField) -> None:
        # Keep the column in the form it was loaded in: a TranslatedField from
        # TranslatableType stays a field, anything else becomes JSON text.
        if isinstance(self.attributes.get(key), TranslatedField):
            self.attributes[key] = field
        else:
            self.attributes[key] = self.store.serialize(field)
