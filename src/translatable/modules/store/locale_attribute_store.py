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
LocaleAttributeStore: reads, updates and (de)serializes the locale-keyed
values of a single translatable column.

The stored form is a flat JSON object, keys are locale codes and values are
strings: {"da":"Hej","en":"Hello"}. All operations are pure; updates return
a new TranslatedField and leave the input untouched.
"""

import logging
from typing import Mapping, Optional, Set, Union

from pydantic import ValidationError

from translatable.models.exceptions import InvalidLocaleError, InvalidValueError, LocaleNotFoundError, MalformedDataError
from translatable.models.localization import TranslatedField, is_valid_text
from translatable.modules.store.store_config import get_settings
from translatable.tools import json as json_tools

logger = logging.getLogger(__name__)

RawValue = Union[str, bytes, bytearray, None]


class LocaleAttributeStore:
    """
    Standard implementation of the locale-keyed attribute store.
    """

    def __init__(self, sort_keys: Optional[bool] = None):
        self._sort_keys = sort_keys

    @property
    def sort_keys(self) -> bool:
        """Explicit constructor value, otherwise the configured default."""
        return get_settings().sort_keys if self._sort_keys is None else self._sort_keys

    # --- Serialization ---

    def deserialize(self, raw: RawValue) -> TranslatedField:
        """
        Parses stored column text into a TranslatedField.

        Empty or absent input (None, '', b'' or the JSON literal null) means
        "no translations yet" and yields an empty field. Anything else must
        be a JSON object whose keys are non-empty locale codes and whose
        values are strings, otherwise MalformedDataError is raised.
        """
        if raw is not None and not isinstance(raw, (str, bytes, bytearray)):
            raise MalformedDataError(
                f"Stored value must be JSON text, got {type(raw).__name__}."
            )
        if raw is None or len(raw) == 0:
            logger.debug("Empty translatable column, returning an empty field.")
            return TranslatedField()

        try:
            data = json_tools.loads(raw)
        except json_tools.JSONDecodeError as e:
            raise MalformedDataError("Stored value is not valid JSON.", original_exception=e) from e

        if data is None:
            logger.debug("Translatable column holds JSON null, returning an empty field.")
            return TranslatedField()

        if not isinstance(data, dict):
            raise MalformedDataError(
                f"Stored value must be a JSON object, got {type(data).__name__}."
            )

        try:
            return TranslatedField.model_validate(data)
        except ValidationError as e:
            raise MalformedDataError(
                "Stored JSON object must map non-empty locale codes to strings.", original_exception=e
            ) from e

    def serialize(self, field: TranslatedField) -> str:
        """Encodes a field as a flat JSON object with unescaped UTF-8 text."""
        return json_tools.dumps(field.to_dict(), sort_keys=self.sort_keys)

    # --- Explicit locale access ---

    def get_value(self, field: TranslatedField, locale: str) -> str:
        """
        Returns the text stored under locale.
        Raises LocaleNotFoundError if missing; no other locale is substituted.
        """
        try:
            return field.root[locale]
        except KeyError:
            raise LocaleNotFoundError(locale, field.root.keys()) from None

    def set_value(self, field: TranslatedField, locale: str, value: str) -> TranslatedField:
        """
        Returns a new field where locale maps to value, other entries unchanged.
        Raises InvalidLocaleError for an empty locale and InvalidValueError
        for a value that is not valid text.
        """
        if not locale or not isinstance(locale, str) or not is_valid_text(locale):
            raise InvalidLocaleError("Locale code must be a non-empty string.")
        if not isinstance(value, str) or not is_valid_text(value):
            raise InvalidValueError(f"Value for locale '{locale}' must be valid UTF-8 text.")
        merged = field.to_dict()
        merged[locale] = value
        return TranslatedField.model_validate(merged)

    def set_many_values(self, field: TranslatedField, values: Mapping[str, str]) -> TranslatedField:
        """
        Applies set_value for every entry of values.
        The first empty locale raises InvalidLocaleError and nothing is applied.
        """
        result = field
        for locale, value in values.items():
            result = self.set_value(result, locale, value)
        return result

    def locales(self, field: TranslatedField) -> Set[str]:
        return field.get_available_languages()

    # --- Current locale access ---

    def get(self, field: TranslatedField, current_locale: str) -> str:
        """Returns the value for the caller's current locale."""
        return self.get_value(field, current_locale)

    def set(self, field: TranslatedField, current_locale: str, value: Union[str, Mapping[str, str]]) -> TranslatedField:
        """
        Sets the value for the caller's current locale.

        A mapping value is treated as locale -> text pairs and applied with
        set_many_values; current_locale is ignored in that case.
        """
        if isinstance(value, Mapping):
            return self.set_many_values(field, value)
        return self.set_value(field, current_locale, value)
