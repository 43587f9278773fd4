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

from types import MappingProxyType
from typing import Dict, ItemsView, Iterator, Mapping, Set

from pydantic import ConfigDict, RootModel, StrictStr, field_validator

from translatable.models.exceptions import InvalidLocaleError, InvalidValueError


def is_valid_text(value: str) -> bool:
    """True when value can be written as UTF-8 (no lone surrogates)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class TranslatedField(RootModel[Dict[StrictStr, StrictStr]]):
    """
    The locale-keyed values of a single translatable column.

    The root is a flat mapping of locale code to text, e.g.
    {"en": "Hello", "da": "Hej"}. Locale codes are opaque, case-sensitive
    keys: no normalization or fallback between 'en' and 'en-US' is applied.

    Instances are frozen and the validated mapping is exposed read-only;
    every update goes through LocaleAttributeStore, which returns a new field.
    """
    model_config = ConfigDict(frozen=True, validate_default=True, json_schema_extra={"example": {"en": "Hello", "da": "Hej"}})

    root: Dict[StrictStr, StrictStr] = {}

    @field_validator("root")
    @classmethod
    def validate_locale_keys(cls, v: Dict[str, str]) -> Mapping[str, str]:
        if any(not locale for locale in v):
            raise ValueError("Locale codes must be non-empty strings.")
        if not all(is_valid_text(locale) and is_valid_text(text) for locale, text in v.items()):
            raise ValueError("Locale codes and values must be valid UTF-8 text.")
        return MappingProxyType(dict(v))

    @classmethod
    def of(cls, locale: str, value: str) -> "TranslatedField":
        """Builds a field holding a single locale/value pair."""
        if not locale or not isinstance(locale, str) or not is_valid_text(locale):
            raise InvalidLocaleError("Locale code must be a non-empty string.")
        if not isinstance(value, str) or not is_valid_text(value):
            raise InvalidValueError(f"Value for locale '{locale}' must be valid UTF-8 text.")
        return cls({locale: value})

    def get_available_languages(self) -> Set[str]:
        """Returns the set of locale codes that have a stored value."""
        return set(self.root)

    def to_dict(self) -> Dict[str, str]:
        return dict(self.root)

    def items(self) -> ItemsView[str, str]:
        return self.root.items()

    def __contains__(self, locale: object) -> bool:
        return locale in self.root

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __hash__(self) -> int:
        return hash(frozenset(self.root.items()))
