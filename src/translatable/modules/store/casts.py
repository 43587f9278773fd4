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
Attribute casts and the registry that merges them into record definitions.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

from pydantic import ValidationError

from translatable.models.exceptions import CastNotRegisteredError, MalformedDataError
from translatable.models.localization import TranslatedField
from translatable.models.protocols.localization import AttributeCastProtocol
from translatable.modules.store.locale_attribute_store import LocaleAttributeStore

logger = logging.getLogger(__name__)

TRANSLATABLE_CAST = "translatable"


class TranslatableCast(AttributeCastProtocol):
    """
    Converts between stored JSON text and TranslatedField.
    """

    def __init__(self, store: Optional[LocaleAttributeStore] = None):
        self.store = store or LocaleAttributeStore()

    def get(self, raw: Any) -> TranslatedField:
        """
        Accepts stored JSON text, a TranslatedField loaded by TranslatableType
        or a locale -> text mapping decoded by the driver.
        """
        if isinstance(raw, TranslatedField):
            return raw
        if isinstance(raw, Mapping):
            try:
                return TranslatedField.model_validate(dict(raw))
            except ValidationError as e:
                raise MalformedDataError(
                    "Stored mapping must map non-empty locale codes to strings.", original_exception=e
                ) from e
        return self.store.deserialize(raw)

    def set(self, value: Any) -> str:
        if isinstance(value, TranslatedField):
            return self.store.serialize(value)
        if isinstance(value, Mapping):
            return self.store.serialize(self.store.set_many_values(TranslatedField(), value))
        # Raw text is re-encoded so that only well-formed objects reach storage.
        return self.store.serialize(self.store.deserialize(value))


CastContributor = Callable[[type], Dict[str, str]]


def translatable_casts(record_cls: type) -> Dict[str, str]:
    """Casts every field a record declares in `translatable`."""
    return {name: TRANSLATABLE_CAST for name in getattr(record_cls, "translatable", ())}


class CastRegistry:
    """
    Centralized registry of cast codecs and of the contributors that add
    casts to record definitions.
    """

    # Map cast name -> codec
    _registry: Dict[str, AttributeCastProtocol] = {
        TRANSLATABLE_CAST: TranslatableCast(),
    }

    # Ordered; later contributors override earlier ones on the same attribute.
    _contributors: List[CastContributor] = [translatable_casts]

    @classmethod
    def register(cls, name: str, codec: AttributeCastProtocol):
        """Register a cast codec under name, replacing any previous one."""
        if not isinstance(codec, AttributeCastProtocol):
            raise ValueError(f"Codec {codec!r} must implement get() and set()")
        cls._registry[name] = codec
        logger.debug(f"Registered cast '{name}' ({type(codec).__name__})")

    @classmethod
    def register_contributor(cls, contributor: CastContributor):
        """Register a function that contributes casts for a record class."""
        if contributor not in cls._contributors:
            cls._contributors.append(contributor)
            logger.debug(f"Registered cast contributor {getattr(contributor, '__name__', contributor)}")

    @classmethod
    def unregister_contributor(cls, contributor: CastContributor):
        if contributor in cls._contributors:
            cls._contributors.remove(contributor)

    @classmethod
    def get_cast(cls, name: str) -> AttributeCastProtocol:
        codec = cls._registry.get(name)
        if codec is None:
            raise CastNotRegisteredError(f"No cast registered under '{name}'")
        return codec

    @classmethod
    def casts_for(cls, record_cls: Type) -> Dict[str, str]:
        """Merges the casts contributed for record_cls, in registration order."""
        casts: Dict[str, str] = {}
        for contributor in cls._contributors:
            casts.update(contributor(record_cls))
        return casts
