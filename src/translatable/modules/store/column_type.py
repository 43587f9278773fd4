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
SQLAlchemy column type storing a TranslatedField as flat JSON text.
"""

from typing import Any, Optional

from sqlalchemy import types

from translatable.models.localization import TranslatedField
from translatable.modules.store.casts import TRANSLATABLE_CAST, CastRegistry


class TranslatableType(types.TypeDecorator):
    """
    Represents a TranslatedField as the JSON object text produced by
    LocaleAttributeStore.serialize().

    Bound values may be a TranslatedField, a locale -> text mapping or
    already serialized text. NULL columns load as an empty field.
    """

    impl = types.Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect) -> Optional[str]:
        if value is None:
            return None
        return CastRegistry.get_cast(TRANSLATABLE_CAST).set(value)

    def process_result_value(self, value: Optional[str], dialect) -> TranslatedField:
        return CastRegistry.get_cast(TRANSLATABLE_CAST).get(value)
