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

import logging
import re
from typing import Optional

from translatable.models.exceptions import InvalidLocaleError, LocaleNotFoundError
from translatable.models.localization import TranslatedField
from translatable.modules.store.locale_attribute_store import LocaleAttributeStore
from translatable.modules.store.store_config import get_settings

logger = logging.getLogger(__name__)

_PLAIN_KEY = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def resolve_with_fallback(
    field: TranslatedField,
    locale: str,
    fallback: Optional[str] = None,
    store: Optional[LocaleAttributeStore] = None
) -> str:
    """
    Resolve a translated field to a single value, falling back to another locale.

    Args:
        field: The translated field.
        locale: The requested locale code.
        fallback: Locale tried when `locale` has no value. Defaults to the
            configured fallback_locale.
        store: Store used for the lookups.

    Returns:
        The value for `locale`, or for `fallback` if `locale` is missing.

    Raises:
        LocaleNotFoundError: if neither locale has a value (reports `locale`).
    """
    store = store or LocaleAttributeStore()
    if fallback is None:
        fallback = get_settings().fallback_locale

    try:
        return store.get_value(field, locale)
    except LocaleNotFoundError:
        if not fallback or fallback == locale or fallback not in field:
            raise
        logger.warning(f"No translation for '{locale}', falling back to '{fallback}'")
        return store.get_value(field, fallback)


def json_path(locale: str) -> str:
    """
    Returns the JSON path addressing locale inside a stored translatable column.

    Examples:
        >>> json_path("en")
        '$.en'
        >>> json_path("en-US")
        '$."en-US"'
    """
    if not locale:
        raise InvalidLocaleError("Locale code must not be empty.")
    if _PLAIN_KEY.match(locale):
        return f"$.{locale}"
    escaped = locale.replace("\\", "\\\\").replace('"', '\\"')
    return f'$."{escaped}"'
