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
Locale-aware attribute storage: one JSON column maps locale codes to text.
"""

from translatable.models.exceptions import (
    TranslatableError,
    MalformedDataError,
    LocaleNotFoundError,
    InvalidLocaleError,
    InvalidValueError,
    UnknownAttributeError,
    CastNotRegisteredError,
)
from translatable.models.localization import TranslatedField
from translatable.models.protocols import LocaleResolverProtocol, AttributeCastProtocol
from translatable.modules.store import (
    TranslatableSettings,
    get_settings,
    LocaleAttributeStore,
    SettingsLocaleResolver,
    CastRegistry,
    TranslatableCast,
    TranslatableRecord,
    TranslatableType,
)
from translatable.tools.language_utils import resolve_with_fallback, json_path

__version__ = "0.1.0"
