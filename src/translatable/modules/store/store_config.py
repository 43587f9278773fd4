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

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TranslatableSettings(BaseSettings):
    """
    Manages configuration for translatable fields.
    Settings are loaded from environment variables (or a local .env file).
    """
    # Locale returned by SettingsLocaleResolver when no scope overrides it.
    default_locale: str = Field("en", min_length=1)

    # Locale tried by caller-side fallback helpers when the requested one is missing.
    # The store itself never falls back.
    fallback_locale: Optional[str] = "en"

    # Serialize with keys sorted. When False, insertion order is kept.
    sort_keys: bool = True

    model_config = SettingsConfigDict(
        # e.g. TRANSLATABLE_DEFAULT_LOCALE=da
        env_prefix="TRANSLATABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


@lru_cache(maxsize=1)
def get_settings() -> TranslatableSettings:
    """Returns the process-wide settings, loaded once."""
    return TranslatableSettings()
