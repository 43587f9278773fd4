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

import pytest

from translatable.modules.store.locale_attribute_store import LocaleAttributeStore
from translatable.modules.store.store_config import get_settings

_SETTINGS_ENV = (
    "TRANSLATABLE_DEFAULT_LOCALE",
    "TRANSLATABLE_FALLBACK_LOCALE",
    "TRANSLATABLE_SORT_KEYS",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolates every test from TRANSLATABLE_* variables and the cached settings."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store():
    return LocaleAttributeStore()


@pytest.fixture
def stored_text():
    """Column text as loaded from storage."""
    return '{"en":"Hello","da":"Hej"}'


@pytest.fixture
def field(store, stored_text):
    return store.deserialize(stored_text)
