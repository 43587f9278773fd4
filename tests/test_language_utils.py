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

from translatable.models.exceptions import InvalidLocaleError, LocaleNotFoundError
from translatable.models.localization import TranslatedField
from translatable.tools.language_utils import json_path, resolve_with_fallback


def test_resolve_requested_locale(field):
    assert resolve_with_fallback(field, "da") == "Hej"


def test_resolve_falls_back_to_configured_locale(field, caplog):
    assert resolve_with_fallback(field, "fr") == "Hello"
    assert "falling back to 'en'" in caplog.text


def test_resolve_explicit_fallback(field):
    assert resolve_with_fallback(field, "fr", fallback="da") == "Hej"


def test_resolve_reports_requested_locale_when_fallback_missing():
    field = TranslatedField.of("da", "Hej")
    with pytest.raises(LocaleNotFoundError) as exc_info:
        resolve_with_fallback(field, "fr")
    assert exc_info.value.locale == "fr"


def test_resolve_uses_environment_fallback(field, monkeypatch):
    monkeypatch.setenv("TRANSLATABLE_FALLBACK_LOCALE", "da")
    assert resolve_with_fallback(field, "fr") == "Hej"


@pytest.mark.parametrize("locale, expected", [
    ("en", "$.en"),
    ("zh_Hans", "$.zh_Hans"),
    ("en-US", '$."en-US"'),
    ('a"b', '$."a\\"b"'),
])
def test_json_path(locale, expected):
    assert json_path(locale) == expected


def test_json_path_rejects_empty_locale():
    with pytest.raises(InvalidLocaleError):
        json_path("")
