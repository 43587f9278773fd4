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
This module defines the hierarchy of exceptions raised while reading and
writing translatable fields, so that callers can tell a corrupt column apart
from a missing translation or a bad locale key.
"""

from typing import Iterable, Optional


class TranslatableError(Exception):
    """Base class for all translatable-field exceptions."""
    def __init__(self, message, original_exception=None):
        super().__init__(message)
        self.original_exception = original_exception
        self.details = str(original_exception) if original_exception else "No additional details."

    def __str__(self):
        return f"{self.args[0]} (Details: {self.details})"


class MalformedDataError(TranslatableError, ValueError):
    """Raised when stored text is not a JSON object mapping locale codes to strings."""
    pass


class LocaleNotFoundError(TranslatableError, KeyError):
    """Raised when no value is stored for the requested locale."""
    def __init__(self, locale: str, available: Optional[Iterable[str]] = None):
        self.locale = locale
        self.available = sorted(available or [])
        super().__init__(
            f"No translation stored for locale '{locale}'. Available locales: {self.available}"
        )


class InvalidLocaleError(TranslatableError, ValueError):
    """Raised when an empty locale code is used on write."""
    pass


class UnknownAttributeError(TranslatableError, KeyError):
    """Raised when a non-translatable attribute is addressed through the translation API."""
    pass


class CastNotRegisteredError(TranslatableError, KeyError):
    """Raised when a record declares a cast name with no registered codec."""
    pass


class InvalidValueError(TranslatableError, ValueError):
    """Raised when a value written for a locale is not valid text."""
    pass
