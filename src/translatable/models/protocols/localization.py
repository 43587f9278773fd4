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
Localization-related protocol definitions.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LocaleResolverProtocol(Protocol):
    """
    Protocol for the application component that knows the current locale.
    """

    def get_locale(self) -> str:
        """
        Returns the locale in effect for the calling context (e.g. 'en').
        Must never return an empty string.
        """
        ...


@runtime_checkable
class AttributeCastProtocol(Protocol):
    """
    Protocol for converting a stored column value to and from its Python value.
    """

    def get(self, raw: Any) -> Any:
        """
        Converts the raw stored value into its Python representation.
        """
        ...

    def set(self, value: Any) -> Any:
        """
        Converts a Python value into the raw value written to storage.
        """
        ...
