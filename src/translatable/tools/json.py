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

import orjson
from typing import Any, Union


# =============================================================================
# == ENCODING (Python objects -> JSON text)
# =============================================================================

def dumps(obj: Any, sort_keys: bool = True) -> str:
    """
    Encodes an object as compact JSON text.

    orjson always emits UTF-8, so non-ASCII characters are written as-is
    rather than as \\uXXXX escapes. With sort_keys the output is canonical
    for a given mapping; without it, insertion order is kept.
    """
    option = orjson.OPT_SORT_KEYS if sort_keys else 0
    return orjson.dumps(obj, option=option).decode("utf-8")


# =============================================================================
# == DECODING (JSON text -> Python objects)
# =============================================================================

def loads(raw: Union[str, bytes, bytearray, memoryview]) -> Any:
    """
    Decodes JSON text. Raises orjson.JSONDecodeError (a ValueError) on invalid input.
    """
    return orjson.loads(raw)


JSONDecodeError = orjson.JSONDecodeError
