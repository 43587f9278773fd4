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
from sqlalchemy import Column, Integer, MetaData, String, Table, create_engine, select

from translatable.models.exceptions import (
    CastNotRegisteredError,
    InvalidLocaleError,
    LocaleNotFoundError,
    MalformedDataError,
    UnknownAttributeError,
)
from translatable.models.localization import TranslatedField
from translatable.modules.store.casts import CastRegistry
from translatable.modules.store.column_type import TranslatableType
from translatable.modules.store.records import TranslatableRecord


class Product(TranslatableRecord):
    translatable = ("name", "description")
    casts = {"name": "json", "sku": "upper"}


class UpperCast:
    def get(self, raw):
        return raw.upper()

    def set(self, value):
        return value.lower()


@pytest.fixture
def product():
    return Product({"id": 1, "sku": "ch-01", "name": '{"en":"Chair","da":"Stol"}'})


def test_get_casts_merges_translatable_fields(product):
    assert product.get_casts() == {"name": "translatable", "description": "translatable", "sku": "upper"}


def test_cast_attributes(product, monkeypatch):
    monkeypatch.setitem(CastRegistry._registry, "upper", UpperCast())

    cast = product.cast_attributes()

    assert cast["id"] == 1
    assert cast["sku"] == "CH-01"
    assert cast["name"] == TranslatedField({"en": "Chair", "da": "Stol"})


def test_cast_attributes_unknown_cast(product):
    with pytest.raises(CastNotRegisteredError):
        product.cast_attributes()


def test_contributor_adds_casts(product):
    def audit_casts(record_cls):
        return {"sku": "translatable"} if record_cls is Product else {}

    CastRegistry.register_contributor(audit_casts)
    try:
        assert product.get_casts()["sku"] == "translatable"
    finally:
        CastRegistry.unregister_contributor(audit_casts)
    assert product.get_casts()["sku"] == "upper"


def test_get_translation(product):
    assert product.get_translation("name", "da") == "Stol"


def test_get_translation_missing_locale(product):
    with pytest.raises(LocaleNotFoundError):
        product.get_translation("name", "fr")


def test_get_translation_of_absent_column(product):
    assert product.get_translations("description") == TranslatedField()
    with pytest.raises(LocaleNotFoundError):
        product.get_translation("description", "en")


def test_translation_api_rejects_plain_columns(product):
    with pytest.raises(UnknownAttributeError):
        product.get_translation("sku", "en")
    with pytest.raises(UnknownAttributeError):
        product.set_translation("sku", "en", "x")


def test_set_translation_writes_back_serialized_text(product):
    product.set_translation("name", "de", "Stuhl")

    assert product.attributes["name"] == '{"da":"Stol","de":"Stuhl","en":"Chair"}'
    assert product.get_locales("name") == {"en", "da", "de"}


def test_set_translation_on_empty_column(product):
    product.set_translation("description", "en", "A wooden chair")
    assert product.attributes["description"] == '{"en":"A wooden chair"}'


def test_set_translation_rejects_empty_locale(product):
    before = product.attributes["name"]
    with pytest.raises(InvalidLocaleError):
        product.set_translation("name", "", "x")
    assert product.attributes["name"] == before


def test_set_translations(product):
    product.set_translations("name", {"fr": "Chaise", "en": "Armchair"})
    assert product.get_translations("name").to_dict() == {"en": "Armchair", "da": "Stol", "fr": "Chaise"}


def test_get_attribute_resolves_current_locale(product):
    assert product.get_attribute("name", "en") == "Chair"
    assert product.get_attribute("sku", "en") == "ch-01"


def test_set_attribute_with_text_uses_current_locale(product):
    product.set_attribute("name", "Stol (eg)", "da")
    assert product.get_translation("name", "da") == "Stol (eg)"
    assert product.get_translation("name", "en") == "Chair"


def test_set_attribute_with_mapping_sets_many(product):
    product.set_attribute("name", {"de": "Stuhl", "fr": "Chaise"}, "en")
    assert product.get_locales("name") == {"en", "da", "de", "fr"}


def test_set_attribute_on_plain_column(product):
    product.set_attribute("sku", "ch-02", "en")
    assert product.attributes["sku"] == "ch-02"


def test_translate(product):
    assert product.translate("da") == {"id": 1, "sku": "ch-01", "name": "Stol"}


def test_translate_missing_locale(product):
    with pytest.raises(LocaleNotFoundError):
        product.translate("fr")


@pytest.fixture
def product_rows():
    metadata = MetaData()
    products = Table(
        "products",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("sku", String),
        Column("name", TranslatableType()),
    )
    engine = create_engine("sqlite://")
    metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(products.insert(), [{"id": 1, "sku": "ch-01", "name": {"en": "Chair", "da": "Stol"}}])
    yield engine, products
    engine.dispose()


def test_record_from_column_type_row(product_rows):
    engine, products = product_rows
    with engine.connect() as conn:
        row = conn.execute(select(products).where(products.c.id == 1)).mappings().one()

    product = Product(dict(row))

    assert product.get_translation("name", "en") == "Chair"
    assert product.translate("da") == {"id": 1, "sku": "ch-01", "name": "Stol"}

    product.set_translation("name", "de", "Stuhl")
    assert product.attributes["name"] == TranslatedField({"en": "Chair", "da": "Stol", "de": "Stuhl"})

    with engine.begin() as conn:
        conn.execute(products.update().where(products.c.id == 1).values(name=product.attributes["name"]))
        stored = conn.execute(select(products.c.name).where(products.c.id == 1)).scalar_one()
    assert stored.to_dict() == {"en": "Chair", "da": "Stol", "de": "Stuhl"}


def test_record_from_decoded_mapping():
    product = Product({"name": {"en": "Chair", "da": "Stol"}})

    assert product.get_translation("name", "da") == "Stol"
    product.set_attribute("name", "Armchair", "en")
    assert product.attributes["name"] == '{"da":"Stol","en":"Armchair"}'


def test_record_rejects_malformed_mapping():
    with pytest.raises(MalformedDataError):
        Product({"name": {"en": 1}}).get_translation("name", "en")
