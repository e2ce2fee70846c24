"""Unit tests for CatalogDictionaryService."""

from pathlib import Path

import pytest

from i18n_proxy.app.translation.dictionary import (
    LOCALES_DIR,
    CatalogDictionaryService,
    load_catalog,
)
from i18n_proxy.app.translation.models import Language

PO_HEADER = '''msgid ""
msgstr ""
"Content-Type: text/plain; charset=utf-8\\n"

'''


def write_catalog(locales_dir: Path, language: str, body: str) -> None:
    po_dir = locales_dir / language / "LC_MESSAGES"
    po_dir.mkdir(parents=True)
    (po_dir / "messages.po").write_text(PO_HEADER + body, encoding="utf-8")


@pytest.fixture
def locales_dir(tmp_path):
    write_catalog(
        tmp_path,
        "fr",
        '''msgid "Chair"
msgstr "Chaise"

msgid "Seat"
msgstr "Chaise"

msgid "Table"
msgstr ""

#, fuzzy
msgid "Lamp"
msgstr "Lampe"
''',
    )
    write_catalog(
        tmp_path,
        "es",
        '''msgid "Chair"
msgstr "Silla"
''',
    )
    return tmp_path


@pytest.fixture
def service(locales_dir, native):
    return CatalogDictionaryService(native_language=native, locales_dir=locales_dir)


@pytest.mark.unit
class TestCatalogDictionaryService:
    @pytest.mark.asyncio
    async def test_native_to_foreign(self, service, native, french):
        result = await service.translate(native, french, "Chair")

        assert result.native_key == "Chair"
        assert result.foreign_value == "Chaise"

    @pytest.mark.asyncio
    async def test_foreign_to_native(self, service, native, french):
        result = await service.translate(french, native, "Chaise")

        assert result.native_key == "Chair"
        assert result.foreign_value == "Chaise"

    @pytest.mark.asyncio
    async def test_missing_entry_is_not_an_error(self, service, native, french):
        result = await service.translate(native, french, "Sofa")

        assert result.foreign_value is None

    @pytest.mark.asyncio
    async def test_untranslated_and_fuzzy_entries_are_skipped(self, service, native, french):
        assert (await service.translate(native, french, "Table")).foreign_value is None
        assert (await service.translate(native, french, "Lamp")).foreign_value is None

    @pytest.mark.asyncio
    async def test_unsupported_language_has_no_mappings(self, service, native):
        result = await service.translate(native, Language("de"), "Chair")

        assert result.native_key is None
        assert result.foreign_value is None

    @pytest.mark.asyncio
    async def test_supported_language_without_catalog(self, service, native):
        result = await service.translate(native, Language("ar"), "Chair")

        assert result.foreign_value is None

    @pytest.mark.asyncio
    async def test_foreign_to_foreign_goes_through_native(self, service, french):
        result = await service.translate(french, Language("es"), "Chaise")

        assert result.native_key == "Chair"
        assert result.foreign_value == "Silla"


@pytest.mark.unit
class TestLoadCatalog:
    def test_first_native_text_wins_reverse_lookup(self, locales_dir):
        catalog = load_catalog(locales_dir, "fr")

        assert catalog.forward == {"Chair": "Chaise", "Seat": "Chaise"}
        assert catalog.reverse == {"Chaise": "Chair"}

    def test_catalog_is_parsed_once(self, locales_dir):
        assert load_catalog(locales_dir, "es") is load_catalog(locales_dir, "es")

    def test_missing_catalog(self, tmp_path):
        assert load_catalog(tmp_path, "fr") is None


@pytest.mark.unit
@pytest.mark.parametrize("language", ["fr", "es", "ar"])
def test_bundled_catalogs_translate_both_ways(language):
    catalog = load_catalog(LOCALES_DIR, language)

    assert catalog is not None
    assert "Furniture" in catalog.forward
    assert catalog.reverse[catalog.forward["Furniture"]] == "Furniture"
