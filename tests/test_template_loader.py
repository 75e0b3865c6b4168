import pytest

from app.config import Settings
from app.errors import TemplateLoadError
from app.inline_template import INLINE_TEMPLATE_NAME, get_inline_template
from app.template_loader import TemplateLoader, is_word_template, read_template_file


def test_word_signature_detection(docx_template):
    assert is_word_template(docx_template)
    assert not is_word_template(b"<!DOCTYPE html>")
    assert not is_word_template(b"")


def test_primary_template_wins(tmp_path, docx_template):
    primary = tmp_path / "voucher_template.docx"
    primary.write_bytes(docx_template)
    secondary = tmp_path / "voucher_template_hotel.html"
    secondary.write_text("<p>{{nome}}</p>", encoding="utf-8")

    loader = TemplateLoader(str(primary), [str(secondary)])
    template = loader.load()

    assert template.source == str(primary)
    assert template.is_word


def test_missing_primary_falls_back_to_secondary(tmp_path):
    secondary = tmp_path / "voucher_template_hotel.html"
    secondary.write_text("<p>{{nome}}</p>", encoding="utf-8")

    loader = TemplateLoader(str(tmp_path / "missing.docx"), [str(secondary)])
    template = loader.load()

    assert template.source == str(secondary)
    assert not template.is_word
    assert template.text() == "<p>{{nome}}</p>"


def test_everything_missing_falls_back_to_inline(tmp_path):
    loader = TemplateLoader(str(tmp_path / "a.docx"), [str(tmp_path / "b.html")])
    template = loader.load()

    assert template.source == INLINE_TEMPLATE_NAME
    assert template.text() == get_inline_template()


def test_empty_file_is_skipped(tmp_path):
    empty = tmp_path / "empty.docx"
    empty.write_bytes(b"")
    loader = TemplateLoader(str(empty), [])
    assert loader.load().source == INLINE_TEMPLATE_NAME


def test_load_html_skips_word_template(tmp_path, docx_template):
    primary = tmp_path / "voucher_template.docx"
    primary.write_bytes(docx_template)
    loader = TemplateLoader(str(primary), [])

    template = loader.load_html()
    assert template.source == INLINE_TEMPLATE_NAME


def test_chain_exhausted_without_inline(tmp_path):
    loader = TemplateLoader(str(tmp_path / "a.docx"), [], use_inline_template=False)
    with pytest.raises(TemplateLoadError):
        loader.load()


def test_read_template_file_reports_source(tmp_path):
    path = str(tmp_path / "nope.html")
    with pytest.raises(TemplateLoadError) as exc_info:
        read_template_file(path)
    assert exc_info.value.source == path


def test_from_settings_order(tmp_path):
    settings = Settings(
        template_path=str(tmp_path / "t.docx"),
        html_template_path=str(tmp_path / "t.html"),
        use_inline_template=False,
    )
    loader = TemplateLoader.from_settings(settings)
    assert loader.sources() == [settings.template_path, settings.html_template_path]
    assert loader.use_inline_template is False


def test_inline_template_has_every_placeholder(record):
    template = get_inline_template()
    for name in record.placeholders():
        assert "{{" + name + "}}" in template
