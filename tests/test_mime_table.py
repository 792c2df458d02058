import pytest

from safename.mime.models import MimeTableFile
from safename.mime.table import (
    DEFAULT_EXTENSIONS,
    MimeTableError,
    StaticMimeTable,
    SystemMimeTable,
    load_mime_table,
)


def test_static_table_defaults():
    table = StaticMimeTable()
    assert table.extensions_for("image/jpeg") == ["jpg", "jpeg", "jpe"]
    assert table.extensions_for("audio/flac") == ["flac"]
    assert table.extensions_for("application/x-flac") == ["flac"]
    assert table.extensions_for("application/octet-stream") == []
    assert table.extensions_for("lolz/lolz") == []


def test_static_table_is_case_insensitive():
    table = StaticMimeTable()
    assert table.extensions_for(" Image/JPEG ") == ["jpg", "jpeg", "jpe"]


def test_static_table_returns_copies():
    table = StaticMimeTable()
    table.extensions_for("image/png").append("bogus")
    assert table.extensions_for("image/png") == ["png"]


def test_static_table_overrides():
    table = StaticMimeTable(overrides={"image/jpeg": ["jpeg"], "Image/X-Custom": ["CST"]})
    assert table.extensions_for("image/jpeg") == ["jpeg"]
    assert table.extensions_for("image/x-custom") == ["cst"]
    assert table.extensions_for("image/png") == ["png"]


def test_static_table_custom_mapping():
    table = StaticMimeTable({"text/plain": ["txt"]})
    assert table.extensions_for("text/plain") == ["txt"]
    assert table.extensions_for("image/png") == []


@pytest.mark.parametrize(
    "mapping",
    [
        {"application/x-long": ["a" * 40]},
        {"application/x-bad": ["tar.gz"]},
        {"application/x-bad": ["a?b"]},
        {"notamimetype": ["txt"]},
    ],
)
def test_static_table_rejects_bad_entries(mapping):
    with pytest.raises(MimeTableError):
        StaticMimeTable(mapping)

    with pytest.raises(MimeTableError):
        StaticMimeTable(overrides=mapping)


def test_static_table_normalizes_dotted_extensions():
    table = StaticMimeTable({"text/plain": [".TXT"]})
    assert table.extensions_for("text/plain") == ["txt"]


def test_default_extensions_are_lowercase_without_dots():
    for extensions in DEFAULT_EXTENSIONS.values():
        for ext in extensions:
            assert ext == ext.lower()
            assert not ext.startswith(".")


def test_system_table():
    table = SystemMimeTable()
    extensions = table.extensions_for("image/png")
    assert extensions[0] == "png"
    assert len(extensions) == len(set(extensions))
    assert table.extensions_for("lolz/lolz") == []


def test_load_mime_table(tmp_path):
    path = tmp_path / "mime.yaml"
    path.write_text(
        "types:\n"
        "  image/x-custom: [.CST, custom]\n"
        "  application/x-thing: thing\n"
        "  image/jpeg: [jpeg]\n",
        encoding="utf-8",
    )

    table = load_mime_table(path)
    assert table.extensions_for("image/x-custom") == ["cst", "custom"]
    assert table.extensions_for("application/x-thing") == ["thing"]
    assert table.extensions_for("image/jpeg") == ["jpeg"]
    assert table.extensions_for("audio/flac") == ["flac"]


def test_load_empty_mime_table(tmp_path):
    path = tmp_path / "mime.yaml"
    path.write_text("", encoding="utf-8")
    table = load_mime_table(path)
    assert table.extensions_for("image/jpeg") == ["jpg", "jpeg", "jpe"]


def test_load_missing_mime_table(tmp_path):
    with pytest.raises(MimeTableError, match="Failed to read"):
        load_mime_table(tmp_path / "missing.yaml")


def test_load_malformed_mime_table(tmp_path):
    path = tmp_path / "mime.yaml"
    path.write_text("types: [unclosed\n", encoding="utf-8")
    with pytest.raises(MimeTableError, match="Failed to parse"):
        load_mime_table(path)


@pytest.mark.parametrize(
    "content",
    [
        "types:\n  notamimetype: [foo]\n",
        "types:\n  image/x-bad: ['a/b']\n",
        "types:\n  image/x-bad: ['']\n",
        "types:\n  image/x-bad: ['tar.gz']\n",
        "types:\n  image/x-bad: ['" + "x" * 17 + "']\n",
        "types:\n  image/x-bad: {a: b}\n",
    ],
)
def test_load_invalid_mime_table(tmp_path, content):
    path = tmp_path / "mime.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(MimeTableError, match="Invalid MIME table"):
        load_mime_table(path)


def test_mime_table_file_model():
    table_file = MimeTableFile.model_validate({"types": {"Audio/X-Foo": [".FOO"]}})
    assert table_file.types == {"audio/x-foo": ["foo"]}
    assert MimeTableFile.model_validate({"types": None}).types == {}
