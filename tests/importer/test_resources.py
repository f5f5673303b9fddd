"""
Tests for importer.resources

Test Coverage:
- content_filename(): Hash plus suffix
- is_external_reference(): Remote/absolute detection
- ResourceStore: Store creation and idempotent writes
- ResourceRewriter: Rewrite, no-rewrite and missing-file paths
"""

import hashlib
import pytest

from curriculum_importer.importer.resources import (
    ResourceRewriter,
    content_filename,
    is_external_reference,
)


@pytest.fixture
def source_dir(tmp_path):
    source = tmp_path / "mission"
    (source / "img").mkdir(parents=True)
    (source / "img" / "diagram.png").write_bytes(b"diagram-bytes")
    (source / "data").write_bytes(b"no suffix")
    return source


@pytest.fixture
def rewriter(store, source_dir, diagnostics):
    return ResourceRewriter(store, source_dir, diagnostics, subject="track/mission")


def test_content_filename_is_sha256_plus_suffix():
    expected = hashlib.sha256(b"abc").hexdigest() + ".gif"
    assert content_filename(b"abc", ".gif") == expected


@pytest.mark.parametrize("reference", [
    "https://example.com/x.png",
    "http://example.com/x.png",
    "//cdn.example.com/x.png",
    "/static/resources/abc.png",
    "#section",
    "mailto:team@example.com",
    "data:image/png;base64,AAAA",
])
def test_is_external_reference_when_remote_or_absolute_then_true(reference):
    assert is_external_reference(reference)


@pytest.mark.parametrize("reference", ["img/a.png", "../logo.png", "notes.txt"])
def test_is_external_reference_when_relative_then_false(reference):
    assert not is_external_reference(reference)


def test_rewrite_when_absolute_url_then_no_rewrite(rewriter, store, diagnostics):
    assert rewriter("https://example.com/x.png") is None
    assert store.entries() == []
    assert diagnostics.issue_count == 0


def test_rewrite_when_local_file_then_copied_into_store(rewriter, store):
    url = rewriter("img/diagram.png")

    filename = hashlib.sha256(b"diagram-bytes").hexdigest() + ".png"
    assert url == f"/static/resources/{filename}"
    assert store.root.is_dir()
    assert (store.root / filename).read_bytes() == b"diagram-bytes"


def test_rewrite_when_no_extension_then_bare_hash(rewriter, store):
    url = rewriter("data")

    assert url == "/static/resources/" + hashlib.sha256(b"no suffix").hexdigest()


def test_rewrite_when_missing_file_then_no_rewrite_and_error(rewriter, store, diagnostics):
    assert rewriter("img/missing.png") is None

    issues = diagnostics.of_type("missing_resource")
    assert len(issues) == 1
    assert issues[0].subject == "track/mission"
    assert "img/missing.png" in issues[0].message
    assert store.entries() == []


def test_rewrite_when_directory_then_missing_resource(rewriter, diagnostics):
    assert rewriter("img") is None
    assert diagnostics.has_errors


def test_rewrite_ignores_query_and_fragment(rewriter):
    assert rewriter("img/diagram.png?v=2#top") == rewriter("img/diagram.png")


def test_rewrite_decodes_percent_escapes(tmp_path, store, diagnostics):
    source = tmp_path / "m"
    source.mkdir()
    (source / "my file.txt").write_bytes(b"spaced")
    rewriter = ResourceRewriter(store, source, diagnostics, subject="m")

    assert rewriter("my%20file.txt") is not None
    assert diagnostics.issue_count == 0


def test_rewrite_same_file_twice_stores_one_copy(tmp_path, store, diagnostics, source_dir):
    other_dir = tmp_path / "other_mission"
    other_dir.mkdir()
    (other_dir / "copy.png").write_bytes(b"diagram-bytes")

    first = ResourceRewriter(store, source_dir, diagnostics, "a")("img/diagram.png")
    again = ResourceRewriter(store, source_dir, diagnostics, "a")("img/diagram.png")
    duplicate = ResourceRewriter(store, other_dir, diagnostics, "b")("copy.png")

    assert first == again == duplicate
    assert len(store.entries()) == 1


def test_store_when_existing_entry_then_overwritten_with_same_bytes(store, source_dir):
    filename = store.store_file(source_dir / "img" / "diagram.png")
    (store.root / filename).write_bytes(b"corrupted")

    store.store_file(source_dir / "img" / "diagram.png")

    assert (store.root / filename).read_bytes() == b"diagram-bytes"
    assert filename in store
