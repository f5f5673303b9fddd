"""
Module: importer.resources

Purpose:
    Content-addressed resource store and the link/image rewriter that
    relocates files referenced from descriptions into it.

    A local reference such as ``img/diagram.png`` is resolved against the
    directory of the description that contains it, hashed, copied to
    ``<store_root>/<sha256>.png`` and replaced by
    ``<public_path>/<sha256>.png``. Identical bytes always map to the same
    entry, so a file reused by several missions is stored once.

Key Classes:
    - ResourceStore: Stores files under their content hash
    - ResourceRewriter: LinkRewriter bound to one source directory

Dependencies:
    - hashlib (std): SHA-256 content hashes

Used By:
    - importer.tracks / importer.missions: Passed to render_markdown()
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import List, Optional
from urllib.parse import unquote, urlsplit

from .diagnostics import DiagnosticsCollector
from .file_locking import atomic_write_bytes

logger = logging.getLogger(__name__)


def content_filename(data: bytes, suffix: str = "") -> str:
    """
    Store filename for ``data``: hex SHA-256 plus the original suffix.

    Example:
        >>> content_filename(b"", ".png")
        'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855.png'
    """
    return hashlib.sha256(data).hexdigest() + suffix


def is_external_reference(reference: str) -> bool:
    """
    True for references the rewriter never touches.

    Covers URLs with a scheme (``https://``, ``mailto:``, ``data:``),
    protocol-relative and root-absolute paths, and in-page anchors.
    """
    if not reference or reference.startswith(("/", "#")):
        return True
    parts = urlsplit(reference)
    # Single letters are Windows drive letters, not schemes
    return len(parts.scheme) > 1 or bool(parts.netloc)


class ResourceStore:
    """
    Directory of immutable, content-addressed files.

    Attributes:
        root: Directory holding the files (created on first write)
        public_path: URL prefix under which root is served

    Example:
        >>> store = ResourceStore(Path("static/resources"), "/static/resources")
        >>> store.url_for("ab12.png")
        '/static/resources/ab12.png'
    """

    def __init__(self, root: Path, public_path: str = "/static/resources"):
        self.root = Path(root)
        self.public_path = public_path

    def url_for(self, filename: str) -> str:
        return f"{self.public_path.rstrip('/')}/{filename}"

    def store_file(self, source: Path) -> str:
        """
        Copy ``source`` into the store.

        An existing entry with the same name is overwritten; the name is
        derived from the bytes, so the content is unchanged.

        Returns:
            The store filename.
        """
        data = source.read_bytes()
        filename = content_filename(data, source.suffix)
        self.root.mkdir(parents=True, exist_ok=True)
        atomic_write_bytes(self.root / filename, data)
        logger.debug(f"Stored {source} as {filename}")
        return filename

    def entries(self) -> List[str]:
        """Sorted store filenames (temporary files excluded)."""
        if not self.root.is_dir():
            return []
        return sorted(
            p.name for p in self.root.iterdir()
            if p.is_file() and not p.name.startswith(".")
        )

    def __contains__(self, filename: str) -> bool:
        return (self.root / filename).is_file()


class ResourceRewriter:
    """
    LinkRewriter for descriptions read from ``base_dir``.

    Calling the instance with a reference returns the store URL, or None
    to leave the reference unchanged. A missing local file is recorded as
    a ``missing_resource`` error against ``subject``.
    """

    def __init__(
        self,
        store: ResourceStore,
        base_dir: Path,
        diagnostics: DiagnosticsCollector,
        subject: str,
    ):
        self.store = store
        self.base_dir = Path(base_dir)
        self.diagnostics = diagnostics
        self.subject = subject

    def __call__(self, reference: str) -> Optional[str]:
        return self.rewrite(reference)

    def rewrite(self, reference: str) -> Optional[str]:
        if is_external_reference(reference):
            return None

        relative = unquote(urlsplit(reference).path)
        source = self.base_dir / relative
        if not relative or not source.is_file():
            self.diagnostics.add_missing_resource(self.subject, reference, source)
            return None

        filename = self.store.store_file(source)
        return self.store.url_for(filename)
