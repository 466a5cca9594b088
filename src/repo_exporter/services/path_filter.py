"""Path filtering — decide which repository files are eligible for export."""

from __future__ import annotations

from collections.abc import Iterable

from repo_exporter.domain.entities import TreeEntry

EXCLUDED_PREFIXES: tuple[str, ...] = (
    "target/",          # Rust / Java
    "node_modules/",
    "dist/",
    "build/",
    ".git/",
)

EXCLUDED_FRAGMENTS: tuple[str, ...] = ("/.DS_Store",)

EXCLUDED_SUFFIXES: tuple[str, ...] = (
    ".dll", ".so", ".dylib", ".exe", ".bin",
)


def is_excluded(path: str) -> bool:
    """Return *True* if *path* must not be exported.

    Matching is case-sensitive and applies to the path exactly as the tree
    listing reports it.
    """
    if path.startswith(EXCLUDED_PREFIXES):
        return True
    if any(fragment in path for fragment in EXCLUDED_FRAGMENTS):
        return True
    return path.endswith(EXCLUDED_SUFFIXES)


def select_eligible(entries: Iterable[TreeEntry]) -> list[TreeEntry]:
    """Keep non-excluded blobs, preserving listing order."""
    return [e for e in entries if e.is_blob and not is_excluded(e.path)]
