import pytest

from repo_exporter.domain.entities import EntryKind, TreeEntry
from repo_exporter.services.path_filter import is_excluded, select_eligible


@pytest.mark.parametrize(
    "path",
    [
        "target/debug/app",
        "node_modules/pkg/x.js",
        "dist/bundle.js",
        "build/out.o",
        ".git/config",
        "app.exe",
        "lib/native.so",
        "lib/native.dylib",
        "win/native.dll",
        "firmware.bin",
        "assets/.DS_Store",
    ],
)
def test_excluded_paths(path):
    assert is_excluded(path) is True


@pytest.mark.parametrize(
    "path",
    [
        "src/main.rs",
        "",
        "README.md",
        "src/target/lib.rs",      # prefix rules only apply at the root
        ".DS_Store",              # fragment rule needs a leading slash
        ".gitignore",
        "binary.py",
    ],
)
def test_eligible_paths(path):
    assert is_excluded(path) is False


def test_is_excluded_is_deterministic():
    for path in ("target/x", "src/main.rs"):
        assert is_excluded(path) == is_excluded(path)


def test_select_eligible_keeps_blobs_in_order():
    entries = [
        TreeEntry("src", EntryKind.TREE),
        TreeEntry("src/b.rs", EntryKind.BLOB),
        TreeEntry("target/a.rs", EntryKind.BLOB),
        TreeEntry("vendor/sub", EntryKind.COMMIT),
        TreeEntry("Cargo.toml", EntryKind.BLOB),
    ]
    assert [e.path for e in select_eligible(entries)] == ["src/b.rs", "Cargo.toml"]
