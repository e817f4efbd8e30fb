"""
Summary: Exercise filesystem probing of individual path entries.
Why: Verify resolution failures never raise and listing failures stay distinct from empty.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from pathhelper.features.pathlist.domain.errors import ProbeError
from pathhelper.features.pathlist.domain.models import EntryCategory
from pathhelper.features.pathlist.usecases.probe import (
    canonical_form,
    classify,
    count_regular_files,
    exists_as_directory,
    is_empty,
    resolve,
)

pytestmark = pytest.mark.skipif(
    os.name == "nt", reason="symlink creation needs extra privileges on Windows"
)


@pytest.fixture
def populated_dir(base_dir: Path) -> Path:
    """Three regular files, one broken symlink and one subdirectory."""

    directory = base_dir / "populated"
    directory.mkdir()
    for name in ("a", "b", "c"):
        _ = (directory / name).write_text(name)
    (directory / "broken").symlink_to(base_dir / "does-not-exist")
    (directory / "nested").mkdir()
    return directory


def test_count_regular_files_skips_broken_links(populated_dir: Path) -> None:
    """Broken symlinks and directories are not counted."""

    assert count_regular_files(str(populated_dir)) == 3


def test_count_follows_symlinks_to_files(base_dir: Path) -> None:
    target = base_dir / "real"
    _ = target.write_text("x")
    directory = base_dir / "links"
    directory.mkdir()
    (directory / "alias").symlink_to(target)

    assert count_regular_files(str(directory)) == 1


def test_empty_directory(base_dir: Path) -> None:
    empty = base_dir / "empty"
    empty.mkdir()

    assert count_regular_files(str(empty)) == 0
    assert is_empty(str(empty)) is True


def test_missing_directory_raises_probe_error(base_dir: Path) -> None:
    missing = base_dir / "missing"

    with pytest.raises(ProbeError) as excinfo:
        _ = count_regular_files(str(missing))
    assert excinfo.value.entry == str(missing)

    with pytest.raises(ProbeError):
        _ = is_empty(str(missing))


def test_file_entry_raises_probe_error(base_dir: Path) -> None:
    path = base_dir / "plain.txt"
    _ = path.write_text("x")

    with pytest.raises(ProbeError):
        _ = count_regular_files(str(path))


def test_count_executables_only(base_dir: Path) -> None:
    directory = base_dir / "exe"
    directory.mkdir()
    runnable = directory / "run"
    _ = runnable.write_text("#!/bin/sh\n")
    runnable.chmod(0o755)
    data = directory / "data"
    _ = data.write_text("x")
    data.chmod(0o644)

    assert count_regular_files(str(directory)) == 2
    assert count_regular_files(str(directory), executables_only=True) == 1


def test_resolve_failures_return_none(base_dir: Path) -> None:
    loop = base_dir / "loop"
    loop.symlink_to(loop)

    assert resolve(str(base_dir / "missing")) is None
    assert resolve(str(loop)) is None
    assert resolve("bad\0entry") is None


def test_resolve_follows_symlinks(base_dir: Path) -> None:
    real = base_dir / "real"
    real.mkdir()
    link = base_dir / "link"
    link.symlink_to(real, target_is_directory=True)

    assert resolve(str(link)) == real
    assert canonical_form(str(link)) == str(real)
    assert canonical_form(str(base_dir / "missing")) == str(base_dir / "missing")


def test_canonical_form_uses_given_resolution() -> None:
    aliases = {"/bin": Path("/usr/bin")}

    assert canonical_form("/bin", aliases.get) == "/usr/bin"
    assert canonical_form("/opt/missing", aliases.get) == "/opt/missing"


def test_empty_entry_means_current_directory(
    base_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(base_dir)

    assert resolve("") == base_dir
    assert exists_as_directory("")


def test_exists_as_directory(base_dir: Path) -> None:
    file_path = base_dir / "file"
    _ = file_path.write_text("x")

    assert exists_as_directory(str(base_dir))
    assert not exists_as_directory(str(file_path))
    assert not exists_as_directory(str(base_dir / "missing"))


def test_classify_categories(base_dir: Path) -> None:
    real = base_dir / "real"
    real.mkdir()
    link = base_dir / "link"
    link.symlink_to(real, target_is_directory=True)

    normal = classify(str(real))
    assert normal.category is EntryCategory.NORMAL

    aliased = classify(str(link))
    assert aliased.category is EntryCategory.RESOLVES_ELSEWHERE
    assert aliased.canonical == str(real)

    missing = classify(str(base_dir / "missing"))
    assert missing.category is EntryCategory.INACCESSIBLE
    assert missing.canonical is None
