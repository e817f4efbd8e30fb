"""Shared pytest fixtures for pathhelper tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from pathhelper.features.pathlist.domain.codec import PathListCodec


@dataclass
class StubResolver:
    """In-memory resolver: ``aliases`` maps entries to canonical paths."""

    aliases: dict[str, str] = field(default_factory=dict)
    directories: set[str] = field(default_factory=set)

    def resolve(self, entry: str) -> Path | None:
        target = self.aliases.get(entry)
        if target is None and entry in self.directories:
            target = entry
        return None if target is None else Path(target)

    def is_directory(self, entry: str) -> bool:
        return entry in self.directories or self.aliases.get(entry) in self.directories


StubResolverFactory = Callable[..., StubResolver]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration discovery at an empty location and reset the cache."""

    import pathhelper.config.config as config_module

    config_file = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("PATHHELPER_CONFIG", str(config_file))
    config_module.Config.reset()
    try:
        yield config_file
    finally:
        config_module.Config.reset()


@pytest.fixture
def posix_codec() -> PathListCodec:
    """Colon-separated codec without quoting."""

    return PathListCodec(separator=":", quoting=False)


@pytest.fixture
def windows_codec() -> PathListCodec:
    """Semicolon-separated codec with double-quote handling."""

    return PathListCodec(separator=";", quoting=True)


@pytest.fixture
def stub_resolver() -> StubResolverFactory:
    """Build resolvers from alias maps and directory sets without touching disk."""

    def _build(
        aliases: Mapping[str, str] | None = None,
        directories: Iterable[str] = (),
    ) -> StubResolver:
        return StubResolver(aliases=dict(aliases or {}), directories=set(directories))

    return _build


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """Resolved scratch directory so canonical paths compare equal on every OS."""

    root = tmp_path.resolve() / "tree"
    root.mkdir()
    return root


@pytest.fixture
def bin_dirs(base_dir: Path) -> tuple[Path, Path]:
    """Two directories, each holding one regular file."""

    first = base_dir / "bin"
    second = base_dir / "sbin"
    for directory in (first, second):
        directory.mkdir()
        _ = (directory / "tool").write_text("#!/bin/sh\n")
    return first, second
