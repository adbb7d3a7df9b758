import os
from pathlib import Path

import pytest

from rubies.types import RubyInfo

RUBY_INFO = RubyInfo(engine="ruby", version="3.2.0", gem_path="/opt/ruby/lib")
STUB_OUTPUT = "ruby\n3.2.0\n/opt/ruby/lib\n"


class StubResolver:
    """Hands out a canned RubyInfo and records every lookup"""

    def __init__(self, info: RubyInfo = RUBY_INFO, error: Exception | None = None):
        self.info = info
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def from_ruby_bin_path(self, bin_dir: str) -> RubyInfo:
        self.calls.append(("bin_path", bin_dir))
        if self.error:
            raise self.error
        return self.info

    async def from_search_path(self, search_path: str) -> RubyInfo:
        self.calls.append(("search_path", search_path))
        if self.error:
            raise self.error
        return self.info


@pytest.fixture
def ruby_info() -> RubyInfo:
    return RUBY_INFO


@pytest.fixture
def resolver() -> StubResolver:
    return StubResolver()


@pytest.fixture
def stub_resolver_class():
    return StubResolver


@pytest.fixture
def rubies_root(tmp_path: Path) -> Path:
    root = tmp_path / "rubies"
    root.mkdir()
    return root


@pytest.fixture
def make_ruby(rubies_root: Path):
    """Install a fake ``ruby`` shell script under the rubies root"""

    def _make(name: str = "3.2.0", output: str = STUB_OUTPUT, exit_code: int = 0) -> Path:
        bin_dir = rubies_root / name / "bin"
        bin_dir.mkdir(parents=True)
        ruby = bin_dir / "ruby"
        ruby.write_text(f"#!/bin/sh\nprintf '%s' '{output}'\nexit {exit_code}\n")
        os.chmod(ruby, 0o755)
        return bin_dir

    return _make
