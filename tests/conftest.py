import pytest

from buildstamp.core.resolver import ENVIRONMENT_CANDIDATES


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep CI variables and the user's config out of every test."""
    for name in ENVIRONMENT_CANDIDATES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("BUILDSTAMP_CONFIG_DIR", str(tmp_path / "config"))


class StubGit:
    """Git command stand-in that records how often it was called."""

    name = "stub"

    def __init__(self, output=None, error=None):
        self.output = output
        self.error = error
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def stub_git():
    return StubGit
