import os
import shutil
import subprocess
from unittest import mock

import pytest

from buildstamp.adapters.git import SubprocessGitReader, GitPythonReader, GitRevisionReader
from buildstamp.factory import GitReaderFactory
from buildstamp.utils.helpers import has_git_directory


FULL_SHA = "0123456789abcdef0123456789abcdef01234567"

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def _completed(returncode=0, stdout=""):
    return subprocess.CompletedProcess(args=["git", "rev-parse", "HEAD"], returncode=returncode, stdout=stdout)


def _init_repo(path):
    env = {
        "GIT_AUTHOR_NAME": "Build Bot",
        "GIT_AUTHOR_EMAIL": "bot@example.com",
        "GIT_COMMITTER_NAME": "Build Bot",
        "GIT_COMMITTER_EMAIL": "bot@example.com",
        "PATH": os.environ.get("PATH", ""),
        "HOME": str(path),
    }
    subprocess.run(["git", "init", "-q", str(path)], check=True, env=env)
    (path / "README.md").write_text("hello\n")
    subprocess.run(["git", "-C", str(path), "add", "README.md"], check=True, env=env)
    subprocess.run(["git", "-C", str(path), "commit", "-q", "-m", "init"], check=True, env=env)
    result = subprocess.run(["git", "-C", str(path), "rev-parse", "HEAD"],
                            check=True, env=env, capture_output=True, text=True)
    return result.stdout.strip()


def test_subprocess_reader_returns_raw_stdout(tmp_path):
    reader = SubprocessGitReader(cwd=tmp_path, timeout=5)
    with mock.patch("subprocess.run", return_value=_completed(stdout=FULL_SHA + "\n")) as run:
        assert reader.read_head() == FULL_SHA + "\n"

    args, kwargs = run.call_args
    assert args[0] == ["git", "rev-parse", "HEAD"]
    assert kwargs["cwd"] == str(tmp_path)
    assert kwargs["stderr"] == subprocess.DEVNULL
    assert kwargs["stdin"] == subprocess.DEVNULL
    assert kwargs["timeout"] == 5


def test_subprocess_reader_nonzero_exit(tmp_path):
    reader = SubprocessGitReader(cwd=tmp_path)
    with mock.patch("subprocess.run", return_value=_completed(returncode=128)):
        assert reader.read_head() is None


def test_subprocess_reader_missing_binary(tmp_path):
    reader = SubprocessGitReader(cwd=tmp_path, git_executable="definitely-not-git-xyz")
    assert reader.read_head() is None


def test_subprocess_reader_timeout(tmp_path):
    reader = SubprocessGitReader(cwd=tmp_path, timeout=0.1)
    with mock.patch("subprocess.run", side_effect=subprocess.TimeoutExpired(cmd="git", timeout=0.1)):
        assert reader.read_head() is None


def test_subprocess_reader_missing_directory(tmp_path):
    reader = SubprocessGitReader(cwd=tmp_path / "gone")
    assert reader.read_head() is None


def test_reader_is_callable(tmp_path):
    reader = SubprocessGitReader(cwd=tmp_path)
    with mock.patch("subprocess.run", return_value=_completed(stdout=FULL_SHA)):
        assert reader() == FULL_SHA


@requires_git
def test_subprocess_reader_reads_real_repository(tmp_path):
    head = _init_repo(tmp_path)
    assert SubprocessGitReader(cwd=tmp_path).read_head().strip() == head


@requires_git
def test_subprocess_reader_outside_repository(monkeypatch, tmp_path):
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    assert SubprocessGitReader(cwd=tmp_path).read_head() is None


def test_gitpython_reader_not_a_repository(tmp_path):
    pytest.importorskip("git")
    assert GitPythonReader(cwd=tmp_path).read_head() is None


def test_gitpython_reader_uses_head_commit(tmp_path):
    git = pytest.importorskip("git")
    fake_repo = mock.MagicMock()
    fake_repo.head.commit.hexsha = FULL_SHA

    with mock.patch.object(git, "Repo", return_value=fake_repo) as repo_cls:
        assert GitPythonReader(cwd=tmp_path).read_head() == FULL_SHA

    repo_cls.assert_called_once_with(str(tmp_path))
    fake_repo.close.assert_called_once()


def test_gitpython_reader_empty_repository(tmp_path):
    git = pytest.importorskip("git")
    fake_repo = mock.MagicMock()
    type(fake_repo.head).commit = mock.PropertyMock(side_effect=ValueError("Reference at 'refs/heads/main' does not exist"))

    with mock.patch.object(git, "Repo", return_value=fake_repo):
        assert GitPythonReader(cwd=tmp_path).read_head() is None


@requires_git
def test_gitpython_reader_reads_real_repository(tmp_path):
    pytest.importorskip("git")
    head = _init_repo(tmp_path)
    assert GitPythonReader(cwd=tmp_path).read_head() == head


def test_factory_creates_readers(tmp_path):
    reader = GitReaderFactory.create_reader("subprocess", cwd=tmp_path, timeout=3)
    assert isinstance(reader, SubprocessGitReader)
    assert reader.timeout == 3

    reader = GitReaderFactory.create_reader("GitPython", cwd=tmp_path, timeout=3)
    assert isinstance(reader, GitPythonReader)
    assert isinstance(reader, GitRevisionReader)


def test_factory_defaults_to_subprocess():
    assert isinstance(GitReaderFactory.create_reader(), SubprocessGitReader)
    assert isinstance(GitReaderFactory.create_reader(None), SubprocessGitReader)


def test_factory_rejects_unknown_backend():
    with pytest.raises(ValueError, match="Unsupported git backend"):
        GitReaderFactory.create_reader("svn")


def test_has_git_directory(tmp_path):
    assert not has_git_directory(tmp_path)

    (tmp_path / ".git").mkdir()
    assert has_git_directory(tmp_path)


def test_has_git_directory_accepts_worktree_file(tmp_path):
    (tmp_path / ".git").write_text("gitdir: /elsewhere/.git/worktrees/feature\n")
    assert has_git_directory(tmp_path)
