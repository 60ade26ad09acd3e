"""
Commit metadata for new benchmark runs.

Commit details come either from explicit values (CI passes them in) or
from the git checkout the benchmarks ran in.
"""
import shutil
import subprocess
from pathlib import Path
from typing import Optional

from benchtrack.models.benchmark_data import Author, Commit
from benchtrack.util.log_config import setup_logger

logger = setup_logger(__name__)

# One field per line; the subject goes last since it is free text
_GIT_FORMAT = "%H%n%an%n%ae%n%cn%n%ce%n%cI%n%s"


def commit_url(repo_url: str, commit_id: str) -> str:
    return f"{repo_url.rstrip('/')}/commit/{commit_id}"


def username_from_email(email: str) -> str:
    """GitHub noreply addresses carry the username: 1234+octocat@users.noreply.github.com"""
    local = email.split("@", 1)[0]
    return local.split("+", 1)[-1]


def build_commit(
    commit_id: str,
    message: str,
    timestamp: str,
    repo_url: str,
    author_name: str,
    author_username: Optional[str] = None,
    committer_name: Optional[str] = None,
    committer_username: Optional[str] = None,
) -> Commit:
    committer_name = committer_name or author_name
    return Commit(
        author=Author(name=author_name, username=author_username or author_name),
        committer=Author(name=committer_name, username=committer_username or committer_name),
        id=commit_id,
        message=message,
        timestamp=timestamp,
        url=commit_url(repo_url, commit_id),
    )


def read_git_commit(repo_url: str, revision: str = "HEAD", cwd: Optional[Path] = None) -> Commit:
    """
    Read commit metadata with `git log`.

    Args:
        repo_url: Repository URL used to build the commit link
        revision: Revision to describe
        cwd: Directory inside the git checkout

    Raises:
        RuntimeError: If git is unavailable or the command fails
    """
    git = shutil.which("git")
    if not git:
        raise RuntimeError("Executable 'git' not found. Pass commit details explicitly or install git.")

    cmd = [git, "log", "-1", f"--format={_GIT_FORMAT}", revision]
    try:
        result = subprocess.run(cmd, check=True, text=True, capture_output=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        logger.error(f"`git log` failed with return code {e.returncode}\nStderr: {e.stderr}")
        raise RuntimeError(f"Could not read commit {revision}: {e.stderr.strip()}") from e

    fields = result.stdout.rstrip("\n").split("\n", 6)
    if len(fields) < 7:
        raise RuntimeError(f"Unexpected `git log` output for {revision}: {result.stdout!r}")

    commit_id, author_name, author_email, committer_name, committer_email, timestamp, message = fields
    logger.debug(f"Read commit {commit_id[:8]} from git")
    return build_commit(
        commit_id=commit_id,
        message=message,
        timestamp=timestamp,
        repo_url=repo_url,
        author_name=author_name,
        author_username=username_from_email(author_email),
        committer_name=committer_name,
        committer_username=username_from_email(committer_email),
    )
