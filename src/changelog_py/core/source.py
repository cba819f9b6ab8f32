"""Reading commit logs captured outside changelog-py.

changelog-py does not walk repositories itself. Commits are handed in
as text, either a JSON array or the output of something like::

    git log --format='%h%x09%an%x09%s' v1.2.0..HEAD

Prefer that three-field form. In a two-field ``hash<TAB>title`` line a
title containing a tab is indistinguishable from ``hash<TAB>author<TAB>title``
and is read as the latter.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, Any

from changelog_py.core.commits import Commit
from changelog_py.exceptions import CommitSourceError

if TYPE_CHECKING:
    from pathlib import Path

STDIN_MARKER = "-"


def _first_nonblank_line(text: Any) -> str:
    if not isinstance(text, str):
        return ""
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""


def _commit_from_json(item: Any, index: int) -> Commit:
    if not isinstance(item, dict):
        raise CommitSourceError(f"Commit #{index} is not an object")

    commit_hash = item.get("hash") or item.get("sha")
    if not commit_hash:
        raise CommitSourceError(f"Commit #{index} has no hash")

    title = item.get("title")
    if title is None:
        title = item.get("message")

    author = item.get("author")
    return Commit(
        hash=str(commit_hash),
        title=_first_nonblank_line(title),
        author=str(author) if author else None,
    )


def _commit_from_line(line: str) -> Commit:
    if "\t" in line:
        fields = line.split("\t")
        if len(fields) == 2:
            return Commit(hash=fields[0].strip(), title=fields[1].strip())
        return Commit(
            hash=fields[0].strip(),
            author=fields[1].strip() or None,
            title="\t".join(fields[2:]).strip(),
        )

    parts = line.split(maxsplit=1)
    return Commit(hash=parts[0], title=parts[1].strip() if len(parts) > 1 else "")


def parse_commit_log(text: str) -> list[Commit]:
    """Parse a commit log into commits, preserving order.

    Args:
        text: A JSON array of commit objects, or one commit per line.
            Tab-separated lines with three or more fields are always read
            as hash, author, title.

    Returns:
        Commits in the order given

    Raises:
        CommitSourceError: If JSON input is malformed
    """
    stripped = text.strip()
    if not stripped:
        return []

    if stripped.startswith("["):
        try:
            items = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise CommitSourceError(f"Invalid JSON commit log: {e}") from e
        if not isinstance(items, list):
            raise CommitSourceError("JSON commit log must be an array")
        return [_commit_from_json(item, index) for index, item in enumerate(items)]

    return [_commit_from_line(line) for line in stripped.splitlines() if line.strip()]


def read_commits(path: Path | str) -> list[Commit]:
    """Read and parse a commit log from a file, or stdin for ``-``.

    Raises:
        CommitSourceError: If the file cannot be read or parsed
    """
    if str(path) == STDIN_MARKER:
        return parse_commit_log(sys.stdin.read())

    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CommitSourceError(f"Cannot read commit log {path}: {e}") from e

    return parse_commit_log(text)
