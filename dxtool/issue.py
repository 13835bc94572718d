"""Issue data as returned by the GitHub GraphQL API."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from dxtool.colors import color_info
from dxtool.pr import Author, Label, Repository, _labels_from, _parse_timestamp, _trim

_ISSUE_PATTERN = re.compile(r"issues/[0-9]+")


@dataclass
class Issue:
    number: int = 0
    title: str = ""
    url: str = ""
    created_at: datetime | None = None
    author: Author = field(default_factory=Author)
    labels: list[Label] = field(default_factory=list)
    closed: bool = False
    repository: Repository = field(default_factory=Repository)
    comments: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Issue:
        return cls(
            number=data.get("number") or 0,
            title=data.get("title") or "",
            url=data.get("url") or "",
            created_at=_parse_timestamp(data.get("createdAt")),
            author=Author((data.get("author") or {}).get("login") or ""),
            labels=_labels_from(data),
            closed=bool(data.get("closed")),
            repository=Repository((data.get("repository") or {}).get("nameWithOwner") or ""),
            comments=(data.get("comments") or {}).get("totalCount") or 0,
        )

    def display(self) -> bool:
        """Return True if the issue should be shown."""
        return not self.closed

    def labels_string(self) -> str:
        return ", ".join(label.name for label in self.labels)

    def colored_title(self) -> str:
        return color_info(self.trimmed_title())

    def trimmed_title(self) -> str:
        return _trim(self.title)

    def issue_string(self) -> str:
        """Return the URL of the repository's issue list."""
        return _ISSUE_PATTERN.sub("issues", self.url)

    def has_label(self, name: str) -> bool:
        return any(label.name == name for label in self.labels)


def issues_sort_key(issue: Issue) -> tuple[str, int]:
    """Sort key ordering by issue list URL, then by number."""
    return issue.issue_string(), issue.number