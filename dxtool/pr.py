"""Pull request data as returned by the GitHub GraphQL API."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from dxtool.colors import color_error, color_info, color_warning

SUCCESS = "SUCCESS"
PENDING = "PENDING"
FAILURE = "FAILURE"
ERROR = "ERROR"
CONFLICTING = "CONFLICTING"
UNKNOWN = "UNKNOWN"

_IGNORED_CONTEXTS = ("tide", "keeper", "Merge Status")
_TITLE_LIMIT = 75
_PULL_PATTERN = re.compile(r"pull/[0-9]+")


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _trim(title: str) -> str:
    if len(title) > _TITLE_LIMIT:
        return f"{title[:_TITLE_LIMIT]}..."
    return title


@dataclass
class Author:
    login: str = ""


@dataclass
class Label:
    name: str = ""


@dataclass
class Repository:
    name_with_owner: str = ""


@dataclass
class CheckContext:
    """A status context or a check run attached to a commit."""

    state: str = ""
    description: str = ""
    context: str = ""
    conclusion: str = ""
    name: str = ""
    title: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CheckContext:
        return cls(
            state=data.get("state") or "",
            description=data.get("description") or "",
            context=data.get("context") or "",
            conclusion=data.get("conclusion") or "",
            name=data.get("name") or "",
            title=data.get("title") or "",
        )

    @property
    def _is_reported_status(self) -> bool:
        return bool(self.context) and self.context not in _IGNORED_CONTEXTS


@dataclass
class StatusCheckRollup:
    state: str = ""
    contexts: list[CheckContext] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> StatusCheckRollup:
        data = data or {}
        nodes = (data.get("contexts") or {}).get("nodes") or []
        return cls(
            state=data.get("state") or "",
            contexts=[CheckContext.from_dict(node) for node in nodes],
        )


@dataclass
class Commit:
    status_check_rollup: StatusCheckRollup = field(default_factory=StatusCheckRollup)


def _labels_from(data: dict[str, Any]) -> list[Label]:
    nodes = (data.get("labels") or {}).get("nodes") or []
    return [Label(node.get("name") or "") for node in nodes]


@dataclass
class PullRequest:
    number: int = 0
    title: str = ""
    url: str = ""
    mergeable: str = ""
    created_at: datetime | None = None
    author: Author = field(default_factory=Author)
    labels: list[Label] = field(default_factory=list)
    commits: list[Commit] = field(default_factory=list)
    closed: bool = False
    repository: Repository = field(default_factory=Repository)
    comments: int = 0
    review_decision: str = ""
    required_status_check_contexts: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PullRequest:
        commit_nodes = (data.get("commits") or {}).get("nodes") or []
        commits = [
            Commit(StatusCheckRollup.from_dict((node.get("commit") or {}).get("statusCheckRollup")))
            for node in commit_nodes
        ]
        rule = ((data.get("baseRef") or {}).get("branchProtectionRule")) or {}
        return cls(
            number=data.get("number") or 0,
            title=data.get("title") or "",
            url=data.get("url") or "",
            mergeable=data.get("mergeable") or "",
            created_at=_parse_timestamp(data.get("createdAt")),
            author=Author((data.get("author") or {}).get("login") or ""),
            labels=_labels_from(data),
            commits=commits,
            closed=bool(data.get("closed")),
            repository=Repository((data.get("repository") or {}).get("nameWithOwner") or ""),
            comments=(data.get("comments") or {}).get("totalCount") or 0,
            review_decision=data.get("reviewDecision") or "",
            required_status_check_contexts=list(rule.get("requiredStatusCheckContexts") or []),
        )

    @property
    def _rollup(self) -> StatusCheckRollup:
        return self.commits[0].status_check_rollup

    def display(self) -> bool:
        """Return True if the pull request should be shown."""
        return not self.closed

    def labels_string(self) -> str:
        return ", ".join(label.name for label in self.labels)

    def _context_states(self) -> list[str]:
        states = []
        for ctx in self._rollup.contexts:
            if ctx._is_reported_status:
                states.append(ctx.state)
            if ctx.name:
                states.append(ctx.conclusion)
        return states

    def contexts_string(self) -> str:
        """Summarise the commit checks as a single state."""
        states = list(dict.fromkeys(s for s in self._context_states() if s))
        if not states:
            return self._rollup.state or PENDING
        for state in (ERROR, FAILURE, PENDING):
            if state in states:
                return state
        return SUCCESS

    def failed_contexts(self) -> list[CheckContext]:
        failed = []
        for ctx in self._rollup.contexts:
            if ctx._is_reported_status and ctx.state == FAILURE:
                failed.append(ctx)
            if ctx.name and ctx.conclusion in (FAILURE, ERROR):
                failed.append(ctx)
        return failed

    def colored_title(self) -> str:
        state = self.contexts_string()
        if state == SUCCESS:
            return color_info(self.trimmed_title())
        if state == PENDING:
            return color_warning(self.trimmed_title())
        return color_error(self.trimmed_title())

    def colored_review_decision(self) -> str:
        if self.review_decision == "APPROVED":
            return color_info("Approved")
        if self.review_decision == "REVIEW_REQUIRED":
            return color_warning("Required")
        if self.review_decision == "CHANGES_REQUESTED":
            return color_error("Changes Requested")
        return self.review_decision

    def trimmed_title(self) -> str:
        return _trim(self.title)

    def mergeable_string(self) -> str:
        if self.mergeable == CONFLICTING:
            return "* Conflict"
        if self.mergeable == UNKNOWN:
            return "* ?"
        return ""

    def pulls_string(self) -> str:
        """Return the URL of the repository's pull request list."""
        return _PULL_PATTERN.sub("pulls", self.url)

    def has_label(self, name: str) -> bool:
        return any(label.name == name for label in self.labels)

    def has_context(self, name: str) -> bool:
        return any(name in (ctx.context, ctx.name) for ctx in self._rollup.contexts)


def pulls_sort_key(pull_request: PullRequest) -> tuple[str, int]:
    """Sort key ordering by pull list URL, then by number."""
    return pull_request.pulls_string(), pull_request.number