"""Repository security settings as returned by the GitHub GraphQL API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable


@dataclass
class BranchProtectionRule:
    pattern: str = ""
    requires_status_checks: bool = False
    restricts_pushes: bool = False


@dataclass
class DefaultBranchRef:
    name: str = ""
    branch_protection_rule: BranchProtectionRule | None = None


@dataclass
class RepositorySecurity:
    name_with_owner: str = ""
    url: str = ""
    has_vulnerability_alerts_enabled: bool = False
    is_security_policy_enabled: bool = False
    default_branch_ref: DefaultBranchRef = field(default_factory=DefaultBranchRef)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RepositorySecurity:
        ref = data.get("defaultBranchRef") or {}
        rule_data = ref.get("branchProtectionRule")
        rule = None
        if rule_data is not None:
            rule = BranchProtectionRule(
                pattern=rule_data.get("pattern") or "",
                requires_status_checks=bool(rule_data.get("requiresStatusChecks")),
                restricts_pushes=bool(rule_data.get("restrictsPushes")),
            )
        return cls(
            name_with_owner=data.get("nameWithOwner") or "",
            url=data.get("url") or "",
            has_vulnerability_alerts_enabled=bool(data.get("hasVulnerabilityAlertsEnabled")),
            is_security_policy_enabled=bool(data.get("isSecurityPolicyEnabled")),
            default_branch_ref=DefaultBranchRef(ref.get("name") or "", rule),
        )


def sort_by_name_and_owner(repositories: Iterable[RepositorySecurity]) -> list[RepositorySecurity]:
    """Return the repositories ordered by owner/name."""
    return sorted(repositories, key=lambda repo: repo.name_with_owner)