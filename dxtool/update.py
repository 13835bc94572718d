"""Checking whether a newer release of the tool has been published."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Protocol

import yaml
from packaging.version import InvalidVersion, Version

_log = logging.getLogger(__name__)

_CHECK_INTERVAL = timedelta(hours=24)
_GITHUB_HOST = "github.com"


class RestClient(Protocol):
    """Anything that can perform a REST call and return the decoded JSON body."""

    def rest(self, hostname: str, method: str, path: str, body: Any) -> Any: ...


@dataclass
class ReleaseInfo:
    """A published release: its tag and the page that describes it."""

    version: str = ""
    url: str = ""


@dataclass
class StateEntry:
    """What was last learnt about the latest release, and when."""

    checked_for_update_at: datetime
    latest_release: ReleaseInfo = field(default_factory=ReleaseInfo)


def _parse_time(value: Any) -> datetime:
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str):
        text = value[:-1] + "+00:00" if value.endswith("Z") else value
        moment = datetime.fromisoformat(text)
    else:
        raise ValueError(f"invalid timestamp: {value!r}")
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def _read_state(state_file_path: str) -> StateEntry:
    with open(state_file_path, encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"invalid state file {state_file_path}")
    release = data.get("latest_release") or {}
    if not isinstance(release, dict):
        raise ValueError(f"invalid state file {state_file_path}")
    return StateEntry(
        checked_for_update_at=_parse_time(data.get("checked_for_update_at")),
        latest_release=ReleaseInfo(
            version=str(release.get("version") or ""),
            url=str(release.get("url") or ""),
        ),
    )


def _write_state(state_file_path: str, moment: datetime, release: ReleaseInfo) -> None:
    content = yaml.safe_dump(
        {
            "checked_for_update_at": moment.isoformat(),
            "latest_release": {"version": release.version, "url": release.url},
        },
        sort_keys=False,
    )
    try:
        fd = os.open(state_file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
    except OSError as exc:
        _log.debug("unable to write state file %s: %s", state_file_path, exc)


def check_for_update(
    client: RestClient, state_file_path: str, repo: str, current_version: str
) -> ReleaseInfo | None:
    """Return the latest release if it is newer than the current version, else None."""
    _log.debug("checking for update - current version: %s", current_version)
    latest = get_latest_release_info(client, state_file_path, repo, False)
    _log.debug("latest release is %s", latest)
    if version_greater_than(latest.version, current_version):
        return latest
    return None


def get_latest_release_info(
    client: RestClient, state_file_path: str, repo: str, force: bool
) -> ReleaseInfo:
    """Return the latest release, from the state file when it is less than a day old."""
    if not force:
        try:
            entry = _read_state(state_file_path)
        except (OSError, ValueError, yaml.YAMLError):
            entry = None
        if entry is not None:
            age = datetime.now(timezone.utc) - entry.checked_for_update_at
            if age < _CHECK_INTERVAL:
                return entry.latest_release

    data = client.rest(_GITHUB_HOST, "GET", f"repos/{repo}/releases/latest", None) or {}
    release = ReleaseInfo(
        version=str(data.get("tag_name") or ""),
        url=str(data.get("html_url") or ""),
    )
    _write_state(state_file_path, datetime.now(timezone.utc), release)
    return release


def version_greater_than(v: str, w: str) -> bool:
    """Return True if both versions parse and v is greater than w."""
    _log.debug("checking if %s is greater than %s", v, w)
    try:
        return Version(v) > Version(w)
    except InvalidVersion:
        return False