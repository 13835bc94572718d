"""Reading and changing the Kubernetes client configuration file."""

from __future__ import annotations

import copy
import logging
import os
from dataclasses import dataclass, field
from typing import Any

import yaml

_log = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "default"
POD_NAMESPACE_FILE = "/var/run/secrets/kubernetes.io/serviceaccount/namespace"

_SECTION_KEYS = ("clusters", "contexts", "current-context")


@dataclass
class KubeCluster:
    """A cluster entry; keys other than the server are kept as they are."""

    server: str = ""
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class KubeContext:
    """A context entry binding a cluster, a user and a namespace."""

    cluster: str = ""
    user: str = ""
    namespace: str = ""
    extra: dict[str, Any] = field(default_factory=dict)


def _named_entries(items: Any, key: str) -> dict[str, dict[str, Any]]:
    entries: dict[str, dict[str, Any]] = {}
    for item in items or []:
        if not isinstance(item, dict):
            raise ValueError(f"invalid {key} entry: {item!r}")
        entries[str(item.get("name") or "")] = dict(item.get(key) or {})
    return entries


@dataclass
class KubeConfig:
    """A kubeconfig document: clusters, contexts, the current context and the rest."""

    current_context: str = ""
    clusters: dict[str, KubeCluster] = field(default_factory=dict)
    contexts: dict[str, KubeContext] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> KubeConfig:
        data = data or {}
        clusters = {}
        for name, body in _named_entries(data.get("clusters"), "cluster").items():
            server = str(body.pop("server", "") or "")
            clusters[name] = KubeCluster(server=server, extra=body)
        contexts = {}
        for name, body in _named_entries(data.get("contexts"), "context").items():
            contexts[name] = KubeContext(
                cluster=str(body.pop("cluster", "") or ""),
                user=str(body.pop("user", "") or ""),
                namespace=str(body.pop("namespace", "") or ""),
                extra=body,
            )
        extra = {k: v for k, v in data.items() if k not in _SECTION_KEYS}
        return cls(
            current_context=str(data.get("current-context") or ""),
            clusters=clusters,
            contexts=contexts,
            extra=extra,
        )

    def to_dict(self) -> dict[str, Any]:
        rest = dict(self.extra)
        result: dict[str, Any] = {
            "apiVersion": rest.pop("apiVersion", "v1"),
            "kind": rest.pop("kind", "Config"),
        }
        clusters = []
        for name, cluster in self.clusters.items():
            body: dict[str, Any] = {}
            if cluster.server:
                body["server"] = cluster.server
            body.update(cluster.extra)
            clusters.append({"name": name, "cluster": body})
        contexts = []
        for name, ctx in self.contexts.items():
            body = {}
            for key, value in (("cluster", ctx.cluster), ("user", ctx.user), ("namespace", ctx.namespace)):
                if value:
                    body[key] = value
            body.update(ctx.extra)
            contexts.append({"name": name, "context": body})
        result["clusters"] = clusters
        result["contexts"] = contexts
        result["current-context"] = self.current_context
        result.update(rest)
        return result


def default_kubeconfig_path() -> str:
    """Return the kubeconfig file named by KUBECONFIG, or ~/.kube/config."""
    for entry in os.environ.get("KUBECONFIG", "").split(os.pathsep):
        if entry:
            return entry
    return os.path.join(os.path.expanduser("~"), ".kube", "config")


def _read_config(path: str) -> KubeConfig:
    with open(path, encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"{path} does not hold a kubeconfig mapping")
    return KubeConfig.from_dict(data)


def _write_config(path: str, config: KubeConfig) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        yaml.safe_dump(config.to_dict(), handle, sort_keys=False)


def load_config() -> tuple[KubeConfig, str]:
    """Load the default kubeconfig; a missing file gives an empty configuration."""
    path = default_kubeconfig_path()
    if not os.path.exists(path):
        return KubeConfig(), path
    try:
        return _read_config(path), path
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ValueError(f"could not load the kube config file {path} due to {exc}") from exc


def current_context(config: KubeConfig | None) -> KubeContext | None:
    """Return the current context, or None."""
    if config is not None and config.current_context:
        return config.contexts.get(config.current_context)
    return None


def current_namespace(config: KubeConfig | None) -> str:
    """Return the namespace of the current context, the pod's namespace, or the default."""
    ctx = current_context(config)
    if ctx is not None and ctx.namespace:
        return ctx.namespace
    try:
        with open(POD_NAMESPACE_FILE, encoding="utf-8") as handle:
            namespace = handle.read()
    except OSError:
        namespace = ""
    return namespace or DEFAULT_NAMESPACE


def current_cluster(config: KubeConfig | None) -> tuple[str, KubeCluster | None]:
    """Return the name and entry of the current context's cluster."""
    if config is not None:
        ctx = current_context(config)
        if ctx is not None:
            return ctx.cluster, config.clusters.get(ctx.cluster)
    return "", None


def current_server(config: KubeConfig | None) -> str:
    """Return the server of the current context."""
    return server(config, current_context(config))


def server(config: KubeConfig | None, context: KubeContext | None) -> str:
    """Return the server of the given context's cluster, or an empty string."""
    if context is not None and config is not None:
        cluster = config.clusters.get(context.cluster)
        if cluster is not None:
            return cluster.server
    return ""


class Kuber:
    """Loads and persists a kubeconfig file."""

    def __init__(self, path: str | None = None):
        self.path = path or default_kubeconfig_path()

    def set_kube_context(self, context: str, config: KubeConfig) -> KubeConfig:
        """Make the named context current and persist the change."""
        if context not in config.contexts:
            raise ValueError(f"could not find Kubernetes context {context}")
        new_config = copy.deepcopy(config)
        new_config.current_context = context
        _write_config(self.path, new_config)
        return new_config

    def set_kube_namespace(self, namespace: str, config: KubeConfig) -> KubeConfig:
        """Set the namespace of the current context and persist the change."""
        if self.get_current_context(config) is None:
            raise ValueError("could not find Kubernetes context")
        new_config = copy.deepcopy(config)
        ctx = self.get_current_context(new_config)
        if ctx.namespace == namespace:
            return config
        ctx.namespace = namespace
        _write_config(self.path, new_config)
        return new_config

    def set_kube_config(self, config: KubeConfig) -> KubeConfig:
        """Persist the configuration as given."""
        new_config = copy.deepcopy(config)
        _log.debug("persisting %s", new_config)
        _write_config(self.path, new_config)
        return new_config

    def load_api_config(self) -> KubeConfig:
        """Load this instance's kubeconfig; a missing file gives an empty configuration."""
        if not os.path.exists(self.path):
            return KubeConfig()
        return _read_config(self.path)

    def load_api_config_from_path(self, path: str) -> KubeConfig:
        """Load a kubeconfig from the given file, which must exist."""
        return _read_config(path)

    def get_current_context(self, config: KubeConfig | None) -> KubeContext | None:
        return current_context(config)

    def get_current_namespace(self, config: KubeConfig | None) -> str:
        ctx = self.get_current_context(config)
        if ctx is not None and ctx.namespace:
            return ctx.namespace
        return DEFAULT_NAMESPACE