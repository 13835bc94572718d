import pytest

from dxtool import kube
from dxtool.kube import (
    KubeConfig,
    Kuber,
    current_cluster,
    current_context,
    current_namespace,
    current_server,
    load_config,
    server,
)

SAMPLE = {
    "apiVersion": "v1",
    "kind": "Config",
    "clusters": [
        {"name": "alpha", "cluster": {"server": "https://alpha.example.com", "insecure-skip-tls-verify": True}},
        {"name": "beta", "cluster": {"server": "https://beta.example.com"}},
    ],
    "contexts": [
        {"name": "alpha-ctx", "context": {"cluster": "alpha", "user": "alice", "namespace": "team-a"}},
        {"name": "beta-ctx", "context": {"cluster": "beta", "user": "bob"}},
    ],
    "current-context": "alpha-ctx",
    "users": [{"name": "alice", "user": {"token": "token"}}],
}


@pytest.fixture
def config():
    return KubeConfig.from_dict(SAMPLE)


@pytest.fixture
def no_pod_file(tmp_path, monkeypatch):
    monkeypatch.setattr(kube, "POD_NAMESPACE_FILE", str(tmp_path / "absent"))


def test_round_trip(config):
    assert KubeConfig.from_dict(config.to_dict()) == config
    assert config.to_dict()["users"] == SAMPLE["users"]


def test_current_helpers(config):
    assert current_context(config).cluster == "alpha"
    name, cluster = current_cluster(config)
    assert name == "alpha"
    assert cluster.server == "https://alpha.example.com"
    assert current_server(config) == "https://alpha.example.com"
    assert server(config, config.contexts["beta-ctx"]) == "https://beta.example.com"


def test_helpers_without_config():
    assert current_context(None) is None
    assert current_cluster(None) == ("", None)
    assert current_server(None) == ""


def test_current_namespace_from_context(config, no_pod_file):
    assert current_namespace(config) == "team-a"


def test_current_namespace_default(config, no_pod_file):
    config.current_context = "beta-ctx"
    assert current_namespace(config) == kube.DEFAULT_NAMESPACE


def test_current_namespace_from_pod_file(config, tmp_path, monkeypatch):
    pod_file = tmp_path / "namespace"
    pod_file.write_text("pod-ns", encoding="utf-8")
    monkeypatch.setattr(kube, "POD_NAMESPACE_FILE", str(pod_file))
    config.current_context = "beta-ctx"
    assert current_namespace(config) == "pod-ns"


def test_set_kube_context_persists(config, tmp_path):
    path = tmp_path / "kube" / "config"
    kuber = Kuber(str(path))
    updated = kuber.set_kube_context("beta-ctx", config)
    assert updated.current_context == "beta-ctx"
    assert config.current_context == "alpha-ctx"
    assert kuber.load_api_config() == updated


def test_set_kube_context_unknown(config, tmp_path):
    with pytest.raises(ValueError, match="could not find Kubernetes context missing"):
        Kuber(str(tmp_path / "config")).set_kube_context("missing", config)


def test_set_kube_namespace(config, tmp_path):
    kuber = Kuber(str(tmp_path / "config"))
    updated = kuber.set_kube_namespace("team-b", config)
    assert kuber.get_current_namespace(updated) == "team-b"
    assert kuber.get_current_namespace(kuber.load_api_config()) == "team-b"


def test_set_kube_namespace_unchanged_skips_write(config, tmp_path):
    path = tmp_path / "config"
    result = Kuber(str(path)).set_kube_namespace("team-a", config)
    assert result is config
    assert not path.exists()


def test_set_kube_namespace_without_context(tmp_path):
    with pytest.raises(ValueError):
        Kuber(str(tmp_path / "config")).set_kube_namespace("x", KubeConfig())


def test_set_kube_config_and_load_from_path(config, tmp_path):
    path = tmp_path / "config"
    kuber = Kuber(str(path))
    kuber.set_kube_config(config)
    assert kuber.load_api_config_from_path(str(path)) == config


def test_load_from_missing_path(tmp_path):
    kuber = Kuber(str(tmp_path / "config"))
    assert kuber.load_api_config() == KubeConfig()
    with pytest.raises(FileNotFoundError):
        kuber.load_api_config_from_path(str(tmp_path / "missing"))


def test_get_current_namespace_default():
    assert Kuber("unused").get_current_namespace(KubeConfig()) == kube.DEFAULT_NAMESPACE


def test_load_config_uses_kubeconfig_env(config, tmp_path, monkeypatch):
    path = tmp_path / "config"
    Kuber(str(path)).set_kube_config(config)
    monkeypatch.setenv("KUBECONFIG", str(path))
    loaded, loaded_path = load_config()
    assert loaded == config
    assert loaded_path == str(path)


def test_load_config_invalid(tmp_path, monkeypatch):
    path = tmp_path / "config"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv("KUBECONFIG", str(path))
    with pytest.raises(ValueError, match="could not load the kube config file"):
        load_config()