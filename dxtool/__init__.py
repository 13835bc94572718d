"""Developer tooling helpers: pull request and issue models, text tables, update checks, kubeconfig handling and prompts."""

__version__ = "0.1.0"