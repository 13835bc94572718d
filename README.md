# dxtool

A library of helpers for developer tooling: models for GitHub pull requests,
issues and repository security settings, text tables that line up columns
even when cells hold ANSI colours, a cached check for newer releases,
kubeconfig context and namespace switching, and simple line-based prompts.

## Installation

```
pip install dxtool
```

To run the test suite:

```
pip install "dxtool[test]"
pytest
```

## Modules

- `dxtool.colors`: `color_info` (green), `color_warning` (yellow),
  `color_error` (red) and `color_answer` (blue) wrap text in ANSI escape
  codes; `strip` removes escape sequences; `get_color(option_name, names)`
  builds a `Color` from attribute names such as `"bold"` or `"red"` and raises
  `ValueError` on an unknown name. `Color.sprint(*args)` returns the
  arguments wrapped in that colour.
- `dxtool.format`: `safe_time` describes a `datetime` relative to now
  ("5 minutes ago", "in 2 hours"; a date once it is more than 73 hours away,
  an empty string for `None`), `trim_template` and `safe_if_above_zero`.
- `dxtool.files`: `file_exists`, `read_file`, `home_dir`, `config_dir`
  (`~/.dx`), `dx_config_file` (`~/.dx/config.yml`), `gh_config_dir`
  (`~/.config/gh`), `create_config_path`, `copy_file` and `copy_dir`
  (skips symlinks; an existing destination is replaced only with `force`,
  otherwise `FileExistsError` is raised).
- `dxtool.binary`: `dx_binary_location` returns the directory of the running
  Python executable, with symlinks resolved.
- `dxtool.command`: `Command` describes a program to run;
  `DefaultCommandRunner.run_without_retry` runs it once, counts the attempt,
  records a failure and returns the trimmed combined output. A failure raises
  `CommandError`, whose message masks the argument following any argument
  containing "password".
- `dxtool.padding`: `pad`, `pad_left`, `pad_right`, `pad_center` and the
  `Align` enum; widths ignore ANSI escape sequences.
- `dxtool.table`: `Table` writes rows to a text stream with columns padded to
  their widest cell. Cells starting with `"# "` do not widen their column; in
  a right-aligned last column the `"# "` is dropped, so a one-cell row serves
  as a full-width header line.
- `dxtool.pr`: `PullRequest.from_dict` builds a pull request from GraphQL
  JSON. `contexts_string` rolls the commit checks up to `ERROR`, `FAILURE`,
  `PENDING` or `SUCCESS`; there are also `failed_contexts`, `colored_title`,
  `colored_review_decision`, `trimmed_title` (75 characters), `mergeable_string`,
  `pulls_string`, `has_label`, `has_context`, and the sort key `pulls_sort_key`.
- `dxtool.issue`: `Issue.from_dict`, with `trimmed_title`, `colored_title`,
  `issue_string`, `has_label`, and the sort key `issues_sort_key`.
- `dxtool.security`: `RepositorySecurity.from_dict` and
  `sort_by_name_and_owner`.
- `dxtool.update`: `check_for_update` returns the latest release when it is
  newer than the current version; `get_latest_release_info` keeps the answer
  in a YAML state file for 24 hours unless `force` is set;
  `version_greater_than` compares two versions and is `False` if either does
  not parse.
- `dxtool.kube`: `KubeConfig` (`from_dict`, `to_dict`), `load_config`,
  `current_context`, `current_namespace`, `current_cluster`, `current_server`,
  `server`, and `Kuber`, which loads a kubeconfig file and persists changes of
  context, namespace or the whole configuration.
- `dxtool.prompter`: `Prompter` asks single or multiple choice questions on
  given streams; an answer is an option's number or its text.

## Example

```python
import sys

from dxtool.colors import color_info
from dxtool.table import Table

table = Table(sys.stdout)
table.add_row("NAME", "STATUS")
table.add_row("# Repository one")
table.add_row("fix build", color_info("SUCCESS"))
table.render()
```

Checking for a release with a client of your own:

```python
from dxtool.update import check_for_update


class Client:
    def rest(self, hostname, method, path, body):
        return {"tag_name": "v1.2.0", "html_url": "https://example.com/releases/v1.2.0"}


release = check_for_update(Client(), "/tmp/dx-state.yml", "OWNER/REPO", "v1.0.0")
print(release.version if release else "up to date")
```

## What it does not do

- There is no command-line program; the package is a library only.
- It makes no HTTP or GraphQL calls itself. Pull requests, issues and
  repositories are built from JSON you fetch, and `dxtool.update` needs a
  client object with a `rest(hostname, method, path, body)` method that
  returns the decoded JSON body.
- `dxtool.kube` reads and writes kubeconfig files only; it does not talk to a
  Kubernetes cluster and builds no API client.
- `Prompter` reads plain lines; there is no arrow-key menu.