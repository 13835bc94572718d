"""Filesystem helpers and configuration locations."""

from __future__ import annotations

import os
import shutil

_CONFIG_DIR = ".config"
_GH_CONFIG_DIR = "gh"
_DX_CONFIG_FILE = "config.yml"
_DX_CONFIG_DIR = ".dx"


def file_exists(path: str) -> bool:
    """Return True if path exists and is not a directory."""
    try:
        return not os.path.isdir(path) if os.stat(path) else False
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise OSError(f"failed to check if file exists {path}: {exc}") from exc


def read_file(path: str) -> bytes:
    """Return the whole content of a file."""
    with open(path, "rb") as handle:
        return handle.read()


def home_dir() -> str:
    """Return the user's home directory, falling back to the current directory."""
    home = os.environ.get("HOME", "")
    if home:
        return home
    return os.environ.get("USERPROFILE", "") or "."


def config_dir() -> str:
    """Return the tool's configuration directory."""
    return os.path.join(home_dir(), _DX_CONFIG_DIR)


def create_config_path(config_path: str, config_file: str) -> str:
    """Return the path of a configuration file below the home directory."""
    return os.path.join(home_dir(), config_path, config_file)


def gh_config_dir() -> str:
    """Return the gh configuration directory."""
    return os.path.join(home_dir(), _CONFIG_DIR, _GH_CONFIG_DIR)


def dx_config_file() -> str:
    """Return the path of the tool's configuration file."""
    return os.path.join(config_dir(), _DX_CONFIG_FILE)


def copy_file(src: str, dst: str) -> None:
    """Copy a file's content and permission bits."""
    with open(src, "rb") as source, open(dst, "wb") as target:
        shutil.copyfileobj(source, target)
        target.flush()
        os.fsync(target.fileno())
    os.chmod(dst, os.stat(src).st_mode)


def copy_dir(src: str, dst: str, force: bool) -> None:
    """Copy a directory tree, skipping symlinks.

    An existing destination is removed when force is set, otherwise
    FileExistsError is raised.
    """
    src = os.path.normpath(src)
    dst = os.path.normpath(dst)

    info = os.stat(src)
    if not os.path.isdir(src):
        raise NotADirectoryError("source is not a directory")

    if os.path.lexists(dst):
        if force:
            if os.path.isdir(dst) and not os.path.islink(dst):
                shutil.rmtree(dst, ignore_errors=True)
            else:
                os.remove(dst)
        else:
            raise FileExistsError(f"file already exists: {dst}")

    os.makedirs(dst, mode=info.st_mode & 0o7777, exist_ok=True)

    with os.scandir(src) as iterator:
        entries = sorted(iterator, key=lambda e: e.name)

    for entry in entries:
        src_path = os.path.join(src, entry.name)
        dst_path = os.path.join(dst, entry.name)
        if entry.is_symlink():
            continue
        if entry.is_dir(follow_symlinks=False):
            copy_dir(src_path, dst_path, force)
        else:
            copy_file(src_path, dst_path)