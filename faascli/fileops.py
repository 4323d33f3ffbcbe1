"""Recursive copying of files and directories that keeps file modes."""

from __future__ import annotations

import os
import shutil
import stat


def _debug(message: str) -> None:
    if os.environ.get("debug") in ("1", "true"):
        print(message)


def copy_files(src: str | os.PathLike, dest: str | os.PathLike) -> None:
    """Copy a file or a whole directory tree from ``src`` to ``dest``.

    The permission bits of every copied file and directory follow the source.
    Raises ``OSError`` (for example ``FileNotFoundError``) when ``src`` cannot
    be read or ``dest`` cannot be written.
    """
    src = os.fspath(src)
    dest = os.fspath(dest)
    info = os.stat(src)
    if stat.S_ISDIR(info.st_mode):
        _debug(f"Creating directory: {os.path.basename(src.rstrip(os.sep))} at {dest}")
        _copy_dir(src, dest, info)
    else:
        _debug(f"cp - {src} {dest}")
        _copy_file(src, dest, info)


def _copy_dir(src: str, dest: str, info: os.stat_result) -> None:
    os.makedirs(dest, mode=stat.S_IMODE(info.st_mode), exist_ok=True)
    for name in sorted(os.listdir(src)):
        copy_files(os.path.join(src, name), os.path.join(dest, name))


def _copy_file(src: str, dest: str, info: os.stat_result) -> None:
    ensure_base_dir(dest)
    with open(dest, "wb") as target:
        os.chmod(dest, stat.S_IMODE(info.st_mode))
        with open(src, "rb") as source:
            shutil.copyfileobj(source, target)


def ensure_base_dir(path: str | os.PathLike) -> None:
    """Create the directory that will hold ``path`` if it does not exist yet."""
    base = os.path.dirname(os.fspath(path))
    if not base or os.path.isdir(base):
        return
    os.makedirs(base, mode=0o755, exist_ok=True)