"""Moving fetched language templates into the local template folder."""

from __future__ import annotations

import os
from typing import MutableMapping

from faascli.fileops import copy_files

TEMPLATE_DIRECTORY = "./template/"
_REPO_TEMPLATE_FOLDER = "template"


def template_folder_exists(
    language: str, overwrite: bool, template_dir: str = TEMPLATE_DIRECTORY
) -> bool:
    """Tell whether the language's template may be written.

    False only when the folder already exists and overwriting is not allowed.
    """
    folder = os.path.join(template_dir, language)
    return not (os.path.exists(folder) and not overwrite)


def can_write_language(
    available: MutableMapping[str, bool] | None,
    language: str,
    overwrite: bool,
    template_dir: str = TEMPLATE_DIRECTORY,
) -> bool:
    """Tell whether a language may be written, remembering the answer in ``available``."""
    if available is None or not language:
        return False
    if language in available:
        return available[language]
    can_write = template_folder_exists(language, overwrite, template_dir)
    available[language] = can_write
    return can_write


def move_templates(
    repo_path: str, overwrite: bool, template_dir: str = TEMPLATE_DIRECTORY
) -> tuple[list[str], list[str]]:
    """Copy each language folder of a fetched repository into ``template_dir``.

    Returns the languages that already existed and the languages copied.
    Raises ``FileNotFoundError`` when the repository has no template folder.
    """
    source_dir = os.path.join(repo_path, _REPO_TEMPLATE_FOLDER)
    try:
        entries = sorted(os.listdir(source_dir))
    except OSError as err:
        raise FileNotFoundError(f"can't find templates in: {repo_path}") from err

    available: dict[str, bool] = {}
    existing: list[str] = []
    fetched: list[str] = []
    for language in entries:
        source = os.path.join(source_dir, language)
        if not os.path.isdir(source):
            continue
        if can_write_language(available, language, overwrite, template_dir):
            fetched.append(language)
            copy_files(source, os.path.join(template_dir, language))
        else:
            existing.append(language)
    return existing, fetched