"""Building function images from language templates with Docker."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from faascli.fileops import copy_files

ADDITIONAL_PACKAGE_BUILD_ARG = "ADDITIONAL_PACKAGE"
DEFAULT_HANDLER_FOLDER = "function"

_DOCKER_BUILD_COMMAND = "docker buildx build --allow security.insecure ."
_PUSH_ONLY = "--output=type=registry,push=true"


class BuildError(Exception):
    """Raised when a function image or its build context cannot be prepared."""


@dataclass
class BuildOption:
    """A named set of extra packages offered by a language template."""

    name: str
    packages: list[str] = field(default_factory=list)


@dataclass
class DockerBuild:
    """Settings for one image build."""

    image: str
    version: str = ""
    no_cache: bool = False
    squash: bool = False
    http_proxy: str = ""
    https_proxy: str = ""
    build_arg_map: dict[str, str] = field(default_factory=dict)
    build_opt_packages: list[str] = field(default_factory=list)
    build_label_map: dict[str, str] = field(default_factory=dict)
    platforms: str = ""
    extra_tags: list[str] = field(default_factory=list)


def is_language_template(language: str) -> bool:
    """True unless the language is the plain Dockerfile template."""
    return language.lower() != "dockerfile"


def is_running_in_ci() -> bool:
    """True when the CI environment variable is set to "true" or "1"."""
    return os.environ.get("CI") in ("true", "1")


def de_duplicate(packages: Iterable[str]) -> list[str]:
    """Drop repeated entries, keeping the first occurrence of each."""
    return list(dict.fromkeys(packages))


def get_packages(
    available: Sequence[BuildOption], requested: Sequence[str]
) -> tuple[list[str], bool]:
    """Collect the packages of the requested build options.

    Returns the packages and whether every requested option was found.
    """
    by_name: dict[str, BuildOption] = {}
    for option in available:
        by_name.setdefault(option.name, option)

    packages: list[str] = []
    for name in requested:
        option = by_name.get(name)
        if option is None:
            return packages, False
        packages.extend(option.packages)
    return de_duplicate(packages), True


def get_build_option_packages(
    requested: Sequence[str], language: str, available: Sequence[BuildOption]
) -> list[str]:
    """Resolve requested build options to packages, raising if any is unknown."""
    if not requested:
        return []
    packages, all_found = get_packages(available, requested)
    if not all_found:
        raise BuildError(
            f"Error: You're using a build option unavailable for {language}.\n"
            f"Please check /template/{language}/template.yml for supported build options"
        )
    return packages


def build_flag_slice(
    nocache: bool,
    squash: bool,
    http_proxy: str,
    https_proxy: str,
    build_args: Mapping[str, str] | None,
    build_packages: Sequence[str] | None,
    build_labels: Mapping[str, str] | None,
) -> list[str]:
    """Build the docker flags for caching, proxies, build-args and labels."""
    flags: list[str] = []
    packages = list(build_packages or [])

    if nocache:
        flags.append("--no-cache")
    if squash:
        flags.append("--squash")
    if http_proxy:
        flags += ["--build-arg", f"http_proxy={http_proxy}"]
    if https_proxy:
        flags += ["--build-arg", f"https_proxy={https_proxy}"]

    for key, value in (build_args or {}).items():
        if key != ADDITIONAL_PACKAGE_BUILD_ARG:
            flags += ["--build-arg", f"{key}={value}"]
        else:
            packages.extend(value.split(" "))

    if packages:
        joined = " ".join(de_duplicate(packages))
        flags += ["--build-arg", f"{ADDITIONAL_PACKAGE_BUILD_ARG}={joined}"]

    for key, value in (build_labels or {}).items():
        flags += ["--label", f"{key}={value}"]

    return flags


def _flags_for(build: DockerBuild) -> list[str]:
    return build_flag_slice(
        build.no_cache,
        build.squash,
        build.http_proxy,
        build.https_proxy,
        build.build_arg_map,
        build.build_opt_packages,
        build.build_label_map,
    )


def get_docker_build_command(build: DockerBuild) -> tuple[str, list[str]]:
    """Return the command and arguments for a local image build."""
    args = ["build", *_flags_for(build), "--tag", build.image, "."]
    return _DOCKER_BUILD_COMMAND, args


def apply_tag(index: int, base_image: str, tag: str) -> str:
    """Replace everything from ``index`` in ``base_image`` with ``:tag``."""
    return f"{base_image[:index]}:{tag}"


def get_docker_buildx_command(build: DockerBuild) -> tuple[str, list[str]]:
    """Return the command and arguments for a multi-arch build and push."""
    args = [
        "buildx",
        "build",
        "--progress=plain",
        f"--platform={build.platforms}",
        _PUSH_ONLY,
        *_flags_for(build),
        "--tag",
        build.image,
        ".",
    ]
    for extra in build.extra_tags:
        colon = build.image.rfind(":")
        index = colon if colon > -1 else len(build.image) - 1
        args += ["--tag", apply_tag(index, build.image, extra)]
    return "docker", args


def path_in_scope(path: str, scope: str) -> str:
    """Return the absolute form of ``path``, requiring it to lie inside ``scope``."""
    scope_abs = os.path.abspath(os.path.normpath(scope))
    path_abs = os.path.abspath(os.path.normpath(path))

    if path_abs == scope_abs:
        raise BuildError(
            f"forbidden path appears to equal the entire project: {path} ({path_abs})"
        )
    if path_abs.startswith(scope_abs):
        return path_abs
    raise BuildError(
        f"forbidden path appears to be outside of the build context: {path} ({path_abs})"
    )


def create_build_context(
    function_name: str,
    handler: str,
    language: str,
    use_function: bool,
    handler_folder: str,
    copy_extra_paths: Sequence[str],
) -> str:
    """Assemble ``./build/<function_name>/`` from the template and handler.

    Returns the path of the build context.
    """
    temp_path = f"./build/{function_name}/"
    print(f"Clearing temporary build folder: {temp_path}")
    try:
        shutil.rmtree(temp_path)
    except FileNotFoundError:
        pass
    except OSError:
        print(f"Error clearing temporary build folder: {temp_path}")
        raise

    function_path = temp_path
    if use_function:
        function_path = os.path.join(temp_path, handler_folder or DEFAULT_HANDLER_FOLDER)

    print(f"Preparing: {handler}/ {function_path}")

    mode = 0o777 if is_running_in_ci() else 0o700
    try:
        os.makedirs(function_path, mode=mode, exist_ok=True)
    except OSError as err:
        print(f"Error creating path: {function_path} - {err}.")
        raise

    if use_function:
        try:
            copy_files(os.path.join("./template/", language), temp_path)
        except OSError as err:
            print(f"Error copying template directory: {err}.")
            raise

    try:
        entries = sorted(os.listdir(handler))
    except OSError as err:
        print(f"Error reading the handler: {handler} - {err}.")
        raise

    for name in entries:
        if name in ("build", "template"):
            print(f'Skipping "{name}" folder')
            continue
        copy_files(
            os.path.normpath(os.path.join(handler, name)),
            os.path.normpath(os.path.join(function_path, name)),
        )

    for extra_path in copy_extra_paths:
        extra_abs = path_in_scope(extra_path, ".")
        copy_files(extra_abs, os.path.normpath(os.path.join(function_path, extra_path)))

    return temp_path