# faascli

A library of building blocks for working with serverless functions packaged as
container images. It prepares Docker build contexts from language templates and
assembles `docker build` / `docker buildx` argument lists. It also covers the
bookkeeping around deploying, listing, describing, invoking and authenticating:
flag parsing, merging, signing, URL building and text output.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `faascli.fileops`: `copy_files` copies a file or a directory tree and keeps permission bits. `ensure_base_dir` creates a missing parent directory.
- `faascli.builder`: handles the build step.
  - `create_build_context` lays out `./build/<name>/` from `./template/<language>` and a handler folder, skipping `build` and `template` entries.
  - `path_in_scope` keeps extra copied paths inside the project and raises `BuildError` otherwise.
  - `get_packages`, `get_build_option_packages` and `de_duplicate` resolve a template's `BuildOption`s to packages.
  - `build_flag_slice`, `get_docker_build_command` and `get_docker_buildx_command` produce Docker argument lists from a `DockerBuild`; `apply_tag` derives extra image tags.
  - `is_language_template` and `is_running_in_ci` are small checks used while building.
- `faascli.auth`: OAuth2 support.
  - `check_values` validates the auth URL, client id and EULA flag, raising `AuthError`.
  - `make_redirect_uri`, `make_pkce_pair` and `build_authorize_url` assemble the authorize request.
  - `ClientCredentialsRequest.to_json` and `AuthToken.from_json` carry the token exchange payloads.
  - `build_capture_fragment` returns the HTML page for the implicit flow, `example_token_usage` the usage hint, and `launch_url` opens a URL in the default browser.
- `faascli.security`: `check_tls_insecure` returns a warning for gateways reached over plain HTTP to a remote host.
- `faascli.signing`: `generate_signed_header` signs a request body with HMAC-SHA1. `missing_sign_flag` reports when only one of a header name and a key was given.
- `faascli.deploy`: deployment settings.
  - `parse_map`, `merge_map`, `merge_slice` and `compile_environment` combine environment variables, labels and annotations.
  - `check_update_replace` rejects `--update` together with `--replace`.
  - `deploy_failed` and `bad_status_code` summarise the results; errors are raised as `DeployError`.
  - `language_exists_not_dockerfile` tells whether a template's settings apply.
- `faascli.buildargs`: `parse_build_args` parses `KEY=VALUE` build arguments, `check_parallel` validates the worker count, `combine_build_opts` merges build options, `format_build_errors` summarises failed builds. Errors are raised as `BuildArgError`.
- `faascli.describe`: `get_function_urls` gives a function's sync and async URLs. `format_function_description` renders a `FunctionDescription`.
- `faascli.logs`: `since_value` and `make_log_request` build a `LogRequest`.
- `faascli.listing`: `sort_functions` and `format_function_list` work on lists of `FunctionStatus`.
- `faascli.templates`: `move_templates` installs fetched language templates without overwriting existing ones unless asked to; `template_folder_exists` and `can_write_language` make that decision.
- `faascli.generate`: `generate_function_order`, `order_env` (returning `EnvPair`s), `filter_store_item` (raising `StoreLookupError`) and `secret_mounts` are helpers for building custom resources.

## Example

```python
from faascli.builder import DockerBuild, get_docker_build_command
from faascli.buildargs import parse_build_args

args = parse_build_args(["NPM_VERSION=0.2.2"])
command, argv = get_docker_build_command(
    DockerBuild(image="my-fn:latest", no_cache=True, build_arg_map=args)
)
# argv == ["build", "--no-cache", "--build-arg", "NPM_VERSION=0.2.2",
#          "--tag", "my-fn:latest", "."]
```

```python
from faascli.describe import get_function_urls

url, async_url = get_function_urls("http://127.0.0.1:8080", "figlet", "dev")
# url == "http://127.0.0.1:8080/function/figlet.dev"
```

## What this package does not do

- There is no command-line program; the package is a library only.
- It does not talk to a gateway: there is no HTTP client for deploying, listing, describing, invoking or fetching logs, and no local token server for the OAuth2 flows.
- It does not read stack YAML files or language `template.yml` files, and does not store credentials.
- It does not run Docker or clone template repositories; it prepares build contexts and argument lists, and copies templates that are already on disk.
- It does not write Kubernetes YAML documents; `faascli.generate` provides only the ordering, environment and secret helpers.