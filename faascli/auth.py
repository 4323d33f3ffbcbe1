"""OAuth2 helpers for obtaining a gateway token."""

from __future__ import annotations

import base64
import hashlib
import json
import secrets
import subprocess
import sys
from dataclasses import asdict, dataclass
from typing import Mapping
from urllib.parse import urlencode, urlsplit, urlunsplit


class AuthError(Exception):
    """Raised when authentication settings or responses are invalid."""


@dataclass
class ClientCredentialsRequest:
    """Body of a client_credentials token request."""

    client_id: str
    client_secret: str
    audience: str
    grant_type: str

    def to_json(self) -> str:
        """Serialise the request as compact JSON."""
        return json.dumps(asdict(self), separators=(",", ":"))


@dataclass
class AuthToken:
    """Token response returned by an identity provider."""

    access_token: str = ""
    id_token: str = ""
    scope: str = ""
    expires_in: int = 0
    token_type: str = ""

    @classmethod
    def from_json(cls, data: str | bytes) -> "AuthToken":
        """Build a token from a JSON document, ignoring unknown keys."""
        text = data.decode() if isinstance(data, (bytes, bytearray)) else data
        try:
            parsed = json.loads(text)
        except ValueError as err:
            raise AuthError(f"unable to unmarshal token: {text}: {err}") from err
        if not isinstance(parsed, dict):
            raise AuthError(f"unable to unmarshal token: {text}")
        try:
            return cls(
                access_token=str(parsed.get("access_token", "")),
                id_token=str(parsed.get("id_token", "")),
                scope=str(parsed.get("scope", "")),
                expires_in=int(parsed.get("expires_in", 0)),
                token_type=str(parsed.get("token_type", "")),
            )
        except (TypeError, ValueError) as err:
            raise AuthError(f"unable to unmarshal token: {text}: {err}") from err


def check_values(auth_url: str, client_id: str, eula: bool) -> None:
    """Validate the flags of the auth command, raising ``AuthError`` on failure."""
    if not auth_url:
        raise AuthError("--auth-url is required and must be a valid OIDC URL")
    try:
        parts = urlsplit(auth_url)
    except ValueError as err:
        raise AuthError(f"--auth-url is an invalid URL: {err}") from err
    if parts.scheme not in ("http", "https"):
        raise AuthError(f"--auth-url is an invalid URL: {parts.geturl()}")
    if not client_id:
        raise AuthError("--client-id is required")
    if not eula:
        raise AuthError("the auth command is only licensed for OpenFaaS Pro customers")


def make_redirect_uri(host: str, port: int) -> str:
    """Return the local callback URL for the given host and port."""
    value = f"{host}:{port}/oauth/callback"
    try:
        uri = urlsplit(value).geturl()
    except ValueError as err:
        raise AuthError(str(err)) from err
    if not (uri.startswith("http://") or uri.startswith("https://")):
        raise AuthError("a scheme is required for the URL, i.e. http://")
    return uri


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def make_pkce_pair() -> tuple[str, str]:
    """Return a fresh PKCE code verifier and its S256 challenge."""
    verifier = _b64url(secrets.token_bytes(32))
    challenge = _b64url(hashlib.sha256(verifier.encode("ascii")).digest())
    return verifier, challenge


def build_authorize_url(auth_url: str, params: Mapping[str, str]) -> str:
    """Replace the query of ``auth_url`` with ``params``, sorted by key."""
    parts = urlsplit(auth_url)
    query = urlencode(sorted(params.items()))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def build_capture_fragment() -> str:
    """Return the HTML page that forwards the URL fragment to the local server."""
    return """
<html>
<head>
<title>OpenFaaS CLI Authorization flow</title>
<script>
	var xhttp = new XMLHttpRequest();
	xhttp.onreadystatechange = function() {
		if (this.readyState == 4 && this.status == 200) {
			console.log(xhttp.responseText)
		}
	};

	// Encode the fragment data which could contain data that is query-string formatted
	xhttp.open("GET", "/oauth2/callback?fragment="+encodeURIComponent(document.location.hash.slice(1)), true);
	xhttp.send();
</script>
</head>
<body>
 Authorization flow complete. Please close this browser window.
</body>
</html>"""


def example_token_usage(gateway: str, token: str) -> str:
    """Return example commands showing how to use a saved token."""
    return (
        "Example usage:\n"
        "  # Use an explicit token\n"
        f'  faas-cli list --gateway "{gateway}" --token "{token}"\n'
        "\n"
        "  # Use the saved token\n"
        f'  faas-cli list --gateway "{gateway}"\n'
    )


def _browser_command(url: str, platform: str) -> list[str]:
    if platform.startswith("linux"):
        return ["sh", "-c", f'xdg-open "{url}"']
    if platform == "darwin":
        return ["sh", "-c", f'open "{url}"']
    if platform in ("win32", "cygwin"):
        return ["cmd", "/c", f"start {url.replace('&', '^&')}"]
    raise AuthError(f"unable to launch browser: unsupported platform {platform}")


def launch_url(url: str) -> None:
    """Open ``url`` in the default browser on Linux, macOS or Windows."""
    command = _browser_command(url, sys.platform)
    result = subprocess.run(command, check=False)
    if result.returncode != 0:
        raise AuthError(f"unable to launch browser: exit status {result.returncode}")