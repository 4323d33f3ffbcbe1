"""Warnings about unencrypted gateway connections."""

NO_TLS_WARN = (
    "WARNING! You are not using an encrypted connection to the gateway, consider using HTTPS."
)


def check_tls_insecure(gateway: str, tls_insecure: bool) -> str:
    """Return a warning if ``gateway`` is plain HTTP to a remote host, else ""."""
    if tls_insecure:
        return ""
    if gateway.startswith(("https", "http://127.0.0.1", "http://localhost")):
        return ""
    return NO_TLS_WARN