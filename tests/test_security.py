import pytest

from faascli.security import check_tls_insecure

WARNING = "WARNING! You are not using an encrypted connection to the gateway, consider using HTTPS."


@pytest.mark.parametrize(
    "gateway, tls_insecure, want",
    [
        ("https://192.168.0.101:8080", False, ""),
        ("https://192.168.0.101:8080", True, ""),
        ("http://192.168.0.101:8080", False, WARNING),
        ("http://127.0.0.1:8080", False, ""),
        ("http://localhost:8080", False, ""),
        ("http://192.168.0.101:8080", True, ""),
    ],
)
def test_check_tls_insecure(gateway, tls_insecure, want):
    assert check_tls_insecure(gateway, tls_insecure) == want