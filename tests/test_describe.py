import pytest

from faascli.describe import (
    FunctionDescription,
    format_function_description,
    get_function_urls,
)


@pytest.mark.parametrize(
    "gateway, name, namespace, expected_url, expected_async",
    [
        (
            "http://127.0.0.1:8080",
            "figlet",
            "alpha",
            "http://127.0.0.1:8080/function/figlet.alpha",
            "http://127.0.0.1:8080/async-function/figlet.alpha",
        ),
        (
            "https://example.com",
            "nodeinfo",
            "beta",
            "https://example.com/function/nodeinfo.beta",
            "https://example.com/async-function/nodeinfo.beta",
        ),
        (
            "https://example.com:31112",
            "nodeinfo",
            "",
            "https://example.com:31112/function/nodeinfo",
            "https://example.com:31112/async-function/nodeinfo",
        ),
    ],
)
def test_get_function_urls(gateway, name, namespace, expected_url, expected_async):
    assert get_function_urls(gateway, name, namespace) == (expected_url, expected_async)


def test_get_function_urls_trims_trailing_slash():
    url, async_url = get_function_urls("https://example.com//", "fn", "")
    assert url == "https://example.com/function/fn"
    assert async_url == "https://example.com/async-function/fn"


def _desc(**kwargs):
    defaults = dict(
        name="figlet",
        status="Ready",
        replicas=1,
        available_replicas=1,
        invocation_count=3,
        image="functions/figlet:latest",
        env_process="figlet",
        url="http://127.0.0.1:8080/function/figlet",
        async_url="http://127.0.0.1:8080/async-function/figlet",
    )
    defaults.update(kwargs)
    return FunctionDescription(**defaults)


def test_format_empty_maps_show_none():
    lines = format_function_description(_desc()).splitlines()
    assert lines[-2] == "Labels" + " " * 15 + "<none>"
    assert lines[-1] == "Annotations" + " " * 10 + "<none>"
    assert len(lines) == 11


def test_format_multiple_labels():
    text = format_function_description(_desc(labels={"a": "1", "b": "2"}))
    lines = text.splitlines()
    index = lines.index("Labels" + " " * 15 + "a : 1")
    assert lines[index + 1] == " " * 21 + "b : 2"


def test_format_usage_lines():
    text = format_function_description(_desc(memory_bytes=2097152.0, cpu=-5.0))
    assert text.startswith("\n")
    lines = text.splitlines()
    assert lines[-2] == "RAM:" + " " * 17 + "2.00 MB"
    assert lines[-1] == "CPU:" + " " * 17 + "1 Mi"


def test_format_without_usage_has_no_resource_lines():
    text = format_function_description(_desc())
    assert "RAM:" not in text
    assert not text.startswith("\n")