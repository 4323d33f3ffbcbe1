from dataclasses import dataclass

import pytest

from faascli.generate import (
    EnvPair,
    StoreLookupError,
    filter_store_item,
    generate_function_order,
    order_env,
    secret_mounts,
)

SORTED_NAMES = ["fn1", "fn10", "fn2", "fn3", "fn4", "fn5", "fn6", "fn7", "fn8", "fn9"]


@dataclass
class _StoreItem:
    name: str
    image: str = ""


@pytest.mark.parametrize(
    "input_order",
    [
        ["fn1", "fn2", "fn3", "fn4", "fn5", "fn6", "fn7", "fn8", "fn9", "fn10"],
        ["fn3", "fn7", "fn2", "fn10", "fn5", "fn1", "fn6", "fn9", "fn4", "fn8"],
    ],
)
def test_generate_function_order(input_order):
    functions = {name: {"image": f"{name}:latest"} for name in input_order}
    assert generate_function_order(functions) == SORTED_NAMES


def test_generate_function_order_is_not_numeric():
    names = ["fn3", "fn7", "fn2", "fn10", "fn5", "fn1", "fn6", "fn9", "fn4", "fn8"]
    numeric = ["fn1", "fn2", "fn3", "fn4", "fn5", "fn6", "fn7", "fn8", "fn9", "fn10"]
    result = generate_function_order({name: None for name in names})
    assert result == SORTED_NAMES
    assert result != numeric


def test_filter_store_item_found():
    items = [_StoreItem(name="figlet")]
    assert filter_store_item(items, "figlet").name == "figlet"


def test_filter_store_item_found_in_mapping():
    items = [{"name": "nodeinfo"}, {"name": "figlet", "image": "img"}]
    assert filter_store_item(items, "figlet") == {"name": "figlet", "image": "img"}


def test_filter_store_item_not_found():
    items = [_StoreItem(name="figlets")]
    with pytest.raises(StoreLookupError) as info:
        filter_store_item(items, "figlet")
    assert str(info.value) == "unable to find 'figlet' in store"


def test_order_env():
    env = {"write_debug": "true", "a_var": "1"}
    assert order_env(env) == [EnvPair("a_var", "1"), EnvPair("write_debug", "true")]


def test_order_env_empty():
    assert order_env(None) == []


def test_secret_mounts():
    mounts, volumes = secret_mounts(["db", "api"])
    assert [m["mountPath"] for m in mounts] == [
        "/var/openfaas/secrets/db",
        "/var/openfaas/secrets/api",
    ]
    assert all(m["readOnly"] for m in mounts)
    assert [v["secret"]["secretName"] for v in volumes] == ["db", "api"]
    assert [m["name"] for m in mounts] == [v["name"] for v in volumes]


def test_secret_mounts_none():
    assert secret_mounts(None) == ([], [])