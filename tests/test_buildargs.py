import pytest

from faascli.buildargs import (
    BuildArgError,
    check_parallel,
    combine_build_opts,
    format_build_errors,
    parse_build_args,
    parse_build_args as _parse,
)


def test_parallel_over_zero():
    with pytest.raises(BuildArgError) as info:
        check_parallel(0)
    assert str(info.value) == "the --parallel flag must be great than 0"


def test_parallel_negative_rejected():
    with pytest.raises(BuildArgError):
        check_parallel(-3)


def test_parallel_positive_accepted():
    assert check_parallel(1) is None


def test_parse_build_args_valid_parts():
    assert parse_build_args(["k=v"]) == {"k": "v"}


def test_parse_build_args_no_separator():
    with pytest.raises(BuildArgError) as info:
        parse_build_args(["kv"])
    assert str(info.value) == "each build-arg must take the form key=value"


def test_parse_build_args_empty_key():
    with pytest.raises(BuildArgError) as info:
        parse_build_args(["=v"])
    assert str(info.value) == "build-arg must have a non-empty key"


def test_parse_build_args_empty_value():
    with pytest.raises(BuildArgError) as info:
        parse_build_args(["k=  "])
    assert str(info.value) == "build-arg must have a non-empty value"


def test_parse_build_args_multiple_separators():
    assert parse_build_args(["k=v=z"]) == {"k": "v=z"}


def test_parse_build_args_trims_whitespace():
    assert _parse([" k = v "]) == {"k": "v"}


def test_parse_build_args_joins_additional_packages():
    mapped = parse_build_args(["ADDITIONAL_PACKAGE=git", "ADDITIONAL_PACKAGE=curl"])
    assert mapped == {"ADDITIONAL_PACKAGE": "git curl"}


def test_parse_build_args_last_value_wins_for_other_keys():
    assert parse_build_args(["k=a", "k=b"]) == {"k": "b"}


def test_parse_build_args_empty():
    assert parse_build_args([]) == {}


def test_combine_build_opts_flag_options_first():
    assert combine_build_opts(["dev", "debug"], ["debug", "prod"]) == [
        "debug",
        "prod",
        "dev",
    ]


def test_combine_build_opts_none_inputs():
    assert combine_build_opts(None, None) == []


def test_format_build_errors():
    summary = format_build_errors([ValueError("first"), RuntimeError("second")])
    assert summary == "Errors received during build:\n- first\n- second\n"