from __future__ import annotations

import pytest

from sls_service_catalog.core.naming import (
    get_lambda_logical_id,
    get_provisioned_product_logical_id,
    get_provisioned_product_name,
    normalize_name,
    normalize_name_with_suffix,
)


def test_normalize_name_capitalizes_first_letter() -> None:
    assert normalize_name("testHello") == "TestHello"
    assert normalize_name("") == ""


@pytest.mark.parametrize(
    "key, expected",
    [
        ("testHello", "TestHello"),
        ("hello-world", "HelloDashworld"),
        ("hello_world", "HelloUnderscoreworld"),
        ("Already", "Already"),
    ],
)
def test_normalize_name_with_suffix(key: str, expected: str) -> None:
    assert normalize_name_with_suffix(key) == expected


def test_dash_and_underscore_do_not_collide() -> None:
    assert get_provisioned_product_logical_id(
        "my-func"
    ) != get_provisioned_product_logical_id("my_func")


def test_logical_ids() -> None:
    assert get_lambda_logical_id("testBye") == "TestByeLambdaFunction"
    assert (
        get_provisioned_product_logical_id("testHello")
        == "TestHelloLambdaFunctionSCProvisionedProduct"
    )


def test_provisioned_product_name_keeps_display_name() -> None:
    assert get_provisioned_product_name("test-hello") == "provisionSC-test-hello"


@pytest.mark.parametrize(
    "key, expected",
    [
        ("hello.world", "Helloworld"),
        ("api/v1 handler", "Apiv1handler"),
        ("café", "Caf"),
    ],
)
def test_other_characters_are_removed(key: str, expected: str) -> None:
    assert normalize_name_with_suffix(key) == expected
    assert get_provisioned_product_logical_id(key).isalnum()


def test_case_only_difference_collides() -> None:
    # the compiler rejects such pairs instead of overwriting
    assert get_provisioned_product_logical_id(
        "testHello"
    ) == get_provisioned_product_logical_id("TestHello")
