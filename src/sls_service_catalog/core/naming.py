"""Logical id helpers shared by the compiler and its callers."""

import re

LAMBDA_FUNCTION_SUFFIX = "LambdaFunction"
PROVISIONED_PRODUCT_SUFFIX = "SCProvisionedProduct"
PROVISIONED_PRODUCT_NAME_PREFIX = "provisionSC-"

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


def normalize_name(name: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return f"{name[:1].upper()}{name[1:]}"


def normalize_name_with_suffix(name: str) -> str:
    """
    Turn an arbitrary function key into an identifier-safe PascalCase string.

    Dashes and underscores are spelled out rather than dropped, so that
    ``my-func`` and ``my_func`` never collapse onto the same logical id.
    Any other character CloudFormation does not accept in a logical id is
    removed. Keys that still end up equal are rejected by the compiler.

    Examples:
        >>> normalize_name_with_suffix("testHello")
        'TestHello'
        >>> normalize_name_with_suffix("say-hi_now")
        'SayDashhiUnderscorenow'
        >>> normalize_name_with_suffix("hello.world")
        'Helloworld'
    """
    spelled = name.replace("-", "Dash").replace("_", "Underscore")
    return normalize_name(_NON_ALPHANUMERIC.sub("", spelled))


def get_lambda_logical_id(function_key: str) -> str:
    return f"{normalize_name_with_suffix(function_key)}{LAMBDA_FUNCTION_SUFFIX}"


def get_provisioned_product_logical_id(function_key: str) -> str:
    """
    Resource key under which a function's provisioned product is stored.

    Args:
        function_key: The key of the function in the service's functions map

    Returns:
        Logical id such as ``TestHelloLambdaFunctionSCProvisionedProduct``
    """
    return f"{get_lambda_logical_id(function_key)}{PROVISIONED_PRODUCT_SUFFIX}"


def get_provisioned_product_name(display_name: str) -> str:
    return f"{PROVISIONED_PRODUCT_NAME_PREFIX}{display_name}"
