from __future__ import annotations

import base64
import hashlib

import pytest

from sls_service_catalog.compiler.parameters import (
    build_parameter_list,
    compute_fingerprint,
    extract_template_parameters,
    get_artifact_s3_key,
    merge_parameters,
)
from sls_service_catalog.core.exceptions import TemplateLoadError
from sls_service_catalog.models.resources import ProvisioningParameter


def p(key: str, value: object) -> ProvisioningParameter:
    return ProvisioningParameter(key=key, value=value)


def test_fingerprint_is_base64_sha256() -> None:
    expected = base64.b64encode(hashlib.sha256(b"foobar").digest()).decode()
    assert compute_fingerprint(b"foobar") == expected


def test_fingerprint_changes_with_content() -> None:
    assert compute_fingerprint(b"foobar") != compute_fingerprint(b"barbaz")


@pytest.mark.parametrize(
    "artifact, directory, expected",
    [
        ("/tmp/pkg/test.zip", "somedir", "somedir/test.zip"),
        ("test.zip", None, "test.zip"),
        (
            "/abs/new-service.zip",
            "serverless/svc/dev/123",
            "serverless/svc/dev/123/new-service.zip",
        ),
    ],
)
def test_artifact_s3_key(artifact: str, directory: str | None, expected: str) -> None:
    assert get_artifact_s3_key(artifact, directory) == expected


def test_build_parameter_list_skips_none_and_keeps_order() -> None:
    result = build_parameter_list({"B": "1", "A": None, "C": "3"})
    assert [(x.key, x.value) for x in result] == [("B", "1"), ("C", "3")]


class TestExtractTemplateParameters:
    def test_top_level_list(self) -> None:
        result = extract_template_parameters([{"Key": "K", "Value": "V"}])
        assert result == [p("K", "V")]

    def test_provisioning_parameters_mapping(self) -> None:
        doc = {"ProvisioningParameters": [{"Key": "K", "Value": "V"}]}
        assert extract_template_parameters(doc) == [p("K", "V")]

    def test_resource_shaped_mapping(self) -> None:
        doc = {
            "Type": "AWS::ServiceCatalog::CloudFormationProvisionedProduct",
            "Properties": {
                "ProvisioningParameters": [
                    {"Key": "CustomParam", "Value": "CustomValue"}
                ]
            },
        }
        assert extract_template_parameters(doc) == [p("CustomParam", "CustomValue")]

    def test_non_string_key_coerced(self) -> None:
        assert extract_template_parameters([{"Key": 1, "Value": "V"}])[0].key == "1"

    def test_missing_list_rejected(self) -> None:
        with pytest.raises(TemplateLoadError, match="ProvisioningParameters"):
            extract_template_parameters({"Other": []}, "tpl.json")

    def test_malformed_entry_rejected(self) -> None:
        with pytest.raises(TemplateLoadError, match="Malformed"):
            extract_template_parameters([{"Key": "OnlyKey"}])


class TestMergeParameters:
    def test_additive(self) -> None:
        merged = merge_parameters(
            [p("CustomParam", "CustomValue")], [p("Handler", "h")]
        )
        assert merged == [p("CustomParam", "CustomValue"), p("Handler", "h")]

    def test_computed_wins_in_place(self) -> None:
        merged = merge_parameters(
            [p("Handler", "old"), p("Extra", "x")],
            [p("S3Bucket", "b"), p("Handler", "new")],
        )
        assert merged == [p("Handler", "new"), p("Extra", "x"), p("S3Bucket", "b")]

    def test_empty_base(self) -> None:
        computed = [p("A", "1"), p("B", "2")]
        assert merge_parameters([], computed) == computed

    def test_unique_keys(self) -> None:
        merged = merge_parameters([p("A", "1"), p("A", "2")], [])
        assert merged == [p("A", "2")]
