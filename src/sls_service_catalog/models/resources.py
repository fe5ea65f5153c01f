"""CloudFormation resource models emitted by the compiler."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

PROVISIONED_PRODUCT_TYPE = "AWS::ServiceCatalog::CloudFormationProvisionedProduct"


class ProvisioningParameter(BaseModel):
    """A single Key/Value input passed to a provisioned product."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    key: str = Field(..., alias="Key")
    value: Any = Field(
        ...,
        alias="Value",
        description="Literal string or a CloudFormation intrinsic mapping.",
    )

    def to_cfn(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ProvisionedProductProperties(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="ProductId")
    provisioning_artifact_name: str | None = Field(
        default=None, alias="ProvisioningArtifactName"
    )
    provisioning_parameters: list[ProvisioningParameter] = Field(
        default_factory=list, alias="ProvisioningParameters"
    )
    provisioned_product_name: str = Field(..., alias="ProvisionedProductName")


class ResourceEntry(BaseModel):
    """A provisioned-product resource ready to merge into ``Resources``."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(default=PROVISIONED_PRODUCT_TYPE, alias="Type")
    properties: ProvisionedProductProperties = Field(..., alias="Properties")

    def to_cfn(self) -> dict[str, Any]:
        """Render as a plain CloudFormation resource mapping."""
        return self.model_dump(by_alias=True, exclude_none=True)
