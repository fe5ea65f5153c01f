"""
Service definition models.

Mirror the parts of a serverless service file that the Service Catalog
compiler reads: the service name, provider settings, packaging settings and
the ordered map of declared functions.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

DEFAULT_STAGE = "dev"
DEFAULT_REGION = "us-east-1"
DEFAULT_RUNTIME = "nodejs18.x"
DEFAULT_MEMORY_SIZE = 1024
DEFAULT_TIMEOUT = 6


class ServiceModel(BaseModel):
    """Base for service file sections: camelCase aliases, extra keys kept."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class PackageSettings(ServiceModel):
    artifact: str | None = Field(
        default=None,
        description="Path to the packaged deployment artifact (zip file).",
    )
    artifact_directory_name: str | None = Field(
        default=None,
        alias="artifactDirectoryName",
        description="Prefix inside the deployment bucket where artifacts are stored.",
    )


class ProviderSettings(ServiceModel):
    """Provider section of the service file."""

    deployment_bucket: str = Field(
        ...,
        alias="deploymentBucket",
        description="Bucket holding the uploaded deployment artifacts.",
    )
    sc_product_id: str = Field(
        ...,
        alias="scProductId",
        description="Service Catalog product id to provision for each function.",
    )
    sc_product_version: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "scProductVersion", "scProdcutVersion", "sc_product_version"
        ),
        serialization_alias="scProductVersion",
        description="Provisioning artifact (product version) name.",
    )
    sc_product_template: str | None = Field(
        default=None,
        alias="scProductTemplate",
        description=(
            "Optional path to a document declaring extra provisioning parameters."
        ),
    )
    stage: str = DEFAULT_STAGE
    region: str = DEFAULT_REGION
    runtime: str = DEFAULT_RUNTIME
    memory_size: int = Field(default=DEFAULT_MEMORY_SIZE, alias="memorySize")
    timeout: int = DEFAULT_TIMEOUT
    environment: dict[str, Any] | None = Field(
        default=None,
        description="Environment variables shared by every function.",
    )


class FunctionDefinition(ServiceModel):
    """A single entry of the service's ``functions`` map."""

    name: str | None = Field(
        default=None,
        description=(
            "Display name. Defaults to '<service>-<stage>-<function key>' when unset."
        ),
    )
    handler: str = Field(..., description="Handler reference, e.g. 'handler.hello'.")
    package: PackageSettings = Field(default_factory=PackageSettings)
    environment: dict[str, Any] | None = None
    runtime: str | None = None
    memory_size: int | None = Field(default=None, alias="memorySize")
    timeout: int | None = None

    @field_validator("handler")
    @classmethod
    def _handler_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("handler must not be empty")
        return v


class ServiceDefinition(ServiceModel):
    """The whole service: name, provider, packaging and declared functions."""

    service: str = Field(..., description="Service name.")
    provider: ProviderSettings
    package: PackageSettings = Field(default_factory=PackageSettings)
    functions: dict[str, FunctionDefinition] = Field(default_factory=dict)

    @field_validator("service", mode="before")
    @classmethod
    def _service_name(cls, v: Any) -> Any:
        # service may be written as a mapping: {name: my-service}
        if isinstance(v, dict) and "name" in v:
            return v["name"]
        return v

    @field_validator("functions", mode="before")
    @classmethod
    def _functions_default(cls, v: Any) -> Any:
        return v or {}

    def get_function_display_name(self, function_key: str, stage: str) -> str:
        """Return the declared name of a function, or the framework default."""
        function = self.functions[function_key]
        if function.name:
            return function.name
        return f"{self.service}-{stage}-{function_key}"
