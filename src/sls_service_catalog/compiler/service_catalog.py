"""Compile declared functions into Service Catalog provisioned products."""

import logging
from typing import Any

from sls_service_catalog.core.exceptions import (
    MissingArtifact,
    ServiceConfigurationError,
)
from sls_service_catalog.core.io import FileArtifactStore, FileLoader
from sls_service_catalog.core.naming import (
    get_provisioned_product_logical_id,
    get_provisioned_product_name,
)
from sls_service_catalog.core.protocols import ArtifactStore, DocumentLoader
from sls_service_catalog.models.resources import (
    ProvisionedProductProperties,
    ProvisioningParameter,
    ResourceEntry,
)
from sls_service_catalog.models.service import FunctionDefinition, ServiceDefinition

from .environment import serialize_environment, validate_environment
from .parameters import (
    ENVIRONMENT_PARAMETER,
    build_parameter_list,
    compute_fingerprint,
    extract_template_parameters,
    get_artifact_s3_key,
    merge_parameters,
)

logger = logging.getLogger(__name__)


class AwsCompileServiceCatalog:
    """
    Replace plain function deployments with Service Catalog provisioned products.

    For each declared function, one
    ``AWS::ServiceCatalog::CloudFormationProvisionedProduct`` resource is
    written into the caller's compiled template. The product receives the
    function's code location, fingerprint, handler and environment as
    provisioning parameters.

    The compiled template is passed to ``compile_functions`` on every call
    and never kept on the instance.
    """

    def __init__(
        self,
        service: ServiceDefinition,
        options: dict[str, Any] | None = None,
        artifact_store: ArtifactStore | None = None,
        loader: DocumentLoader | None = None,
    ) -> None:
        """
        Initialize the compiler.

        Args:
            service: The validated service definition
            options: CLI options; ``stage`` overrides the provider stage
            artifact_store: Source of artifact bytes (defaults to the file system)
            loader: Loader for the custom provisioning template
        """
        self._logger = logger.getChild(self.__class__.__name__)
        self.service = service
        self.options = options or {}
        self.artifact_store = artifact_store or FileArtifactStore()
        self.loader = loader or FileLoader()
        self.hooks = {"package:compileFunctions": self.compile_functions}

    @property
    def stage(self) -> str:
        return self.options.get("stage") or self.service.provider.stage

    def compile_functions(self, document: dict[str, Any]) -> None:
        """
        Add one provisioned product per declared function to ``document``.

        Functions are processed in declaration order. The first failure
        aborts the call; entries already inserted are left in place and must
        not be relied on.

        Args:
            document: Compiled CloudFormation template, mutated in place

        Raises:
            InvalidEnvironmentKey: If an environment variable name is invalid
            InvalidEnvironmentValue: If an environment variable value is invalid
            MissingArtifact: If a function's artifact cannot be read
            ServiceConfigurationError: If two function keys share a resource key
            TemplateLoadError: If the custom template cannot be loaded
        """
        functions = self.service.functions
        self._logger.info(
            f"Compiling {len(functions)} function(s) of service "
            f"'{self.service.service}' into provisioned products"
        )

        try:
            resources = document.setdefault("Resources", {})
            template_parameters = self._load_template_parameters()
            produced: dict[str, str] = {}

            for function_key in functions:
                logical_id = get_provisioned_product_logical_id(function_key)
                if logical_id in produced:
                    raise ServiceConfigurationError(
                        f"Functions '{produced[logical_id]}' and '{function_key}' "
                        f"both map to resource '{logical_id}'",
                        field_name=f"functions.{function_key}",
                    )
                produced[logical_id] = function_key

                entry = self.compile_function(function_key, template_parameters)
                resources[logical_id] = entry.to_cfn()
                self._logger.debug(f"Added resource '{logical_id}'")

        except Exception as e:
            self._logger.error(f"Service Catalog compilation failed: {e}")
            raise

        self._logger.info("Provisioned product compilation completed")

    def compile_function(
        self,
        function_key: str,
        template_parameters: list[ProvisioningParameter] | None = None,
    ) -> ResourceEntry:
        """
        Build the provisioned product resource for a single function.

        Args:
            function_key: Key of the function in the service's functions map
            template_parameters: Base parameters from the custom template

        Returns:
            The resource entry; the caller decides where to store it
        """
        function = self.service.functions[function_key]
        display_name = self.service.get_function_display_name(
            function_key, self.stage
        )

        environment = self._merged_environment(function)
        classified = validate_environment(environment, function_name=function_key)

        artifact = self._resolve_artifact(function_key, function)
        fingerprint = self._fingerprint_artifact(function_key, artifact)

        provider = self.service.provider
        package = self.service.package
        computed = build_parameter_list(
            {
                "S3Bucket": provider.deployment_bucket,
                "S3Key": get_artifact_s3_key(
                    artifact, package.artifact_directory_name
                ),
                "CodeSha256": fingerprint,
                "Handler": function.handler,
                "LambdaName": display_name,
                "LambdaStage": self.stage,
                "Runtime": function.runtime or provider.runtime,
                "MemorySize": str(function.memory_size or provider.memory_size),
                "Timeout": str(function.timeout or provider.timeout),
                ENVIRONMENT_PARAMETER: (
                    serialize_environment(classified) if classified else None
                ),
            }
        )

        return ResourceEntry(
            properties=ProvisionedProductProperties(
                product_id=provider.sc_product_id,
                provisioning_artifact_name=provider.sc_product_version,
                provisioning_parameters=merge_parameters(
                    template_parameters or [], computed
                ),
                provisioned_product_name=get_provisioned_product_name(display_name),
            )
        )

    def _load_template_parameters(self) -> list[ProvisioningParameter]:
        template_path = self.service.provider.sc_product_template
        if not template_path:
            return []

        self._logger.info(f"Loading custom provisioning template: {template_path}")
        document = self.loader.load(template_path)
        parameters = extract_template_parameters(document, template_path)
        self._logger.debug(
            f"Custom template declares {len(parameters)} provisioning parameter(s)"
        )
        return parameters

    def _merged_environment(self, function: FunctionDefinition) -> dict[str, Any]:
        environment = dict(self.service.provider.environment or {})
        environment.update(function.environment or {})
        return environment

    def _resolve_artifact(
        self, function_key: str, function: FunctionDefinition
    ) -> str:
        artifact = function.package.artifact or self.service.package.artifact
        if not artifact:
            raise MissingArtifact(
                f"No artifact configured for function {function_key}",
                function_name=function_key,
            )
        return artifact

    def _fingerprint_artifact(self, function_key: str, artifact: str) -> str:
        try:
            content = self.artifact_store.read(artifact)
        except OSError as e:
            raise MissingArtifact(
                f"Cannot read artifact {artifact}: {e}",
                artifact_path=artifact,
                function_name=function_key,
            ) from e
        return compute_fingerprint(content)
