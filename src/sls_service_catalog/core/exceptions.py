"""
Service Catalog Plugin Exception Classes

Custom exceptions raised while compiling functions into provisioned products.
"""

from typing import Any


class ServiceCatalogPluginError(Exception):
    """Base exception for all Service Catalog plugin errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


class InvalidEnvironmentKey(ServiceCatalogPluginError):
    """Raised when an environment variable name contains disallowed characters."""

    def __init__(self, key: str, function_name: str | None = None) -> None:
        context = {"variable": key}
        if function_name:
            context["function"] = function_name
        super().__init__(
            f"Invalid characters in environment variable {key}",
            "INVALID_ENVIRONMENT_KEY",
            context,
        )
        self.key = key

    def get_recovery_hint(self) -> str:
        return (
            "Environment variable names may only contain letters, digits and "
            "underscores, and must not start with a digit"
        )


class InvalidEnvironmentValue(ServiceCatalogPluginError):
    """Raised when an environment variable value is not a string or reference."""

    def __init__(
        self, key: str, value: Any = None, function_name: str | None = None
    ) -> None:
        context = {"variable": key}
        if function_name:
            context["function"] = function_name
        if value is not None:
            context["actual_value"] = repr(value)
        super().__init__(
            f"Environment variable {key} must contain string",
            "INVALID_ENVIRONMENT_VALUE",
            context,
        )
        self.key = key

    def get_recovery_hint(self) -> str:
        return (
            "Quote the value so it is read as a string, or use a Ref / "
            "Fn::GetAtt reference"
        )


class MissingArtifact(ServiceCatalogPluginError):
    """Raised when a function's deployment artifact cannot be read."""

    def __init__(
        self,
        message: str,
        artifact_path: str | None = None,
        function_name: str | None = None,
    ) -> None:
        context = {}
        if artifact_path:
            context["artifact"] = artifact_path
        if function_name:
            context["function"] = function_name
        super().__init__(message, "MISSING_ARTIFACT", context)
        self.artifact_path = artifact_path

    def get_recovery_hint(self) -> str:
        return "Package the service first, or check the package.artifact setting"


class TemplateLoadError(ServiceCatalogPluginError):
    """Raised when a custom provisioning template cannot be read or parsed."""

    def __init__(self, message: str, template_path: str | None = None) -> None:
        context = {}
        if template_path:
            context["template"] = template_path
        super().__init__(message, "TEMPLATE_LOAD_ERROR", context)


class ServiceConfigurationError(ServiceCatalogPluginError):
    """Raised when a service definition is invalid or missing required fields."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        source: str | None = None,
    ) -> None:
        context = {}
        if field_name:
            context["field_name"] = field_name
        if source:
            context["source"] = source
        super().__init__(message, "SERVICE_CONFIGURATION_ERROR", context)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the configuration error."""
        if "field_name" in self.context:
            field = self.context["field_name"]
            return f"Ensure the '{field}' field is present and valid"
        return "Check the service file for missing or invalid settings"
