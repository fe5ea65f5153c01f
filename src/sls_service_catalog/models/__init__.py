from .resources import (
    PROVISIONED_PRODUCT_TYPE,
    ProvisionedProductProperties,
    ProvisioningParameter,
    ResourceEntry,
)
from .service import (
    FunctionDefinition,
    PackageSettings,
    ProviderSettings,
    ServiceDefinition,
)

__all__ = [
    "PROVISIONED_PRODUCT_TYPE",
    "FunctionDefinition",
    "PackageSettings",
    "ProviderSettings",
    "ProvisionedProductProperties",
    "ProvisioningParameter",
    "ResourceEntry",
    "ServiceDefinition",
]
