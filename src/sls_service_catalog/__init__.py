"""Compile serverless functions into AWS Service Catalog provisioned products."""

from .compiler import AwsCompileServiceCatalog
from .models.resources import PROVISIONED_PRODUCT_TYPE
from .models.service import FunctionDefinition, ServiceDefinition

__version__ = "0.1.0"

__all__ = [
    "PROVISIONED_PRODUCT_TYPE",
    "AwsCompileServiceCatalog",
    "FunctionDefinition",
    "ServiceDefinition",
]
