"""FHIR conformance and performance testing framework."""

from fhir_explorer.testing.client import (
    ClientResponse,
    HttpResourceClient,
    ResourceClient,
)
from fhir_explorer.testing.engine import TestExecutionEngine
from fhir_explorer.testing.framework import (
    FHIRTestingFramework,
    create_testing_framework,
)
from fhir_explorer.testing.models import (
    AuthenticationConfig,
    AuthType,
    Operation,
    PerformanceThreshold,
    ReportFormat,
    RequestSpec,
    RuleCondition,
    TestCase,
    TestCategory,
    TestConfiguration,
    TestEnvironment,
    TestExpectation,
    TestResult,
    TestSeverity,
    TestStatus,
    TestSuite,
    ValidationRule,
)
from fhir_explorer.testing.registry import TestRegistry
from fhir_explorer.testing.reporter import TestReporter
from fhir_explorer.testing.results import ResultStore
from fhir_explorer.testing.servers import FHIRServer, ServerDirectory

__all__ = [
    "AuthType",
    "AuthenticationConfig",
    "ClientResponse",
    "FHIRServer",
    "FHIRTestingFramework",
    "HttpResourceClient",
    "Operation",
    "PerformanceThreshold",
    "ReportFormat",
    "RequestSpec",
    "ResourceClient",
    "ResultStore",
    "RuleCondition",
    "ServerDirectory",
    "TestCase",
    "TestCategory",
    "TestConfiguration",
    "TestEnvironment",
    "TestExecutionEngine",
    "TestExpectation",
    "TestRegistry",
    "TestReporter",
    "TestResult",
    "TestSeverity",
    "TestStatus",
    "TestSuite",
    "ValidationRule",
    "create_testing_framework",
]
