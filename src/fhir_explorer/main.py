"""Command line runner for FHIR server test suites."""

import argparse
import asyncio
import sys
from typing import List, Optional

from pydantic import SecretStr

from fhir_explorer.config import Settings, get_settings
from fhir_explorer.testing.client import HttpResourceClient
from fhir_explorer.testing.framework import (
    FHIRTestingFramework,
    create_testing_framework,
)
from fhir_explorer.testing.models import (
    AuthenticationConfig,
    AuthType,
    ReportFormat,
    TestEnvironment,
    TestResult,
    TestStatus,
)
from fhir_explorer.testing.standard_tests import COMPLIANCE_SUITE_ID
from fhir_explorer.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Run FHIR conformance and performance tests against a server"
    )
    parser.add_argument(
        "--server-url",
        default=settings.default_server_url,
        help="Base URL of the FHIR server under test",
    )
    parser.add_argument(
        "--server-version",
        default=settings.default_server_version,
        help="Declared server name/version recorded in results",
    )
    parser.add_argument(
        "--fhir-version",
        default=settings.default_fhir_version,
        help="Declared FHIR version of the server",
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--suite",
        default=COMPLIANCE_SUITE_ID,
        help="Test suite id to execute",
    )
    target.add_argument(
        "--test",
        action="append",
        dest="tests",
        metavar="TEST_ID",
        help="Test case id to execute (repeatable)",
    )
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in ReportFormat],
        default=settings.default_report_format,
        help="Report format",
    )
    parser.add_argument(
        "--output-dir",
        default=settings.report_directory,
        help="Directory the report is written to",
    )
    parser.add_argument(
        "--auth-type",
        choices=[auth.value for auth in AuthType],
        default=AuthType.NONE.value,
        help="Authentication scheme for the server",
    )
    parser.add_argument("--username", help="Username for basic authentication")
    parser.add_argument("--password", help="Password for basic authentication")
    parser.add_argument("--token", help="Token for bearer authentication")
    parser.add_argument(
        "--list",
        action="store_true",
        help="List registered test suites and test cases, then exit",
    )
    return parser


def build_environment(args: argparse.Namespace, settings: Settings) -> TestEnvironment:
    """Create the run environment from command line arguments."""
    return TestEnvironment(
        server_url=args.server_url,
        server_version=args.server_version,
        fhir_version=args.fhir_version,
        test_runner=settings.test_runner,
        user_agent=settings.user_agent,
        authentication=AuthenticationConfig(
            type=AuthType(args.auth_type),
            username=args.username,
            password=SecretStr(args.password) if args.password else None,
            token=SecretStr(args.token) if args.token else None,
        ),
    )


def print_catalogue(framework: FHIRTestingFramework) -> None:
    """Print registered suites and test cases."""
    print("Test suites:")
    for suite in framework.get_all_test_suites():
        print(f"  {suite.id} (v{suite.version}): {suite.name}")
        for test_id in suite.test_cases:
            print(f"    - {test_id}")
    print("Test cases:")
    for test_case in framework.get_all_test_cases():
        print(
            f"  {test_case.id} [{test_case.category.value}/"
            f"{test_case.severity.value}]: {test_case.name}"
        )


async def run(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the selected tests and write the report."""
    environment = build_environment(args, settings)

    async with HttpResourceClient(timeout=settings.request_timeout) as client:
        framework = create_testing_framework(client=client, settings=settings)
        if args.list:
            print_catalogue(framework)
            return 0

        results: List[TestResult] = []
        if args.tests:
            for test_id in args.tests:
                results.append(await framework.execute_test_case(test_id, environment))
        else:
            results = await framework.execute_test_suite(args.suite, environment)

    if not results:
        requested = ", ".join(args.tests) if args.tests else f"suite '{args.suite}'"
        print(f"No tests executed for {requested}")
        return 1

    for result in results:
        reason = result.details.failure_reason
        line = f"{result.status.value:<8} {result.test_id} ({result.execution_time} ms)"
        print(f"{line}: {reason}" if reason else line)

    path = framework.export_test_report(args.format, args.output_dir)
    print(f"\nReport saved to: {path}")

    return 0 if all(r.status == TestStatus.PASSED for r in results) else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point."""
    settings = get_settings()
    setup_logging(settings)
    args = build_parser(settings).parse_args(argv)
    return asyncio.run(run(args, settings))


if __name__ == "__main__":
    sys.exit(main())
