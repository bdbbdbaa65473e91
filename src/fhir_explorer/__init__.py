"""FHIR Explorer: conformance and performance testing for FHIR servers."""

__version__ = "1.0.0"
