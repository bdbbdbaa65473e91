"""FHIR Explorer test suite."""
