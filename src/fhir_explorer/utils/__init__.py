"""Utility modules for FHIR Explorer."""
