"""Core components for FHIR Explorer."""
