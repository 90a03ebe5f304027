"""
Test Suite for the Assignment Pipeline.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end pipeline tests
    - fixtures/: Shared test helpers and sample reference data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
