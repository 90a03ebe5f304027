"""
Integration Tests - End-to-End Pipeline Tests.

These tests run the full pipeline over the built-in reference tables.

Test Files:
    - test_assignment_pipeline.py: Full assignment workflow
"""
