"""
Unit Tests - Testing Individual Components in Isolation.

Each component gets a fresh reference dataset and assignment store.

Test Files:
    - test_record_parser.py: Raw JSON parsing
    - test_field_validator.py: Required, referential and length checks
    - test_assignment_limit_rule.py: Assignment count limit
    - test_enricher.py: Name resolution
    - test_reference_data.py: Dataset, store and YAML loader
    - test_config_loader.py: Configuration loading/validation
"""
