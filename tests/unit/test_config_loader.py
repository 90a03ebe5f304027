"""
Unit Tests for the config loader.

Test Aspects Covered:
    ✅ Business Logic: Config loading, profiles and merging
    ✅ Error Handling: Invalid values, missing files, unsafe profile names
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from assignment_pipeline.config.loader import (
    ConfigError,
    available_profiles,
    config_from_dict,
    deep_merge,
    load_config,
    profile_path,
)
from assignment_pipeline.config.models import PipelineConfig

REPO_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Config directory with a base file and one profile."""
    (tmp_path / "config.yaml").write_text(
        "version: '1.0'\nrules:\n  max_assignments_per_sales_person: 3\n"
    )
    profiles = tmp_path / "profiles"
    profiles.mkdir()
    (profiles / "enforce.yaml").write_text("rules:\n  enforce_assignment_limit: true\n")
    return tmp_path


class TestLoadConfig:
    """Test cases for load_config."""

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """
        SCENARIO: Valid YAML configuration file
        EXPECTED: PipelineConfig object created
        """
        # Arrange
        config_content = """
version: "1.0"
validation:
  min_sales_person_length: 5
rules:
  max_assignments_per_sales_person: 3
"""
        (tmp_path / "config.yaml").write_text(config_content)

        # Act
        config = load_config("config.yaml", base_path=tmp_path)

        # Assert
        assert isinstance(config, PipelineConfig)
        assert config.validation.min_sales_person_length == 5
        assert config.rules.max_assignments_per_sales_person == 3
        assert config.rules.enforce_assignment_limit is False

    def test_no_path_gives_defaults(self) -> None:
        assert load_config() == PipelineConfig()

    def test_profile_without_path_rejected(self) -> None:
        with pytest.raises(ConfigError):
            load_config(profile="strict")

    def test_applies_defaults(self) -> None:
        """
        SCENARIO: Minimal config with only a version
        EXPECTED: Defaults applied for missing fields
        """
        config = config_from_dict({"version": "1.0"})

        assert config.validation.min_sales_person_length == 4
        assert config.validation.check_taluka_district is False
        assert config.rules.max_assignments_per_sales_person == 2
        assert config.rules.enforce_assignment_limit is False
        assert config.output.indent == 2

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "empty.yaml").write_text("")

        config = load_config("empty.yaml", base_path=tmp_path)

        assert config == PipelineConfig()

    def test_non_mapping_root_rejected(self, tmp_path: Path) -> None:
        """
        SCENARIO: YAML file whose root is a list
        EXPECTED: ConfigError naming the file
        """
        (tmp_path / "list.yaml").write_text("- 1\n- 2\n")

        with pytest.raises(ConfigError, match="list.yaml: expected a mapping"):
            load_config("list.yaml", base_path=tmp_path)

    def test_validates_invalid_config(self, tmp_path: Path) -> None:
        """
        SCENARIO: Config with invalid values
        EXPECTED: ValidationError raised
        """
        (tmp_path / "invalid.yaml").write_text(
            "rules:\n  max_assignments_per_sales_person: 0\n"
        )

        with pytest.raises(ValidationError):
            load_config("invalid.yaml", base_path=tmp_path)

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config("nonexistent.yaml", base_path=tmp_path)

    def test_absolute_path_ignores_base(self, config_dir: Path, tmp_path_factory) -> None:
        elsewhere = tmp_path_factory.mktemp("elsewhere")

        config = load_config(config_dir / "config.yaml", base_path=elsewhere)

        assert config.rules.max_assignments_per_sales_person == 3


class TestProfiles:
    """Test cases for profile overlays."""

    def test_profile_beside_config_file(self, config_dir: Path) -> None:
        """
        SCENARIO: Profile in the profiles directory next to the config file
        EXPECTED: Overlay merged, base values kept
        """
        config = load_config(config_dir / "config.yaml", profile="enforce")

        assert config.rules.enforce_assignment_limit is True
        assert config.rules.max_assignments_per_sales_person == 3

    def test_missing_profile(self, config_dir: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Profile not found"):
            load_config(config_dir / "config.yaml", profile="nope")

    @pytest.mark.parametrize(
        "name", ["../config", "..", "sub/enforce", "/etc/passwd", "enforce.yaml", ""]
    )
    def test_path_like_names_rejected(self, config_dir: Path, name: str) -> None:
        """
        SCENARIO: Profile name containing separators, dots or nothing at all
        EXPECTED: ConfigError before any file is opened
        """
        with pytest.raises(ConfigError, match="Invalid profile name"):
            profile_path(config_dir / "config.yaml", name)

    def test_symlink_outside_profiles_rejected(
        self, config_dir: Path, tmp_path_factory
    ) -> None:
        """
        SCENARIO: Profile file is a symlink to a file outside profiles/
        EXPECTED: ConfigError
        """
        outside = tmp_path_factory.mktemp("outside") / "secret.yaml"
        outside.write_text("rules:\n  enforce_assignment_limit: true\n")
        (config_dir / "profiles" / "leak.yaml").symlink_to(outside)

        with pytest.raises(ConfigError, match="Profile outside"):
            load_config(config_dir / "config.yaml", profile="leak")

    def test_available_profiles(self, config_dir: Path) -> None:
        (config_dir / "profiles" / "audit.yaml").write_text("{}\n")

        assert available_profiles(config_dir / "config.yaml") == ["audit", "enforce"]

    def test_no_profiles_directory(self, tmp_path: Path) -> None:
        assert available_profiles(tmp_path / "config.yaml") == []


class TestDeepMerge:
    """Test cases for deep_merge."""

    def test_overlay_wins_nested(self) -> None:
        """
        SCENARIO: Two configs merged together
        EXPECTED: Overlay values override base values, siblings kept
        """
        base = {"rules": {"max_assignments_per_sales_person": 2, "enforce_assignment_limit": False}}
        overlay = {"rules": {"enforce_assignment_limit": True}}

        merged = deep_merge(base, overlay)

        assert merged["rules"]["max_assignments_per_sales_person"] == 2
        assert merged["rules"]["enforce_assignment_limit"] is True

    def test_base_not_mutated(self) -> None:
        base = {"output": {"indent": 2}}

        deep_merge(base, {"output": {"indent": 4}})

        assert base == {"output": {"indent": 2}}

    def test_scalar_replaces_mapping(self) -> None:
        merged = deep_merge({"output": {"indent": 2}}, {"output": None})

        assert merged["output"] is None


class TestShippedConfig:
    """Test cases for the config files shipped with the project."""

    def test_default_config_matches_model_defaults(self) -> None:
        config = load_config("config/default.yaml", base_path=REPO_ROOT)

        assert config == PipelineConfig()

    def test_strict_profile(self) -> None:
        """
        SCENARIO: Default config with the strict profile
        EXPECTED: Enforcement and cross-check enabled, other values kept
        """
        config = load_config("config/default.yaml", profile="strict", base_path=REPO_ROOT)

        assert config.rules.enforce_assignment_limit is True
        assert config.validation.check_taluka_district is True
        assert config.rules.max_assignments_per_sales_person == 2

    def test_shipped_profiles_listed(self) -> None:
        assert "strict" in available_profiles(REPO_ROOT / "config" / "default.yaml")
