"""Tests for skills_scanner.config.validation."""

from __future__ import annotations

import pytest

from skills_scanner.config.validation import _suggest_key, validate_config


class TestSuggestKey:
    """Tests for _suggest_key function."""

    def test_suggests_typo_fix(self) -> None:
        assert _suggest_key("log_levl", {"log_level", "resolution"}) == "log_level"

    def test_returns_none_for_no_match(self) -> None:
        assert _suggest_key("xyz", {"log_level", "resolution"}) is None

    def test_handles_empty_valid_keys(self) -> None:
        assert _suggest_key("test", set()) is None


class TestValidateConfig:
    """Tests for validate_config function."""

    def test_valid_config_returns_no_warnings(self) -> None:
        data = {
            "log_level": "info",
            "resolution": {
                "namespace": "skills-scanner",
                "strategies": ["optional-package", "local-build"],
                "local_build_dir": "target/release",
            },
        }
        assert validate_config(data, source="config.yml") == []

    def test_non_mapping(self) -> None:
        warnings = validate_config(["a"], source="config.yml")  # type: ignore[arg-type]
        assert len(warnings) == 1
        assert "mapping" in warnings[0].message

    def test_unknown_top_level_key_with_suggestion(self) -> None:
        warnings = validate_config({"resolutoin": {}}, source="config.yml")
        assert len(warnings) == 1
        assert warnings[0].key == "resolutoin"
        assert warnings[0].suggestion == "resolution"

    def test_invalid_log_level(self) -> None:
        warnings = validate_config({"log_level": "verbose"}, source="config.yml")
        assert len(warnings) == 1
        assert "Invalid log_level" in warnings[0].message

    def test_log_level_wrong_type(self) -> None:
        warnings = validate_config({"log_level": 10}, source="config.yml")
        assert "must be a string" in warnings[0].message

    def test_unknown_strategy(self) -> None:
        warnings = validate_config(
            {"resolution": {"strategies": ["local-biuld"]}}, source="config.yml"
        )
        assert len(warnings) == 1
        assert warnings[0].suggestion == "local-build"

    def test_strategies_must_be_list(self) -> None:
        warnings = validate_config(
            {"resolution": {"strategies": "local-build"}}, source="config.yml"
        )
        assert "must be a list" in warnings[0].message

    def test_unhashable_strategy_entry(self) -> None:
        warnings = validate_config(
            {"resolution": {"strategies": [{"name": "local-build"}]}}, source="config.yml"
        )
        assert len(warnings) == 1

    def test_empty_local_build_dir(self) -> None:
        warnings = validate_config(
            {"resolution": {"local_build_dir": " "}}, source="config.yml"
        )
        assert warnings[0].key == "resolution.local_build_dir"

    def test_unknown_resolution_key(self) -> None:
        warnings = validate_config(
            {"resolution": {"namspace": "x"}}, source="config.yml"
        )
        assert warnings[0].key == "resolution.namspace"
        assert warnings[0].suggestion == "namespace"

    @pytest.mark.parametrize("key", [1, True, None, 2.5])
    def test_non_string_top_level_key(self, key: object) -> None:
        warnings = validate_config({key: "foo"}, source="config.yml")  # type: ignore[dict-item]

        assert len(warnings) == 1
        assert warnings[0].key == str(key)
        assert f"'{key}'" in warnings[0].message

    @pytest.mark.parametrize("key", [1, True, None])
    def test_non_string_resolution_key(self, key: object) -> None:
        warnings = validate_config(
            {"resolution": {key: "x"}}, source="config.yml"  # type: ignore[dict-item]
        )

        assert len(warnings) == 1
        assert warnings[0].key == f"resolution.{key}"
