"""
tests/test_config.py

Covers:
  - Defaults
  - Unset (None) falls back to the default
  - Construction from snake_case and camelCase option names
  - Copies
  - Access to the shared token table
"""

import pytest

from datekit import TOKENS, DateConfig


class TestDefaults:

    def test_defaults(self):
        config = DateConfig()
        assert config.locale == "en"
        assert config.locale_matcher == "best fit"
        assert config.style == "long"
        assert config.numeric == "auto"
        assert config.include_quarter_unit is False
        assert config.include_week_unit is True
        assert config.time_zone_origin is None
        assert config.time_zone_target == "UTC"

    def test_none_resets_to_default(self):
        config = DateConfig(locale="fr", style="short")
        config.locale = None
        config.style = None
        assert config.locale == "en"
        assert config.style == "long"

    def test_none_at_construction(self):
        assert DateConfig(time_zone_target=None).time_zone_target == "UTC"

    def test_origin_may_be_unset(self):
        config = DateConfig(time_zone_origin="UTC")
        config.time_zone_origin = None
        assert config.time_zone_origin is None

    def test_writes_are_not_validated(self):
        config = DateConfig()
        config.locale = "xx-nonsense"
        config.time_zone_target = "Not/A_Zone"
        assert config.locale == "xx-nonsense"

    def test_unknown_attribute_rejected(self):
        with pytest.raises(AttributeError):
            DateConfig().colour = "blue"


class TestFromMapping:

    def test_camel_case_names(self):
        config = DateConfig.from_mapping(
            {
                "localeMatcher": "lookup",
                "quarter": True,
                "week": False,
                "timeZoneOrigin": "Europe/Paris",
                "timeZoneTarget": "Asia/Tokyo",
            }
        )
        assert config.locale_matcher == "lookup"
        assert config.include_quarter_unit is True
        assert config.include_week_unit is False
        assert config.time_zone_origin == "Europe/Paris"
        assert config.time_zone_target == "Asia/Tokyo"

    def test_snake_case_names(self):
        config = DateConfig.from_mapping({"include_week_unit": False, "locale": "de"})
        assert config == DateConfig(locale="de", include_week_unit=False)

    def test_none_means_unset(self):
        assert DateConfig.from_mapping({"numeric": None}).numeric == "auto"

    def test_unknown_key_raises(self):
        with pytest.raises(TypeError):
            DateConfig.from_mapping({"calendar": "gregorian"})


class TestCopy:

    def test_copy_is_independent(self):
        config = DateConfig(locale="fr")
        clone = config.copy()
        clone.locale = "de"
        assert config.locale == "fr"
        assert clone != config

    def test_token_table_is_shared(self):
        assert DateConfig().token_table is TOKENS
        assert DateConfig().token_table is DateConfig().token_table
