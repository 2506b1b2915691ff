"""
tests/intl/test_relative_format.py

Covers:
  - Past / future phrasing and pluralisation
  - Zero magnitude
  - Styles and locales
  - Option validation
  - Locale resolution (lookup, best fit, default fallback)
"""

import pytest

from datekit.intl import phrase, resolve_locale


# ── Phrasing ──────────────────────────────────────────────────────────────────

class TestPhrase:

    def test_past(self):
        assert phrase("en", {}, -5, "day") == "5 days ago"

    def test_future(self):
        assert phrase("en", {}, 4, "hour") == "in 4 hours"

    def test_singular(self):
        assert phrase("en", {}, 1, "day") == "in 1 day"
        assert phrase("en", {}, -1, "year") == "1 year ago"

    def test_zero_is_future(self):
        assert phrase("en", {}, 0, "second") == "in 0 seconds"

    def test_grouped_number(self):
        assert phrase("en", {}, 1000, "day") == "in 1,000 days"

    def test_quarter(self):
        assert phrase("en", {}, 2, "quarter") == "in 2 quarters"

    def test_options_may_be_none(self):
        assert phrase("en", None, -3, "minute") == "3 minutes ago"

    def test_short_style(self):
        assert phrase("en", {"style": "short"}, 4, "hour") == "in 4 hr."

    def test_narrow_style_renders(self):
        assert "4" in phrase("en", {"style": "narrow"}, 4, "hour")

    def test_french(self):
        assert phrase("fr", {}, -5, "day") == "il y a 5 jours"

    def test_numeric_modes_accepted(self):
        for numeric in ("auto", "always", "never"):
            assert phrase("en", {"numeric": numeric}, -2, "week") == "2 weeks ago"


class TestPhraseValidation:

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            phrase("en", {}, 1, "fortnight")

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            phrase("en", {"style": "tiny"}, 1, "day")

    def test_unknown_numeric(self):
        with pytest.raises(ValueError):
            phrase("en", {"numeric": "sometimes"}, 1, "day")

    def test_unknown_matcher(self):
        with pytest.raises(ValueError):
            phrase("en", {"localeMatcher": "closest"}, 1, "day")


# ── Locale resolution ─────────────────────────────────────────────────────────

class TestResolveLocale:

    def test_dash_and_underscore_tags(self):
        assert str(resolve_locale("fr-FR")) == "fr_FR"
        assert str(resolve_locale("fr_FR")) == "fr_FR"

    def test_lookup_truncates_unknown_region(self):
        assert resolve_locale("en-XX", "lookup").language == "en"

    def test_best_fit_negotiates_unknown_region(self):
        assert resolve_locale("de-XX", "best fit").language == "de"

    def test_unknown_language_falls_back_to_default(self):
        assert str(resolve_locale("zz-ZZ", "lookup")) == "en"

    def test_malformed_tag_raises(self):
        with pytest.raises(ValueError):
            resolve_locale("not a locale!")
