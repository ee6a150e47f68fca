"""Tests for locale_utils.py.

Covers normalize_locale, get_babel_locale, and get_system_locale functions.
Includes property-based tests with Hypothesis for locale normalization.

Python 3.13+.
"""

import os
from unittest.mock import patch

import pytest
from babel import Locale, UnknownLocaleError
from hypothesis import given
from hypothesis import strategies as st

from numericformatter.locale_utils import (
    get_babel_locale,
    get_system_locale,
    normalize_locale,
)


class TestNormalizeLocale:
    """Test normalize_locale function.

    Case is preserved so that keys read like the identifiers callers pass.
    """

    def test_bcp47_to_posix(self) -> None:
        """BCP-47 locale code converted to POSIX format."""
        assert normalize_locale("en-US") == "en_US"

    def test_already_normalized(self) -> None:
        assert normalize_locale("tr_TR") == "tr_TR"

    def test_simple_locale(self) -> None:
        assert normalize_locale("en") == "en"

    def test_multiple_hyphens(self) -> None:
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"

    def test_encoding_stripped(self) -> None:
        assert normalize_locale("de_DE.UTF-8") == "de_DE"

    def test_whitespace_stripped(self) -> None:
        assert normalize_locale("  ja_JP \n") == "ja_JP"

    @pytest.mark.parametrize("code", ["", "   ", ".UTF-8"])
    def test_empty_rejected(self, code: str) -> None:
        with pytest.raises(ValueError, match="Empty locale"):
            normalize_locale(code)

    def test_delimiter_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not contain"):
            normalize_locale("en:US")

    @given(
        parts=st.lists(
            st.text(alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ", min_size=1),
            min_size=1,
            max_size=4,
        )
    )
    def test_hyphen_and_underscore_forms_agree(self, parts: list[str]) -> None:
        """Property: BCP-47 and POSIX spellings normalize identically."""
        assert normalize_locale("-".join(parts)) == normalize_locale("_".join(parts))

    @given(code=st.text(alphabet="abcdefghijklmnopqrstuvwxyz_-", min_size=1))
    def test_idempotent(self, code: str) -> None:
        """Property: normalizing twice changes nothing."""
        once = normalize_locale(code)
        assert normalize_locale(once) == once


class TestGetBabelLocale:
    """Test get_babel_locale function."""

    def test_bcp47_format(self) -> None:
        locale = get_babel_locale("en-US")
        assert isinstance(locale, Locale)
        assert locale.language == "en"
        assert locale.territory == "US"

    def test_posix_format(self) -> None:
        locale = get_babel_locale("tr_TR")
        assert locale.language == "tr"
        assert locale.territory == "TR"

    def test_simple_locale(self) -> None:
        locale = get_babel_locale("fr")
        assert locale.language == "fr"
        assert locale.territory is None

    def test_caching(self) -> None:
        """Repeated lookups return the cached Locale object."""
        assert get_babel_locale("de_DE") is get_babel_locale("de_DE")

    def test_invalid_locale_raises(self) -> None:
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("zz_ZZ")


class TestGetSystemLocale:
    """Test get_system_locale function with environment and OS detection."""

    def test_getlocale_success(self) -> None:
        """OS-level locale.getlocale() wins over the environment."""
        with patch("locale.getlocale", return_value=("en_GB", "UTF-8")):  # noqa: SIM117
            with patch.dict(os.environ, {"LC_ALL": "de_DE"}, clear=True):
                assert get_system_locale() == "en_GB"

    def test_getlocale_with_encoding(self) -> None:
        with patch("locale.getlocale", return_value=("de_DE.UTF-8", "UTF-8")):
            assert get_system_locale() == "de_DE"

    @pytest.mark.parametrize("pseudo", ["C", "POSIX"])
    def test_getlocale_pseudo_locales_filtered(self, pseudo: str) -> None:
        with patch("locale.getlocale", return_value=(pseudo, None)):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "fr_FR"}, clear=True):
                assert get_system_locale() == "fr_FR"

    def test_getlocale_valueerror_fallback(self) -> None:
        with patch("locale.getlocale", side_effect=ValueError("mock error")):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "pt_BR"}, clear=True):
                assert get_system_locale() == "pt_BR"

    def test_lc_all_priority(self) -> None:
        """LC_ALL environment variable has highest priority."""
        with patch("locale.getlocale", return_value=(None, None)):
            env = {"LC_ALL": "de_DE", "LC_MESSAGES": "fr_FR", "LANG": "en_US"}
            with patch.dict(os.environ, env, clear=True):
                assert get_system_locale() == "de_DE"

    def test_lc_messages_fallback(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):
            env = {"LC_MESSAGES": "fr_FR", "LANG": "en_US"}
            with patch.dict(os.environ, env, clear=True):
                assert get_system_locale() == "fr_FR"

    def test_lang_fallback(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "ja_JP.UTF-8"}, clear=True):
                assert get_system_locale() == "ja_JP"

    @pytest.mark.parametrize("value", ["C", "POSIX", "C.UTF-8", ""])
    def test_env_pseudo_locales_filtered(self, value: str) -> None:
        with patch("locale.getlocale", return_value=(None, None)):
            env = {"LC_ALL": value, "LANG": "ko_KR"}
            with patch.dict(os.environ, env, clear=True):
                assert get_system_locale() == "ko_KR"

    def test_env_with_delimiter_skipped(self) -> None:
        """A variable that is not a usable identifier falls through."""
        with patch("locale.getlocale", return_value=(None, None)):
            env = {"LC_ALL": "en:US", "LANG": "es_ES"}
            with patch.dict(os.environ, env, clear=True):
                assert get_system_locale() == "es_ES"

    def test_bcp47_normalized(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "pt-BR"}, clear=True):
                assert get_system_locale() == "pt_BR"

    def test_no_locale_default_fallback(self) -> None:
        """No locale detected returns en_US."""
        with patch("locale.getlocale", return_value=(None, None)):  # noqa: SIM117
            with patch.dict(os.environ, {}, clear=True):
                assert get_system_locale() == "en_US"
