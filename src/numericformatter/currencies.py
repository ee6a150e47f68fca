"""ISO 4217 currency codes for currency styles.

Provides the closed CommonCurrency enumeration, the CurrencyCode tagged
union consumed by CurrencyStyle, and Babel-backed lookups:

- default_currency_for_locale: territory currency of a locale
- list_common_currency_codes: codes currently in use as legal tender
  according to CLDR territory data

CommonCurrency is static data. list_common_currency_codes() is the live
reference it is checked against (see scripts/verify_iso4217.py and the
test suite).

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache

from babel import UnknownLocaleError
from babel.core import get_global
from babel.numbers import get_territory_currencies

from numericformatter.constants import FALLBACK_CURRENCY, MAX_LOCALE_CACHE_SIZE
from numericformatter.locale_utils import get_babel_locale, normalize_locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Enumeration
    "CommonCurrency",
    # Tagged union
    "CommonCurrencyCode",
    "CustomCurrencyCode",
    "CurrencyCode",
    "currency_code",
    # Babel lookups
    "default_currency_for_locale",
    "list_common_currency_codes",
    "clear_currency_cache",
]

logger = logging.getLogger(__name__)


class CommonCurrency(StrEnum):
    """Common ISO 4217 currency codes.

    Members equal list_common_currency_codes(): currencies that are legal
    tender in at least one CLDR territory. Retired codes (HRK, VEF, ...) are
    not members; pass them as CustomCurrencyCode.

    StrEnum provides automatic string conversion: str(CommonCurrency.USD) == "USD"
    """

    AED = "AED"
    AFN = "AFN"
    ALL = "ALL"
    AMD = "AMD"
    AOA = "AOA"
    ARS = "ARS"
    AUD = "AUD"
    AWG = "AWG"
    AZN = "AZN"
    BAM = "BAM"
    BBD = "BBD"
    BDT = "BDT"
    BGN = "BGN"
    BHD = "BHD"
    BIF = "BIF"
    BMD = "BMD"
    BND = "BND"
    BOB = "BOB"
    BRL = "BRL"
    BSD = "BSD"
    BTN = "BTN"
    BWP = "BWP"
    BYN = "BYN"
    BZD = "BZD"
    CAD = "CAD"
    CDF = "CDF"
    CHF = "CHF"
    CLP = "CLP"
    CNY = "CNY"
    COP = "COP"
    CRC = "CRC"
    CUP = "CUP"
    CVE = "CVE"
    CZK = "CZK"
    DJF = "DJF"
    DKK = "DKK"
    DOP = "DOP"
    DZD = "DZD"
    EGP = "EGP"
    ERN = "ERN"
    ETB = "ETB"
    EUR = "EUR"
    FJD = "FJD"
    FKP = "FKP"
    GBP = "GBP"
    GEL = "GEL"
    GHS = "GHS"
    GIP = "GIP"
    GMD = "GMD"
    GNF = "GNF"
    GTQ = "GTQ"
    GYD = "GYD"
    HKD = "HKD"
    HNL = "HNL"
    HTG = "HTG"
    HUF = "HUF"
    IDR = "IDR"
    ILS = "ILS"
    INR = "INR"
    IQD = "IQD"
    IRR = "IRR"
    ISK = "ISK"
    JMD = "JMD"
    JOD = "JOD"
    JPY = "JPY"
    KES = "KES"
    KGS = "KGS"
    KHR = "KHR"
    KMF = "KMF"
    KPW = "KPW"
    KRW = "KRW"
    KWD = "KWD"
    KYD = "KYD"
    KZT = "KZT"
    LAK = "LAK"
    LBP = "LBP"
    LKR = "LKR"
    LRD = "LRD"
    LSL = "LSL"
    LYD = "LYD"
    MAD = "MAD"
    MDL = "MDL"
    MGA = "MGA"
    MKD = "MKD"
    MMK = "MMK"
    MNT = "MNT"
    MOP = "MOP"
    MRU = "MRU"
    MUR = "MUR"
    MVR = "MVR"
    MWK = "MWK"
    MXN = "MXN"
    MYR = "MYR"
    MZN = "MZN"
    NAD = "NAD"
    NGN = "NGN"
    NIO = "NIO"
    NOK = "NOK"
    NPR = "NPR"
    NZD = "NZD"
    OMR = "OMR"
    PAB = "PAB"
    PEN = "PEN"
    PGK = "PGK"
    PHP = "PHP"
    PKR = "PKR"
    PLN = "PLN"
    PYG = "PYG"
    QAR = "QAR"
    RON = "RON"
    RSD = "RSD"
    RUB = "RUB"
    RWF = "RWF"
    SAR = "SAR"
    SBD = "SBD"
    SCR = "SCR"
    SDG = "SDG"
    SEK = "SEK"
    SGD = "SGD"
    SHP = "SHP"
    SLE = "SLE"
    SOS = "SOS"
    SRD = "SRD"
    SSP = "SSP"
    STN = "STN"
    SYP = "SYP"
    SZL = "SZL"
    THB = "THB"
    TJS = "TJS"
    TMT = "TMT"
    TND = "TND"
    TOP = "TOP"
    TRY = "TRY"
    TTD = "TTD"
    TWD = "TWD"
    TZS = "TZS"
    UAH = "UAH"
    UGX = "UGX"
    USD = "USD"
    UYU = "UYU"
    UZS = "UZS"
    VES = "VES"
    VND = "VND"
    VUV = "VUV"
    WST = "WST"
    XAF = "XAF"
    XCD = "XCD"
    XCG = "XCG"
    XOF = "XOF"
    XPF = "XPF"
    YER = "YER"
    ZAR = "ZAR"
    ZMW = "ZMW"
    ZWG = "ZWG"


@dataclass(frozen=True, slots=True)
class CommonCurrencyCode:
    """Currency code drawn from the CommonCurrency enumeration."""

    code: CommonCurrency

    @property
    def description(self) -> str:
        """Three-letter code of the enum member."""
        return self.code.value


@dataclass(frozen=True, slots=True)
class CustomCurrencyCode:
    """Caller-supplied currency code outside the CommonCurrency set.

    The code is used verbatim and is not validated. An unknown code is
    accepted here and surfaces later as a render failure.
    """

    code: str

    @property
    def description(self) -> str:
        """The raw code string."""
        return self.code


type CurrencyCode = CommonCurrencyCode | CustomCurrencyCode


def currency_code(value: str | CommonCurrency | CurrencyCode) -> CurrencyCode:
    """Coerce a currency value into its tagged form.

    Strings naming a CommonCurrency member (exact, case-sensitive match)
    become CommonCurrencyCode; any other string becomes CustomCurrencyCode.

    Examples:
        >>> currency_code("EUR")
        CommonCurrencyCode(code=<CommonCurrency.EUR: 'EUR'>)
        >>> currency_code("BTC")
        CustomCurrencyCode(code='BTC')
    """
    match value:
        case CommonCurrencyCode() | CustomCurrencyCode():
            return value
        case CommonCurrency():
            return CommonCurrencyCode(value)
        case str() if value in CommonCurrency.__members__:
            return CommonCurrencyCode(CommonCurrency(value))
        case str():
            return CustomCurrencyCode(value)
        case _:
            msg = f"Expected a currency code, got {type(value).__name__}"
            raise TypeError(msg)


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _default_currency_impl(locale_norm: str) -> str:
    try:
        babel_locale = get_babel_locale(locale_norm)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(
            "Unknown locale '%s': %s. Defaulting currency to %s",
            locale_norm,
            e,
            FALLBACK_CURRENCY,
        )
        return FALLBACK_CURRENCY

    if not babel_locale.territory:
        return FALLBACK_CURRENCY

    currencies = get_territory_currencies(babel_locale.territory, tender=True)
    if not currencies:
        return FALLBACK_CURRENCY
    return str(currencies[0])


def default_currency_for_locale(locale: str) -> str:
    """Get the currency a locale's territory uses.

    Args:
        locale: Locale code (BCP-47 or POSIX). Language-only locales such as
            "en" have no territory and resolve to the fallback.

    Returns:
        ISO 4217 code of the first active legal tender of the locale's
        territory, or "USD" if the locale is unknown, has no territory, or
        the territory has no legal tender data.

    Examples:
        >>> default_currency_for_locale("tr_TR")
        'TRY'
        >>> default_currency_for_locale("en")
        'USD'

    Thread-safe. Results cached per normalized locale.
    """
    return _default_currency_impl(normalize_locale(locale))


@lru_cache(maxsize=1)
def list_common_currency_codes() -> frozenset[str]:
    """List ISO 4217 codes currently in use as legal tender.

    Walks every territory in Babel's CLDR territory currency data and
    collects currencies that are tender and have no end date as of today.

    Returns:
        Frozen set of three-letter codes.

    Thread-safe. Result cached for the process lifetime; call
    clear_currency_cache() to recompute.
    """
    territories = get_global("territory_currencies")
    codes: set[str] = set()
    for territory in territories:
        codes.update(get_territory_currencies(territory, tender=True))
    return frozenset(codes)


def clear_currency_cache() -> None:
    """Clear cached currency lookups. Thread-safe."""
    _default_currency_impl.cache_clear()
    list_common_currency_codes.cache_clear()
