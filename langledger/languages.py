"""Closed set of supported language codes."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from langledger.errors import LedgerValidationError


class LangCode(str, Enum):
    """Supported language identifiers (two-letter codes)."""

    en = "en"
    ru = "ru"
    de = "de"
    fr = "fr"
    es = "es"
    it = "it"
    ja = "ja"
    ko = "ko"
    zh = "zh"
    pt = "pt"
    nl = "nl"
    pl = "pl"
    tr = "tr"
    ar = "ar"
    th = "th"
    vi = "vi"
    he = "he"
    id = "id"
    uk = "uk"
    ro = "ro"
    cs = "cs"
    el = "el"
    hu = "hu"
    sv = "sv"
    da = "da"
    fi = "fi"
    sk = "sk"
    no = "no"
    hi = "hi"
    bn = "bn"
    ms = "ms"
    ta = "ta"
    te = "te"
    ml = "ml"
    mr = "mr"
    kn = "kn"
    gu = "gu"
    pa = "pa"
    or_ = "or"
    as_ = "as"
    ne = "ne"
    si = "si"
    my = "my"
    km = "km"
    lo = "lo"
    am = "am"
    ti = "ti"
    fa = "fa"
    ps = "ps"
    ku = "ku"
    sd = "sd"
    bo = "bo"
    dz = "dz"
    ug = "ug"
    mn = "mn"
    ka = "ka"
    hy = "hy"
    az = "az"

    def __str__(self) -> str:
        return self.value


SUPPORTED_LANGS: frozenset[str] = frozenset(lang.value for lang in LangCode)


def parse_lang(value: str | LangCode) -> LangCode:
    """Coerce a raw code into a LangCode.

    Raises:
        LedgerValidationError: If the code is not in the supported set.
    """
    if isinstance(value, LangCode):
        return value
    try:
        return LangCode(value)
    except ValueError:
        raise LedgerValidationError(f"unsupported language code: {value!r}") from None


def parse_langs(values: Iterable[str | LangCode]) -> list[LangCode]:
    """Coerce several codes, dropping duplicates but keeping first-seen order."""
    langs: list[LangCode] = []
    for value in values:
        lang = parse_lang(value)
        if lang not in langs:
            langs.append(lang)
    return langs
