"""Closed set of language codes accepted by the translate endpoint."""

from enum import Enum


class Lang(str, Enum):
    EN = "EN"
    TR = "TR"
    DE = "DE"
    FR = "FR"
    ES = "ES"
    IT = "IT"
    PT = "PT"
    NL = "NL"
    RU = "RU"
    UK = "UK"
    PL = "PL"
    AR = "AR"
    FA = "FA"
    HI = "HI"
    ZH = "ZH"
    JA = "JA"
    KO = "KO"


# Stored as source_lang for auto-detected requests. Never requestable.
AUTO_SOURCE_LANG = "AUTO"

# Stored as detected_source_lang when detection was lost to a malformed reply.
UNKNOWN_LANG = "UNKNOWN"


def normalize_lang(value: str) -> Lang:
    """Uppercase *value* and map it onto Lang. Raises ValueError if unknown."""
    return Lang(value.strip().upper())
