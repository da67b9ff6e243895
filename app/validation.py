import re

# ISO 639-1 (two letters) and ISO 639-3 (three letters). Shape only, the
# code is not looked up in any registry.
ISO_639_1_PATTERN = re.compile(r"[a-z]{2}")
ISO_639_3_PATTERN = re.compile(r"[a-z]{3}")

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Range of the PostgreSQL `integer` parameter of pokedex.getpokemon()
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1


def is_valid_language_code(code: str) -> bool:
    """
    Checks whether `code` has the shape of an ISO 639-1 or ISO 639-3 language code.

    The check is case-insensitive: "en", "EN" and "eng" are valid, "english",
    "e1" and "" are not.
    """
    code = code.lower()
    return bool(ISO_639_1_PATTERN.fullmatch(code) or ISO_639_3_PATTERN.fullmatch(code))


def parse_id(raw: str) -> int:
    """
    Parses a base-10 integer path segment, raising ValueError if it is not one
    or does not fit a 32-bit signed integer.
    """
    if not _ID_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid integer: {raw!r}")
    value = int(raw)
    if not ID_MIN <= value <= ID_MAX:
        raise ValueError(f"integer out of range: {raw!r}")
    return value
