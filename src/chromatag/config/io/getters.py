# topmark:header:start
#
#   project      : Chromatag
#   file         : getters.py
#   file_relpath : src/chromatag/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML config tables.

The getters validate the expected shape and record **warnings** in a
`DiagnosticLog` (and also log a warning). A missing key yields ``None`` so the
caller can tell "not set in this source" from an explicit value; a value of the
wrong type also yields ``None`` after the warning is recorded.

The same getters are used for CLI/API argument mappings, where ``where`` names
the argument source instead of a TOML table.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Final, TypeVar

if TYPE_CHECKING:
    from collections.abc import Mapping

    from chromatag.config.logging import ChromatagLogger
    from chromatag.diagnostic.model import DiagnosticLog

E = TypeVar("E", bound=Enum)


def _warn(
    loc: str,
    expected: str,
    value: object,
    *,
    diagnostics: DiagnosticLog,
    logger: ChromatagLogger,
) -> None:
    logger.warning("Expected %s in %s, got %s: %r", expected, loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected {expected} in {loc}, got {type(value).__name__}: {value!r}")


def get_string_value_or_none_checked(
    table: Mapping[str, Any],
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: ChromatagLogger,
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    _warn(f"{where}.{key}", "string", value, diagnostics=diagnostics, logger=logger)
    return None


def get_bool_value_or_none_checked(
    table: Mapping[str, Any],
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: ChromatagLogger,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`.

    Integers are **not** coerced.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    _warn(f"{where}.{key}", "bool", value, diagnostics=diagnostics, logger=logger)
    return None


def get_int_value_or_none_checked(
    table: Mapping[str, Any],
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: ChromatagLogger,
    minimum: int | None = None,
) -> int | None:
    """Return an optional int value, warning when present but not a valid `int`.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
        - Values below ``minimum`` are rejected with a warning.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if isinstance(value, bool) or not isinstance(value, int):
        _warn(loc, "int", value, diagnostics=diagnostics, logger=logger)
        return None

    if minimum is not None and value < minimum:
        logger.warning("Value for %s must be >= %d, got %d", loc, minimum, value)
        diagnostics.add_warning(f"Value for {loc} must be >= {minimum}, got {value}")
        return None
    return value


def get_enum_value_checked(
    table: Mapping[str, Any],
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: ChromatagLogger,
) -> E | None:
    """Parse an enum value from TOML.

    Expected input is a `str` matching one of the Enum values (an enum member
    is accepted as is).

    - Missing key -> None
    - Wrong type -> warning + None
    - Unknown enum value -> warning + None
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None
    if isinstance(raw, enum_cls):
        return raw

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, str):
        _warn(loc, "string enum value", raw, diagnostics=diagnostics, logger=logger)
        return None

    try:
        return enum_cls(raw.strip().lower())
    except ValueError:
        allowed: str = ", ".join(str(e.value) for e in enum_cls)
        logger.warning("Invalid value for %s: %r (allowed: %s)", loc, raw, allowed)
        diagnostics.add_warning(f"Invalid value for {loc}: {raw!r} (allowed: {allowed})")
        return None
