"""
Firebird dialect implementation.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Final, Iterable, Mapping

from ..errors import ArityError, UnknownIntervalUnitError
from .base import IntervalUnit

# Firebird accepts these case-insensitively; the spelling matches what the
# server echoes back in plans.
INTERVAL_UNITS: Final[Mapping[IntervalUnit, str]] = MappingProxyType(
    {
        IntervalUnit.SECOND: "second",
        IntervalUnit.MINUTE: "minute",
        IntervalUnit.HOUR: "Hour",
        IntervalUnit.DAY: "Day",
        IntervalUnit.MONTH: "Month",
        IntervalUnit.YEAR: "Year",
    }
)

UNIX_EPOCH: Final[str] = "1970-01-01 00:00:00"


class FirebirdDialect:
    """
    Firebird dialect using qmark placeholders and ``ROWS`` windows.
    """

    name: Final[str] = "firebird"
    param_style: Final[str] = "qmark"

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def format_table(self, table_name: str) -> str:
        return self.quote_identifier(table_name)

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        """
        Render a row window.

        With an offset the window is a 1-based inclusive row range; without one
        ``ROWS n`` takes the first ``n`` rows.
        """

        if limit is None:
            return ""
        offset = offset or 0
        if offset > 0:
            return f"ROWS {offset + 1} TO {offset + limit}"
        return f"ROWS {limit}"

    def parameter_placeholder(self, position: int | None = None) -> str:
        return "?"


def resolve_interval_unit(unit: IntervalUnit | str, table: Mapping[IntervalUnit, str] = INTERVAL_UNITS) -> str:
    if isinstance(unit, IntervalUnit):
        key = unit
    elif isinstance(unit, str):
        try:
            key = IntervalUnit[unit.strip().upper()]
        except KeyError:
            raise UnknownIntervalUnitError(unit) from None
    else:
        raise UnknownIntervalUnitError(unit)
    try:
        return table[key]
    except KeyError:
        raise UnknownIntervalUnitError(unit) from None


def _flatten(parts: Iterable[Any]) -> list[str]:
    flat: list[str] = []
    for part in parts:
        if isinstance(part, (list, tuple)):
            flat.extend(str(item) for item in part)
        else:
            flat.append(str(part))
    return flat


def _signed(sign: str, amount: Any) -> str:
    text = str(amount).strip()
    # A leading sign on the amount must not merge into "--", which opens a comment.
    if text.startswith(("-", "+")):
        return f"{sign}({text})"
    return f"{sign}{text}"


class FirebirdExpressions:
    """
    Firebird renderings of the portable expression functions.
    """

    interval_units: Mapping[IntervalUnit, str] = INTERVAL_UNITS

    def length(self, column: str) -> str:
        return f"CHAR_LENGTH({column})"

    def now(self) -> str:
        # yyyy-mm-dd hh:mi:ss, 24h
        return "CAST('NOW' as timestamp)"

    def concat(self, *parts: Any) -> str:
        columns = _flatten(parts)
        if not columns:
            raise ArityError("concat", got=0, minimum=1)
        return " || ".join(columns)

    def position(self, substr: str, value: str, start_position: int = 0) -> str:
        literal = substr.replace("'", "''")
        if start_position > 0:
            return f"position( '{literal}' in {value}, {start_position} )"
        return f"position( '{literal}' in {value} )"

    def ceil(self, number: str) -> str:
        return f"CEILING( {number} )"

    def unix_timestamp(self, column: str) -> str:
        return f"DATEDIFF(second, timestamp '{UNIX_EPOCH}', {column})"

    def date_add(self, column: str, amount: Any, unit: IntervalUnit | str) -> str:
        token = resolve_interval_unit(unit, self.interval_units)
        return f"DATEADD ( {token}, {_signed('+', amount)}, {column} )"

    def date_sub(self, column: str, amount: Any, unit: IntervalUnit | str) -> str:
        token = resolve_interval_unit(unit, self.interval_units)
        return f"DATEADD ( {token}, {_signed('-', amount)}, {column} )"

    def date_extract(self, column: str, unit: IntervalUnit | str) -> str:
        token = resolve_interval_unit(unit, self.interval_units)
        return f"LPAD( EXTRACT( {token} FROM {column} ), 2,' ' )"
