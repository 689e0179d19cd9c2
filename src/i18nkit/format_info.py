"""Per-locale format configuration.

FormatInfo is the immutable record of the patterns and separators used to
format and parse dates and numbers for one locale. FormatInfoRegistry maps
locale codes to FormatInfo and answers with DEFAULT_FORMAT_INFO for any
locale without an explicit entry.

Missing fields never raise: partial mappings are completed from a base
record (DEFAULT_FORMAT_INFO unless told otherwise). Values that cannot work
(unknown field names, non-bool flags, malformed number patterns, identical
grouping and decimal separators) are rejected at construction time.

Locale data sourcing is the caller's business. FormatInfo.from_locale() is a
convenience that derives separators and a numeric date pattern from CLDR via
Babel.

Python 3.13+. Uses Babel for CLDR lookups.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, fields, replace

from babel import UnknownLocaleError
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from i18nkit.constants import DATE_FIELD_CHARS, MAX_NUMERIC_MONTH_WIDTH
from i18nkit.diagnostics import ErrorTemplate
from i18nkit.formatting.tokenizer import tokenize_number_pattern
from i18nkit.locale_utils import get_babel_locale

__all__ = [
    "DEFAULT_FORMAT_INFO",
    "FormatInfo",
    "FormatInfoRegistry",
]

logger = logging.getLogger(__name__)

_BOOL_FIELDS: frozenset[str] = frozenset(
    {"number_grouping_separator_use", "number_decimal_separator_use_always"}
)


def _to_camel_case(snake_case: str) -> str:
    """Convert a snake_case field name to its camelCase wire name.

    Examples:
        >>> _to_camel_case("number_grouping_separator_use")
        'numberGroupingSeparatorUse'
    """
    components = snake_case.split("_")
    return components[0] + "".join(comp.capitalize() for comp in components[1:])


@dataclass(frozen=True, slots=True)
class FormatInfo:
    """Date and number formatting configuration for one locale.

    Attributes:
        date_pattern: Pattern for format_date/parse_date (e.g., "dd/MM/yyyy")
        date_time_pattern: Pattern for format_datetime/parse_datetime
        integer_pattern: Number pattern for format_number/parse_number
        number_pattern: Number pattern for format_decimal_number/parse_decimal_number
        number_decimal_separator: Rendered decimal separator
        number_grouping_separator: Rendered grouping separator
        number_grouping_separator_use: Whether integer digits are grouped
        number_decimal_separator_use_always: Emit a bare decimal separator
            when no fraction digits are rendered ("10,000.")
    """

    date_pattern: str = "dd/MM/yyyy"
    date_time_pattern: str = "dd/MM/yyyy HH:mm:ss"
    integer_pattern: str = "#,##0"
    number_pattern: str = "#,##0.00#######"
    number_decimal_separator: str = "."
    number_grouping_separator: str = ","
    number_grouping_separator_use: bool = True
    number_decimal_separator_use_always: bool = False

    def __post_init__(self) -> None:
        """Validate field values.

        Raises:
            ValueError: If a flag is not bool, a pattern or separator is not a
                string, the decimal separator is empty, the separators are
                identical, or a number pattern is malformed
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in _BOOL_FIELDS:
                if not isinstance(value, bool):
                    diagnostic = ErrorTemplate.format_info_invalid_value(
                        f.name, f"expected bool, got {type(value).__name__}"
                    )
                    raise ValueError(str(diagnostic))
            elif not isinstance(value, str):
                diagnostic = ErrorTemplate.format_info_invalid_value(
                    f.name, f"expected str, got {type(value).__name__}"
                )
                raise ValueError(str(diagnostic))

        if not self.number_decimal_separator:
            diagnostic = ErrorTemplate.format_info_invalid_value(
                "number_decimal_separator", "must not be empty"
            )
            raise ValueError(str(diagnostic))
        if self.number_grouping_separator == self.number_decimal_separator:
            diagnostic = ErrorTemplate.format_info_invalid_value(
                "number_grouping_separator", "must differ from the decimal separator"
            )
            raise ValueError(str(diagnostic))

        # Fail at construction rather than on the first format call.
        tokenize_number_pattern(self.integer_pattern)
        tokenize_number_pattern(self.number_pattern)

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, object],
        *,
        base: FormatInfo | None = None,
    ) -> FormatInfo:
        """Build FormatInfo from a (possibly partial) mapping.

        Keys may be camelCase wire names ("datePattern",
        "numberGroupingSeparatorUse") or snake_case field names. Absent keys
        take their value from base.

        Args:
            data: Field values
            base: Record supplying absent fields (default: DEFAULT_FORMAT_INFO)

        Returns:
            New FormatInfo

        Raises:
            ValueError: If a key is not a FormatInfo field or a value is invalid

        Example:
            >>> FormatInfo.from_mapping({"datePattern": "dd.MM.yyyy"}).date_pattern
            'dd.MM.yyyy'
        """
        names = _field_names()
        changes: dict[str, object] = {}
        for key, value in data.items():
            name = names.get(key)
            if name is None:
                raise ValueError(str(ErrorTemplate.format_info_unknown_field(key)))
            changes[name] = value
        return replace(base if base is not None else DEFAULT_FORMAT_INFO, **changes)  # type: ignore[arg-type]

    @classmethod
    def from_locale(cls, locale_code: str, *, base: FormatInfo | None = None) -> FormatInfo:
        """Derive FormatInfo for a locale from CLDR data.

        Takes the decimal and grouping symbols from Babel. The CLDR short
        date pattern is adopted when it is purely numeric (two-digit years
        are widened to four digits); otherwise the base patterns are kept.
        Unknown locales log a warning and return base unchanged.

        Args:
            locale_code: BCP-47 or POSIX locale code
            base: Record supplying everything CLDR does not (default:
                DEFAULT_FORMAT_INFO)

        Returns:
            FormatInfo for the locale

        Example:
            >>> info = FormatInfo.from_locale("de-DE")
            >>> (info.number_decimal_separator, info.number_grouping_separator)
            (',', '.')
            >>> info.date_pattern
            'dd.MM.yyyy'
        """
        result = base if base is not None else DEFAULT_FORMAT_INFO
        try:
            babel_locale = get_babel_locale(locale_code)
        except (UnknownLocaleError, ValueError) as e:
            logger.warning("Unknown locale '%s': %s. Using base format info", locale_code, e)
            return result

        changes: dict[str, object] = {
            "number_decimal_separator": babel_numbers.get_decimal_symbol(babel_locale),
            "number_grouping_separator": babel_numbers.get_group_symbol(babel_locale),
        }
        date_pattern = _numeric_date_pattern(
            babel_dates.get_date_format("short", locale=babel_locale).pattern
        )
        if date_pattern is not None:
            changes["date_pattern"] = date_pattern
            changes["date_time_pattern"] = f"{date_pattern} HH:mm:ss"
        else:
            logger.debug(
                "CLDR short date pattern for '%s' is not numeric; keeping '%s'",
                locale_code,
                result.date_pattern,
            )
        return replace(result, **changes)  # type: ignore[arg-type]

    def to_mapping(self) -> dict[str, str | bool]:
        """Return the record keyed by camelCase wire names."""
        return {_to_camel_case(f.name): getattr(self, f.name) for f in fields(self)}


DEFAULT_FORMAT_INFO: FormatInfo = FormatInfo()
"""Process-wide defaults for locales without explicit format info."""


def _field_names() -> dict[str, str]:
    """Map accepted keys (snake_case and camelCase) to field names."""
    names: dict[str, str] = {}
    for f in fields(FormatInfo):
        names[f.name] = f.name
        names[_to_camel_case(f.name)] = f.name
    return names


def _numeric_date_pattern(cldr_pattern: str) -> str | None:
    """Reduce a CLDR date pattern to the numeric token set, or None.

    Quoted literals and any field letter beyond d/M/y/H/m/s (month names,
    eras, weekdays) disqualify the pattern. Year runs become "yyyy".
    """
    if "'" in cldr_pattern:
        return None
    if any(ch.isalpha() and ch not in DATE_FIELD_CHARS for ch in cldr_pattern):
        return None
    if any(run > MAX_NUMERIC_MONTH_WIDTH for run in _run_lengths(cldr_pattern, "M")):
        return None

    parts: list[str] = []
    pos = 0
    while pos < len(cldr_pattern):
        if cldr_pattern[pos] == "y":
            while pos < len(cldr_pattern) and cldr_pattern[pos] == "y":
                pos += 1
            parts.append("yyyy")
        else:
            parts.append(cldr_pattern[pos])
            pos += 1
    return "".join(parts)


def _run_lengths(text: str, char: str) -> Iterator[int]:
    run = 0
    for ch in text:
        if ch == char:
            run += 1
        elif run:
            yield run
            run = 0
    if run:
        yield run


class FormatInfoRegistry:
    """Locale code -> FormatInfo table with a global default.

    Built once at construction and read thereafter. Lookup is by exact
    locale code; a locale without an entry gets the default record. Entries
    given as partial mappings are completed from the default.

    Example:
        >>> registry = FormatInfoRegistry({"es": {"datePattern": "dd-MM-yyyy"}})
        >>> registry.get("es").date_pattern
        'dd-MM-yyyy'
        >>> registry.get("fr") is DEFAULT_FORMAT_INFO
        True
    """

    __slots__ = ("_default", "_infos")

    def __init__(
        self,
        format_infos: Mapping[str, FormatInfo | Mapping[str, object]] | None = None,
        *,
        default: FormatInfo = DEFAULT_FORMAT_INFO,
    ) -> None:
        """Initialize registry.

        Args:
            format_infos: Locale code -> FormatInfo or partial mapping.
                None is treated as empty.
            default: Record used for locales without an entry and for absent
                fields of partial mappings

        Raises:
            ValueError: If an entry has unknown fields or invalid values
        """
        self._default = default
        self._infos: dict[str, FormatInfo] = {}
        for locale_code, info in (format_infos or {}).items():
            match info:
                case FormatInfo():
                    self._infos[locale_code] = info
                case Mapping():
                    self._infos[locale_code] = FormatInfo.from_mapping(info, base=default)
                case _:
                    msg = (
                        f"Format info for '{locale_code}' must be FormatInfo or mapping, "
                        f"got {type(info).__name__}"
                    )
                    raise TypeError(msg)

    @property
    def default(self) -> FormatInfo:
        """Record used for locales without an explicit entry."""
        return self._default

    @property
    def locales(self) -> tuple[str, ...]:
        """Locale codes with an explicit entry, in insertion order."""
        return tuple(self._infos)

    def get(self, locale_code: str) -> FormatInfo:
        """Return the FormatInfo for locale_code, or the default."""
        return self._infos.get(locale_code, self._default)

    def __contains__(self, locale_code: object) -> bool:
        return locale_code in self._infos

    def __len__(self) -> int:
        return len(self._infos)

    def __repr__(self) -> str:
        return f"FormatInfoRegistry(locales={self.locales!r})"
