"""Renderers for reports, rankings and revision histories."""

from typing import Dict, Type

from .base import METRIC_LABELS, BaseFormatter, format_value
from .csv_formatter import CsvFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter

# Keys are the accepted values of the output_format setting
FORMATTERS: Dict[str, Type[BaseFormatter]] = {
    "rich": RichFormatter,
    "json": JsonFormatter,
    "csv": CsvFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """Instantiate the formatter registered under ``name``.

    Raises:
        ValueError: If no formatter has that name
    """
    try:
        return FORMATTERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(FORMATTERS))}"
        ) from None


__all__ = [
    "BaseFormatter",
    "RichFormatter",
    "JsonFormatter",
    "CsvFormatter",
    "FORMATTERS",
    "METRIC_LABELS",
    "format_value",
    "get_formatter",
]
