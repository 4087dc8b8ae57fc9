# RestoOPS_V1/ui/prompts.py
import math
from datetime import datetime
from typing import Callable, Optional, TypeVar

from RestoOPS_V1.utils import get_input

DATETIME_FORMAT = "%Y-%m-%d %H:%M"

T = TypeVar("T")


def _parse_float(raw: str) -> float:
    # Accept comma as decimal separator ("12,50")
    return float(raw.replace(",", "."))


def _parse_datetime(raw: str) -> datetime:
    return datetime.strptime(raw, DATETIME_FORMAT)


def prompt_text(prompt: str, error_message: str) -> str:
    """Read a line until it is not empty."""
    return get_input(
        input_message=prompt,
        fn_validation=bool,
        error_message=error_message,
        cast=str,
    )


def prompt_optional_text(prompt: str) -> Optional[str]:
    """Read a line; an empty answer means None."""
    return input(prompt).strip() or None


def prompt_positive_int(prompt: str, error_message: str) -> int:
    return get_input(
        input_message=prompt,
        fn_validation=lambda x: x > 0,
        error_message=error_message,
    )


def prompt_price(prompt: str, error_message: str) -> float:
    return get_input(
        input_message=prompt,
        fn_validation=lambda x: math.isfinite(x) and x >= 0,
        error_message=error_message,
        cast=_parse_float,
    )


def prompt_amount(prompt: str, error_message: str) -> float:
    return get_input(
        input_message=prompt,
        fn_validation=lambda x: math.isfinite(x) and x > 0,
        error_message=error_message,
        cast=_parse_float,
    )


def prompt_datetime(prompt: str, error_message: str) -> datetime:
    return get_input(
        input_message=prompt,
        fn_validation=lambda x: True,
        error_message=error_message,
        cast=_parse_datetime,
    )


def prompt_choice(prompt: str, parser: Callable[[str], Optional[T]], error_message: str) -> T:
    """Read until `parser` recognises the answer (it returns None otherwise)."""
    while True:
        value = parser(input(prompt))
        if value is not None:
            return value
        print(error_message)
