"""Sierra record number check digit.

The check digit is a MOD-11 weighting over the record number: digits are
weighted 2, 3, 4, ... from the rightmost one, the weighted sum is taken
modulo 11 and a remainder of 10 is written as ``x``.
"""

from collections.abc import Callable

__all__ = ["CheckDigitFn", "calc_check_digit"]

CheckDigitFn = Callable[[str], str]


def calc_check_digit(rec_num: str) -> str:
    """Calculate the check digit for a record number.

    Parameters
    ----------
    rec_num : str
        Record number digits (no record type code, no campus suffix).

    Returns
    -------
    str
        One of ``"0"``-``"9"`` or ``"x"``.

    Raises
    ------
    ValueError
        If ``rec_num`` is empty or contains anything but ASCII digits.

    Examples
    --------
        >>> calc_check_digit("1234567")
        '2'
    """
    if not rec_num or not rec_num.isascii() or not rec_num.isdigit():
        raise ValueError(f"Record number must be a non-empty string of digits: {rec_num!r}")

    total = sum(int(digit) * weight for weight, digit in enumerate(reversed(rec_num), start=2))
    remainder = total % 11
    return "x" if remainder == 10 else str(remainder)
