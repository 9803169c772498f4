#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from ..core.bounds import WEI_DECIMALS


def scale_decimal(amount: str, decimals: int) -> str:
    """Shift a non-negative decimal string by ``decimals`` places using digits only.

    Fraction digits beyond ``decimals`` are truncated. The result has no
    leading zeros but is never empty.
    """
    whole, _, fraction = amount.strip().partition(".")
    if not (whole or fraction):
        raise ValueError("amount must not be empty")
    if not (whole + fraction).isdigit() or not whole.isascii() or not fraction.isascii():
        raise ValueError(f"amount must be a plain decimal string: {amount!r}")
    fraction = fraction[:decimals].ljust(decimals, "0")
    return (whole + fraction).lstrip("0") or "0"


def eth_to_wei(amount: str) -> str:
    """Convert an ETH amount string to an integer Wei string."""
    return scale_decimal(amount, WEI_DECIMALS)
