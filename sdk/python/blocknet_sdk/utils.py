"""
Utility functions for BlockNet
"""

import math
import time
from typing import Any, Optional


class Utils:
    """Helper utilities for BlockNet operations"""

    @staticmethod
    def parse_amount(value: Any) -> Optional[float]:
        """
        Parse a raw form value into an amount.

        Args:
            value: String or number entered by the user

        Returns:
            The amount as float, or None if it is not a finite number

        Example:
            >>> Utils.parse_amount("2.5")
            2.5
            >>> Utils.parse_amount("abc") is None
            True
        """
        if isinstance(value, bool):
            return None
        try:
            amount = float(str(value).strip())
        except (TypeError, ValueError):
            return None
        if not math.isfinite(amount):
            return None
        return amount

    @staticmethod
    def validate_amount(amount: Optional[float]) -> bool:
        """
        Validate transaction amount.

        Args:
            amount: Parsed amount

        Returns:
            True if the amount is a finite number greater than zero
        """
        return amount is not None and math.isfinite(amount) and amount > 0

    @staticmethod
    def format_amount(amount: float) -> str:
        """
        Format amount for display, dropping a trailing ".0" on whole values.

        Example:
            >>> Utils.format_amount(5.0)
            '5'
            >>> Utils.format_amount(0.25)
            '0.25'
        """
        if float(amount).is_integer():
            return str(int(amount))
        return f"{amount:g}"

    @staticmethod
    def format_time(timestamp: float) -> str:
        """Format an epoch timestamp as local HH:MM:SS"""
        return time.strftime("%H:%M:%S", time.localtime(timestamp))

    @staticmethod
    def format_name(name: str, length: int = 16) -> str:
        """
        Format sender/recipient for display (shortened).

        Args:
            name: Full sender or recipient
            length: Number of characters to show from start

        Returns:
            Shortened name with ellipsis
        """
        if len(name) <= length:
            return name
        return f"{name[:length]}..."

    @staticmethod
    def seconds_to_readable(seconds: int) -> str:
        """
        Convert seconds to human-readable format.

        Args:
            seconds: Number of seconds

        Returns:
            Readable string (e.g., "2h", "3d")
        """
        seconds = max(0, int(seconds))
        if seconds < 60:
            return f"{seconds}s"
        elif seconds < 3600:
            return f"{seconds // 60}m"
        elif seconds < 86400:
            return f"{seconds // 3600}h"
        else:
            return f"{seconds // 86400}d"
