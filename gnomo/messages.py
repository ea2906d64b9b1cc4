"""User-facing messages for contract and wallet errors.

Raw errors from the realm ("panic: slippage: output 980 < min 990") and the
wallet ("User rejected the request") are mapped to short, actionable text.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

# First match wins, so specific patterns precede general ones
ERROR_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(p, re.IGNORECASE), message)
    for p, message in [
        # Slippage
        (r"slippage.*output.*<.*min", "Price moved too much. Try increasing slippage tolerance."),
        (r"slippage.*LP.*<.*min", "Slippage exceeded. Try increasing slippage tolerance."),
        (r"slippage.*amountA.*<.*min", "Token A output too low. Price may have changed."),
        (r"slippage.*amountB.*<.*min", "Token B output too low. Price may have changed."),
        # Liquidity
        (r"insufficient.*liquidity", "Not enough liquidity in the pool for this trade."),
        (r"no liquidity", "This pool has no liquidity yet."),
        (r"insufficient.*LP.*balance", "You don't have enough LP tokens."),
        (r"insufficient.*output", "Trade amount too small for meaningful output."),
        # Balance
        (r"insufficient.*balance", "Insufficient balance for this transaction."),
        (r"must send.*token", "Please enter an amount to swap."),
        (r"must send both", "Both tokens are required to add liquidity."),
        # Pools
        (r"pool not found", "Pool does not exist."),
        (r"pool already exists", "A pool with these tokens already exists."),
        (r"denoms must be different", "Cannot create a pool with the same token."),
        # Positions
        (r"position not found", "Position does not exist."),
        (r"not owner", "You don't own this position."),
        (r"already burned", "This position has already been closed."),
        (r"tick.*out of range", "Price range is outside allowed bounds."),
        (r"ticks must align", "Price range must align with tick spacing."),
        (r"tickLower must be.*tickUpper", "Lower price must be less than upper price."),
        # Math
        (r"overflow", "Amount too large for calculation."),
        (r"division by zero", "Invalid calculation - please try different amounts."),
        # Gas
        (r"out of gas", "Transaction ran out of gas. Try a smaller trade."),
        # User rejection
        (r"rejected", "Transaction was rejected."),
        (r"user denied", "Transaction was cancelled."),
        (r"timed out", "Request timed out. Please try again."),
        # Wallet
        (r"wallet.*locked", "Please unlock your wallet and try again."),
        (r"not connected", "Please connect your wallet first."),
    ]
]

_USER_REJECTION = re.compile(r"rejected|denied|cancelled|timed out", re.IGNORECASE)
_TECHNICAL_PREFIX = re.compile(r"^(Error:|panic:|VM Error:)\s*", re.IGNORECASE)
_TRAILING_DETAIL = re.compile(r"\s*\(.*\)\s*$")

MAX_MESSAGE_LENGTH = 150


def _error_text(error: Any) -> str:
    if isinstance(error, str):
        return error
    if isinstance(error, BaseException):
        return str(error)
    if isinstance(error, Mapping):
        # Wallet responses carry a message; some nest the realm error in data
        data = error.get("data")
        if isinstance(data, str) and data:
            return data
        message = error.get("message")
        if isinstance(message, str):
            return message
    return ""


def parse_contract_error(error: Any) -> str:
    """Map a raw contract or wallet error to a user-facing message.

    Args:
        error: Error string, exception, or wallet response mapping
            (``message`` and/or ``data`` keys)

    Returns:
        A known friendly message, or the raw message with technical prefixes
        and trailing detail stripped, truncated to 150 characters.
    """
    text = _error_text(error)

    for pattern, message in ERROR_PATTERNS:
        if pattern.search(text):
            return message

    if not text:
        return "Transaction failed. Please try again."

    cleaned = _TRAILING_DETAIL.sub("", _TECHNICAL_PREFIX.sub("", text)).strip()
    if len(cleaned) > MAX_MESSAGE_LENGTH:
        cleaned = cleaned[: MAX_MESSAGE_LENGTH - 3] + "..."
    return cleaned or "Transaction failed"


def is_user_rejection(error: Any) -> bool:
    """True if the user cancelled in the wallet (no error should be shown)."""
    if isinstance(error, Mapping):
        message = error.get("message")
        text = message if isinstance(message, str) else ""
    else:
        text = _error_text(error)
    return bool(_USER_REJECTION.search(text))


__all__ = ["ERROR_PATTERNS", "is_user_rejection", "parse_contract_error"]
