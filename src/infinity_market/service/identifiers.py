"""Opaque identifiers for websites, tokens, tools, pages, wallets and transactions.

Every identifier carries a 128-bit random suffix, so concurrent callers never
need to coordinate.
"""

from __future__ import annotations

import secrets


def _prefixed(prefix: str) -> str:
    return f"{prefix}-{secrets.token_hex(16)}"  # 32-char hex (128-bit)


def new_website_id() -> str:
    return _prefixed("site")


def new_token_id() -> str:
    return _prefixed("token")


def new_tool_id() -> str:
    return _prefixed("tool")


def new_page_id() -> str:
    return _prefixed("page")


def new_transaction_id() -> str:
    return _prefixed("tx")


def new_wallet_address() -> str:
    """Return a ``0x``-prefixed 40-hex-digit wallet address."""
    return f"0x{secrets.token_hex(20)}"
