"""Unit tests for identifier generation."""

from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from infinity_market.service.identifiers import (
    new_page_id,
    new_token_id,
    new_tool_id,
    new_transaction_id,
    new_wallet_address,
    new_website_id,
)


class TestPrefixedIds:
    @pytest.mark.parametrize(
        ("factory", "prefix"),
        [
            (new_website_id, "site"),
            (new_token_id, "token"),
            (new_tool_id, "tool"),
            (new_page_id, "page"),
            (new_transaction_id, "tx"),
        ],
    )
    def test_format(self, factory, prefix: str) -> None:
        assert re.fullmatch(rf"{prefix}-[0-9a-f]{{32}}", factory())

    def test_unique(self) -> None:
        ids = {new_tool_id() for _ in range(10_000)}
        assert len(ids) == 10_000

    def test_unique_across_threads(self) -> None:
        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda _: new_website_id(), range(2_000)))
        assert len(set(ids)) == len(ids)


class TestWalletAddress:
    def test_format(self) -> None:
        assert re.fullmatch(r"0x[0-9a-f]{40}", new_wallet_address())

    def test_unique(self) -> None:
        assert new_wallet_address() != new_wallet_address()
