"""Shared test fixtures."""

import pytest
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from src.parsers.pumpfun.constants import GLOBAL_ACCOUNT_DISCRIMINATOR_U64
from src.parsers.pumpfun.models import GlobalAccount

AUTHORITY = Pubkey.from_bytes(bytes([1] * 32))
FEE_RECIPIENT = Pubkey.from_bytes(bytes(range(32)))


@pytest.fixture
def mainnet_global() -> GlobalAccount:
    """Global account with the reserves pump.fun ships on mainnet."""
    return GlobalAccount.new(
        discriminator=GLOBAL_ACCOUNT_DISCRIMINATOR_U64,
        initialized=True,
        authority=AUTHORITY,
        fee_recipient=FEE_RECIPIENT,
        initial_virtual_token_reserves=1_073_000_000_000_000,
        initial_virtual_sol_reserves=30_000_000_000,
        initial_real_token_reserves=793_100_000_000_000,
        token_total_supply=1_000_000_000_000_000,
        fee_basis_points=100,
    )
