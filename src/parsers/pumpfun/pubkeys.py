"""Pump.fun program addresses as solders Pubkeys."""

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from src.parsers.pumpfun.constants import (
    GLOBAL_ACCOUNT_SEED,
    PUMP_GLOBAL_ACCOUNT,
    PUMP_PROGRAM_ID,
)


def global_account_pubkey() -> Pubkey:
    """Known mainnet address of the Global account."""
    return Pubkey.from_string(PUMP_GLOBAL_ACCOUNT)


def find_global_address(program_id: str = PUMP_PROGRAM_ID) -> tuple[Pubkey, int]:
    """Derive the Global PDA (and bump) for a pump.fun program deployment."""
    return Pubkey.find_program_address([GLOBAL_ACCOUNT_SEED], Pubkey.from_string(program_id))
