"""Pydantic v2 model for the pump.fun Global config account."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from src.parsers.pumpfun.constants import (
    GLOBAL_ACCOUNT_DISCRIMINATOR_U64,
    PUBKEY_SIZE,
    U64_MAX,
)
from src.parsers.pumpfun.pricing import get_initial_buy_price

U64 = Annotated[int, Field(ge=0, le=U64_MAX)]
PubkeyBytes = Annotated[bytes, Field(min_length=PUBKEY_SIZE, max_length=PUBKEY_SIZE)]


class GlobalAccount(BaseModel):
    """Decoded on-chain Global account: protocol-wide pricing and fee settings.

    Pubkeys are kept as raw 32-byte wire values so the model maps 1:1 onto
    the fixed account layout. Use authority() / fee_recipient() for keys.
    """

    discriminator: U64
    initialized: bool
    authority_bytes: PubkeyBytes
    fee_recipient_bytes: PubkeyBytes
    initial_virtual_token_reserves: U64
    initial_virtual_sol_reserves: U64
    initial_real_token_reserves: U64  # hard cap on a single quote
    token_total_supply: U64
    fee_basis_points: U64  # 1/100th of a percent

    # strict: no str -> bytes or str -> int coercion
    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    @classmethod
    def new(
        cls,
        discriminator: int,
        initialized: bool,
        authority: Pubkey,
        fee_recipient: Pubkey,
        initial_virtual_token_reserves: int,
        initial_virtual_sol_reserves: int,
        initial_real_token_reserves: int,
        token_total_supply: int,
        fee_basis_points: int,
    ) -> "GlobalAccount":
        """Build an account from typed pubkeys (tests, simulations)."""
        return cls(
            discriminator=discriminator,
            initialized=initialized,
            authority_bytes=bytes(authority),
            fee_recipient_bytes=bytes(fee_recipient),
            initial_virtual_token_reserves=initial_virtual_token_reserves,
            initial_virtual_sol_reserves=initial_virtual_sol_reserves,
            initial_real_token_reserves=initial_real_token_reserves,
            token_total_supply=token_total_supply,
            fee_basis_points=fee_basis_points,
        )

    def authority(self) -> Pubkey:
        return Pubkey.from_bytes(self.authority_bytes)

    def fee_recipient(self) -> Pubkey:
        return Pubkey.from_bytes(self.fee_recipient_bytes)

    @property
    def has_global_discriminator(self) -> bool:
        """True if the discriminator matches the pump.fun Global account type."""
        return self.discriminator == GLOBAL_ACCOUNT_DISCRIMINATOR_U64

    def get_initial_buy_price(self, amount: int) -> int:
        """Tokens received for `amount` lamports on a fresh bonding curve."""
        return get_initial_buy_price(self, amount)
