"""Decode / encode the pump.fun Global account.

Layout (Borsh, little-endian, no padding):
  0:8     discriminator (u64)
  8       initialized (bool, u8)
  9:41    authority (Pubkey 32b)
  41:73   fee_recipient (Pubkey 32b)
  73:81   initial_virtual_token_reserves (u64)
  81:89   initial_virtual_sol_reserves (u64)
  89:97   initial_real_token_reserves (u64)
  97:105  token_total_supply (u64)
  105:113 fee_basis_points (u64)

Live accounts are longer (withdraw_authority, enable_migrate, ... were
appended by later program versions). Bytes past offset 113 are ignored.
"""

import base64
import binascii
import struct

from loguru import logger

from config.settings import settings
from src.parsers.pumpfun.constants import GLOBAL_ACCOUNT_SIZE
from src.parsers.pumpfun.exceptions import GlobalAccountDecodeError
from src.parsers.pumpfun.models import GlobalAccount

_GLOBAL_LAYOUT = struct.Struct("<QB32s32s5Q")


def decode_global_account(data: bytes, *, strict: bool | None = None) -> GlobalAccount:
    """Decode raw Global account bytes.

    strict=True rejects an `initialized` byte other than 0/1; strict=False
    treats any nonzero byte as True. None takes the configured default.

    Raises GlobalAccountDecodeError on short data or malformed bool.
    """
    if strict is None:
        strict = settings.pumpfun_strict_bool_decode

    if len(data) < GLOBAL_ACCOUNT_SIZE:
        logger.debug(f"[PUMP] Global data too short: {len(data)} < {GLOBAL_ACCOUNT_SIZE}")
        raise GlobalAccountDecodeError(
            f"Global account data too short: {len(data)} < {GLOBAL_ACCOUNT_SIZE} bytes"
        )

    (
        discriminator,
        initialized_byte,
        authority,
        fee_recipient,
        virtual_token,
        virtual_sol,
        real_token,
        total_supply,
        fee_bps,
    ) = _GLOBAL_LAYOUT.unpack_from(data, 0)

    if strict and initialized_byte not in (0, 1):
        logger.debug(f"[PUMP] Invalid bool byte for initialized: {initialized_byte}")
        raise GlobalAccountDecodeError(
            f"Invalid bool value for initialized: {initialized_byte}"
        )

    return GlobalAccount(
        discriminator=discriminator,
        initialized=initialized_byte != 0,
        authority_bytes=authority,
        fee_recipient_bytes=fee_recipient,
        initial_virtual_token_reserves=virtual_token,
        initial_virtual_sol_reserves=virtual_sol,
        initial_real_token_reserves=real_token,
        token_total_supply=total_supply,
        fee_basis_points=fee_bps,
    )


def decode_global_account_b64(data_b64: str, *, strict: bool | None = None) -> GlobalAccount:
    """Decode base64 account data as returned by getAccountInfo."""
    try:
        data = base64.b64decode(data_b64, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.debug(f"[PUMP] Failed to base64-decode Global data: {e}")
        raise GlobalAccountDecodeError(f"Invalid base64 account data: {e}") from e
    return decode_global_account(data, strict=strict)


def encode_global_account(account: GlobalAccount) -> bytes:
    """Serialize to the canonical 113-byte layout."""
    return _GLOBAL_LAYOUT.pack(
        account.discriminator,
        1 if account.initialized else 0,
        account.authority_bytes,
        account.fee_recipient_bytes,
        account.initial_virtual_token_reserves,
        account.initial_virtual_sol_reserves,
        account.initial_real_token_reserves,
        account.token_total_supply,
        account.fee_basis_points,
    )
