"""Initial-buy quote on the pump.fun constant-product bonding curve.

Mirrors the on-chain math exactly (integer only, u128 intermediates):

    n = virtual_sol * virtual_token          # k
    i = virtual_sol + amount
    r = n // i + 1                           # +1 rounds in protocol's favor
    s = virtual_token - r
    tokens_out = min(s, real_token)

Do not simplify the rounding: quotes must match the program to the unit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from src.parsers.pumpfun.constants import U64_MAX
from src.parsers.pumpfun.exceptions import InitialBuyOverflowError

if TYPE_CHECKING:
    from src.parsers.pumpfun.models import GlobalAccount


def get_initial_buy_price(account: GlobalAccount, amount: int) -> int:
    """Return token amount (raw units) received for `amount` lamports.

    Uses the account's initial reserves, i.e. the price of the very first
    buy on a newly created curve. Result never exceeds
    initial_real_token_reserves.

    Raises InitialBuyOverflowError if the post-trade token reserve would
    exceed the virtual token reserve (only possible with empty reserves).
    """
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise TypeError(f"amount must be an int (lamports), got {type(amount).__name__}")
    if amount < 0 or amount > U64_MAX:
        raise ValueError(f"amount out of u64 range: {amount}")
    if amount == 0:
        return 0

    virtual_token = account.initial_virtual_token_reserves
    virtual_sol = account.initial_virtual_sol_reserves
    real_token = account.initial_real_token_reserves

    n = virtual_sol * virtual_token
    i = virtual_sol + amount
    r = n // i + 1

    if r > virtual_token:
        logger.debug(
            f"[PUMP] Initial buy underflow: r={r} > virtual_token={virtual_token} "
            f"(amount={amount})"
        )
        raise InitialBuyOverflowError(
            f"post-trade token reserve {r} exceeds virtual token reserve {virtual_token}"
        )

    s = virtual_token - r
    if s < real_token:
        return s
    return real_token
