"""Pump.fun bonding-curve program constants."""

import struct

PUMP_PROGRAM_ID = "6EF8rrecthR5Dkzon8Nwu78hRvfCKubJ14M5uBEwF6P"

# PDA holding the protocol-wide Global config (seed = b"global")
GLOBAL_ACCOUNT_SEED = b"global"
PUMP_GLOBAL_ACCOUNT = "4wTV1YmiEkRvAtNtsSGPtUrqRYQMe5SKy2uB4Jjaxnjf"

# First 8 bytes of Global account data (Anchor discriminator)
GLOBAL_ACCOUNT_DISCRIMINATOR = bytes([167, 232, 232, 177, 200, 108, 114, 127])
GLOBAL_ACCOUNT_DISCRIMINATOR_U64: int = struct.unpack("<Q", GLOBAL_ACCOUNT_DISCRIMINATOR)[0]

# Known prefix of the Global account: discriminator + initialized + 2 pubkeys + 5 u64.
# Newer program versions append fields after this.
GLOBAL_ACCOUNT_SIZE = 113

PUBKEY_SIZE = 32
U64_MAX = 2**64 - 1
