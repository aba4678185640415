#
# Python-hdderive -- Ethereum BIP-44 Account Key Derivation
#
# Copyright (c) 2022, Dominion Research & Development Corp.
#
# Python-hdderive is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.  It is also available under alternative (eg. Commercial) licenses, at
# your option.  See the LICENSE file at the top of the source tree.
#
# Python-hdderive is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
#

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

#
# HD Wallet Derivation Paths (Standard BIP-44 / Trezor)
#
#     https://wolovim.medium.com/ethereum-201-hd-wallets-11d0c93c87f7
#
# BIP-44 defines the purpose of each depth level:
#    m / purpose’ / coin_type’ / account’ / change / address_index
#
# Use https://iancoleman.io/bip39/ to confirm the derivations
#

# secp256k1 curve order (n); every derived child key lies in [1, n-1]
SECP256K1_N			= int( "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141", 16 )

HARDENED			= 0x80000000
STEP_LIMIT			= 2**32

# The one Ethereum account we derive: m/44'/60'/0'/0/0
ACCOUNT_PATH			= (
    44 | HARDENED,	# purpose
    60 | HARDENED,	# coin_type: Ethereum
    0 | HARDENED,	# account
    0,			# change
    0,			# address_index
)
ACCOUNT_PATH_TEXT		= "m/44'/60'/0'/0/0"

# BIP-39 Seed stretching: PBKDF2-HMAC-SHA512("mnemonic" + passphrase), 2048 rounds, 512 bits
SEED_SALT_PREFIX		= "mnemonic"
SEED_ITERATIONS			= 2048
SEED_BYTES			= 64

# BIP-32 Master Key: HMAC-SHA512 keyed w/ "Bitcoin seed"; seeds of 128 to 512 bits are accepted
MASTER_HMAC_KEY			= b"Bitcoin seed"
MASTER_SEED_BYTES		= (16, 64)

KEY_BYTES			= 32
CHAIN_CODE_BYTES		= 32
COMPRESSED_BYTES		= 33
COMPRESSED_PREFIXES		= (b'\x02', b'\x03')
