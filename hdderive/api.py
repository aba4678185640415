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
from __future__          import annotations

import hashlib
import hmac
import logging

from collections	import namedtuple
from typing		import Callable, Iterator, Optional, Sequence, Union

import eth_account

from .defaults		import (
    SECP256K1_N, HARDENED, STEP_LIMIT, ACCOUNT_PATH, ACCOUNT_PATH_TEXT,
    SEED_SALT_PREFIX, SEED_ITERATIONS, SEED_BYTES, MASTER_HMAC_KEY, MASTER_SEED_BYTES,
    KEY_BYTES, CHAIN_CODE_BYTES, COMPRESSED_BYTES, COMPRESSED_PREFIXES,
)
from .curve		import CurveEngine, SECP256K1
from .util		import into_bytes

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= (
    "DerivationError", "DerivationFailure", "EncodingError",
    "Derived", "ExtendedKey", "KeyPair",
    "derive_seed", "derive_master", "child_message", "derive_child",
    "step_format", "path_format", "path_keys", "walk_path",
    "derive_account", "derive_account_key", "keypair", "account",
)

log				= logging.getLogger( __package__ )


class DerivationError( ValueError ):
    """No key could be derived for the supplied inputs."""


class DerivationFailure( DerivationError ):
    """A child key reduced to zero modulo the curve order; there is no valid key at that step."""


class EncodingError( DerivationError ):
    """A seed, key, chain code, step or public key of unexpected length or range; indicates a
    programming defect, not bad user input."""


class Derived( namedtuple( 'Derived', ('value', 'failure') )):
    """The outcome of a derivation step: either a value, or the DerivationError instance that
    prevented it.  Failures are carried from step to step, not raised.

    Chain steps with .then, which passes a successful value on to the next step, and simply returns
    the carried failure (skipping the step) otherwise:

        derive_seed( mnemonic ).then( derive_master ).then( walk_path )

    Finally, .unwrap returns the value, or raises the carried failure.

    """
    __slots__			= ()

    @classmethod
    def success( cls, value ) -> Derived:
        return cls( value, None )

    @classmethod
    def failed( cls, failure: DerivationError ) -> Derived:
        return cls( None, failure )

    @property
    def ok( self ) -> bool:
        return self.failure is None

    def then( self, func: Callable[..., Derived], *args, **kwds ) -> Derived:
        if not self.ok:
            return self
        return func( self.value, *args, **kwds )

    def unwrap( self ):
        if not self.ok:
            raise self.failure
        return self.value


class ExtendedKey( namedtuple( 'ExtendedKey', ('key', 'chain_code') )):
    """A BIP-32 extended private key: the 32-byte big-endian private key, and its 32-byte chain code."""
    __slots__			= ()

    @classmethod
    def of( cls, key: bytes, chain_code: bytes ) -> Derived:
        if len( key ) != KEY_BYTES:
            return Derived.failed( EncodingError( f"Private key must be {KEY_BYTES} bytes, not {len( key )}" ))
        if len( chain_code ) != CHAIN_CODE_BYTES:
            return Derived.failed( EncodingError( f"Chain code must be {CHAIN_CODE_BYTES} bytes, not {len( chain_code )}" ))
        return Derived.success( cls( bytes( key ), bytes( chain_code )))

    def __repr__( self ):
        """Never reveal the private key."""
        return f"{self.__class__.__name__}(chain_code={self.chain_code.hex()})"


def derive_seed(
    mnemonic: str,
    passphrase: Optional[Union[str,bytes]] = None,
) -> Derived:
    """Stretch a BIP-39 Mnemonic Phrase and passphrase (default: "") into the 512-bit Seed, using
    PBKDF2-HMAC-SHA512 w/ 2048 iterations and salt "mnemonic" + passphrase.

    The mnemonic is used exactly as supplied: it must already be validated, and NO Unicode
    (NFKD) normalization is applied to either mnemonic or passphrase.  ASCII phrases (eg. all
    english BIP-39 Mnemonics) are unaffected; normalize any other input before calling, if
    compatibility with normalizing BIP-39 implementations is required.

    """
    if passphrase is None:
        passphrase		= ""
    if isinstance( passphrase, bytes ):
        passphrase		= passphrase.decode( 'UTF-8' )
    seed			= hashlib.pbkdf2_hmac(
        'sha512',
        mnemonic.encode( 'UTF-8' ),
        ( SEED_SALT_PREFIX + passphrase ).encode( 'UTF-8' ),
        SEED_ITERATIONS,
        dklen	= SEED_BYTES,
    )
    return Derived.success( seed )


def derive_master(
    seed: bytes,
) -> Derived:
    """Produce the BIP-32 master ExtendedKey from a 128- to 512-bit Seed.

    The master private key is not checked against the curve order; only derived child keys are.
    """
    lo,hi			= MASTER_SEED_BYTES
    if not lo <= len( seed ) <= hi:
        return Derived.failed( EncodingError( f"A {len( seed ) * 8}-bit Seed was supplied; {lo * 8} to {hi * 8} bits required" ))
    I				= hmac.new( MASTER_HMAC_KEY, seed, hashlib.sha512 ).digest()
    return ExtendedKey.of( I[:32], I[32:] )


def step_format( step: int ) -> str:
    """Render a derivation step as eg. "44'" (hardened) or "0"."""
    if step & HARDENED:
        return f"{step & ~HARDENED}'"
    return f"{step}"


def path_format( steps: Sequence[int] ) -> str:
    """Render derivation steps as a path, eg. "m/44'/60'/0'/0/0"."""
    return 'm/' + '/'.join( map( step_format, steps ))


def child_message(
    parent: ExtendedKey,
    step: int,
    curve: Optional[CurveEngine] = None,
) -> Derived:
    """The 37-byte message hashed to derive the child at step: 0x00 || parent key for hardened
    steps, or the parent's SEC1 compressed public key for non-hardened steps, followed by the
    step as a 32-bit big-endian integer.

    """
    if not 0 <= step < STEP_LIMIT:
        return Derived.failed( EncodingError( f"Derivation step {step} is not a 32-bit unsigned integer" ))
    if step & HARDENED:
        data			= b'\x00' + parent.key
    else:
        data			= bytes( ( curve or SECP256K1 ).public_key( parent.key ))
        if len( data ) != COMPRESSED_BYTES or data[:1] not in COMPRESSED_PREFIXES:
            return Derived.failed( EncodingError( f"Compressed public key must be {COMPRESSED_BYTES} bytes w/ a 0x02/0x03 prefix, not {data.hex()!r}" ))
    return Derived.success( data + step.to_bytes( 4, 'big' ))


def derive_child(
    parent: ExtendedKey,
    step: int,
    curve: Optional[CurveEngine] = None,
) -> Derived:
    """BIP-32 private parent key --> private child key derivation, for one step.

    The child key is ( I_L + parent key ) mod n, where I_L is the left half of HMAC-SHA512 keyed
    by the parent chain code; the right half I_R becomes the child chain code.  A child key of
    zero is a DerivationFailure; unlike BIP-32's recommendation, we do not proceed to the next
    step index, since that would silently derive a different account.

    """
    message			= child_message( parent, step, curve=curve )
    if not message.ok:
        return message
    I				= hmac.new( parent.chain_code, message.value, hashlib.sha512 ).digest()
    I_L,I_R			= I[:32],I[32:]
    child			= ( int.from_bytes( I_L, 'big' ) + int.from_bytes( parent.key, 'big' )) % SECP256K1_N
    if child == 0:
        return Derived.failed( DerivationFailure( f"Derived key at step {step_format( step )} is zero" ))
    return ExtendedKey.of( child.to_bytes( KEY_BYTES, 'big' ), I_R )


def path_keys(
    master: ExtendedKey,
    steps: Sequence[int]	= ACCOUNT_PATH,
    curve: Optional[CurveEngine] = None,
) -> Iterator[Derived]:
    """Yield the Derived ExtendedKey at each successive step from master; the final one yielded is
    either the key at the end of the path, or the failure that ended the walk.

    """
    steps			= tuple( steps )
    parent			= master
    for depth,step in enumerate( steps, start=1 ):
        derived			= derive_child( parent, step, curve=curve )
        log.debug( f"Depth {depth} {'hardened' if step & HARDENED else 'non-hardened'} {path_format( steps[:depth] )}: {'ok' if derived.ok else derived.failure}" )
        yield derived
        if not derived.ok:
            return
        parent			= derived.value


def walk_path(
    master: ExtendedKey,
    steps: Sequence[int]	= ACCOUNT_PATH,
    curve: Optional[CurveEngine] = None,
) -> Derived:
    """Derive the ExtendedKey at the end of the path from master, or the first failure."""
    derived			= Derived.success( master )
    for derived in path_keys( master, steps, curve=curve ):
        pass
    return derived


def derive_account(
    mnemonic: str,
    passphrase: Optional[Union[str,bytes]] = None,
    curve: Optional[CurveEngine] = None,
) -> Derived:
    """Derive the m/44'/60'/0'/0/0 Ethereum account private key (as 64 hex digits) from the
    validated BIP-39 Mnemonic and passphrase (default: "").

    """
    derived			= derive_seed( mnemonic, passphrase ) \
        .then( derive_master ) \
        .then( walk_path, ACCOUNT_PATH, curve=curve )
    if not derived.ok:
        log.warning( f"Failed to derive {ACCOUNT_PATH_TEXT} key: {derived.failure}" )
        return derived
    log.info( f"Derived {ACCOUNT_PATH_TEXT} key from BIP-39 mnemonic{' (and passphrase)' if passphrase else ''}" )
    return Derived.success( derived.value.key.hex() )


def derive_account_key(
    mnemonic: str,
    passphrase: Optional[Union[str,bytes]] = None,
    curve: Optional[CurveEngine] = None,
) -> str:
    """As derive_account, but returns the hex private key, or raises its DerivationError."""
    return derive_account( mnemonic, passphrase, curve=curve ).unwrap()


KeyPair = namedtuple( 'KeyPair', ('private_key', 'public_key', 'address') )


def keypair(
    private_key: Union[bytes,str],
    curve: Optional[CurveEngine] = None,
) -> KeyPair:
    """Produce the KeyPair for a 32-byte private key (bytes, or hex w/ optional '0x'): the private
    key hex, the SEC1 compressed public key hex, and the EIP-55 checksummed Ethereum address.

    The address is always computed by eth_account (on secp256k1), regardless of curve.
    """
    key				= into_bytes( private_key )
    if len( key ) != KEY_BYTES:
        raise EncodingError( f"Private key must be {KEY_BYTES} bytes, not {len( key )}" )
    if not 0 < int.from_bytes( key, 'big' ) < SECP256K1_N:
        raise EncodingError( "Private key must be in the range [1, n-1] for curve order n" )
    public_key			= ( curve or SECP256K1 ).public_key( key )
    keyhex			= '0x' + key.hex()
    address			= eth_account.Account.from_key( keyhex ).address
    return KeyPair( key.hex(), bytes( public_key ).hex(), address )


def account(
    mnemonic: str,
    passphrase: Optional[Union[str,bytes]] = None,
    curve: Optional[CurveEngine] = None,
) -> KeyPair:
    """Derive the m/44'/60'/0'/0/0 Ethereum account KeyPair from the BIP-39 Mnemonic and passphrase."""
    return keypair( derive_account_key( mnemonic, passphrase, curve=curve ), curve=curve )
