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
from __future__		import annotations

import logging

from coincurve		import PublicKey

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )


class CurveEngine:
    """The elliptic-curve capability required by non-hardened child key derivation.  Only two
    operations are needed:

      .public_point	-- compute the public point for a 32-byte private key
      .compress		-- produce the 33-byte SEC1 compressed form of a public point

    The derivation code never inspects the point itself; whatever .public_point returns is simply
    handed back to .compress.  Substitute any object supplying these two methods (eg. a fake, for
    testing derivation edge cases).

    """
    name			= None

    def public_point( self, key: bytes ):
        raise NotImplementedError( f"{self.__class__.__name__} does not implement public_point" )

    def compress( self, point ) -> bytes:
        raise NotImplementedError( f"{self.__class__.__name__} does not implement compress" )

    def public_key( self, key: bytes ) -> bytes:
        """The SEC1 compressed public key for the private key."""
        return self.compress( self.public_point( key ))

    def __repr__( self ):
        return f"{self.__class__.__name__}({self.name})"


class Secp256k1( CurveEngine ):
    """The secp256k1 curve, via libsecp256k1 (coincurve).  Raises ValueError for a key that is not
    a valid secp256k1 private key (ie. 0, or >= the curve order).

    """
    name			= "secp256k1"

    def public_point( self, key: bytes ) -> PublicKey:
        return PublicKey.from_secret( key )

    def compress( self, point: PublicKey ) -> bytes:
        return point.format( compressed=True )


SECP256K1			= Secp256k1()
