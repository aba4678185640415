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
from .api		import *  # noqa F403
from .api		import __all__ as api__all__
from .curve		import CurveEngine, Secp256k1, SECP256K1
from .recovery		import recover_bip39
from .version		import __version__, __version_info__  # noqa F401

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= api__all__ + ( "CurveEngine", "Secp256k1", "SECP256K1", "recover_bip39" )
