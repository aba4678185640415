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

import click
import json
import logging
import sys

import tabulate

from ..api		import derive_seed, derive_master, derive_account, path_keys, path_format, keypair
from ..curve		import SECP256K1
from ..defaults		import ACCOUNT_PATH, ACCOUNT_PATH_TEXT
from ..recovery		import recover_bip39
from ..util		import log_cfg, log_level, input_secure

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

"""
Provide basic CLI access to the hdderive API.

Output generally defaults to JSON.  Use -v for more details, and --no-json to emit standard text output instead.
"""

log				= logging.getLogger( __package__ )


@click.group()
@click.option('-v', '--verbose', count=True)
@click.option('-q', '--quiet', count=True)
@click.option( '--json/--no-json', default=True, help="Output JSON (the default)")
def cli( verbose, quiet, json ):
    cli.verbosity		= verbose - quiet
    log_cfg['level']		= log_level( cli.verbosity )
    logging.basicConfig( **log_cfg )
    if verbose or quiet:
        logging.getLogger().setLevel( log_cfg['level'] )
    cli.json			= json
cli.verbosity			= 0  # noqa: E305
cli.json			= False


def mnemonic_input( mnemonic, passphrase, check ):
    """Obtain the BIP-39 mnemonic and passphrase; '-' reads either from stdin.  Optionally, check
    (and canonicalize) the mnemonic first; otherwise, it is used exactly as supplied.

    """
    if mnemonic == '-':
        mnemonic		= input_secure( 'BIP-39 mnemonic: ', secret=True )
    else:
        log.warning( "It is recommended to not use '--mnemonic <phrase>'; specify '-' to read from input" )
    passphrase			= passphrase or ""
    if passphrase == '-':
        passphrase		= input_secure( 'BIP-39 passphrase: ', secret=True )
    elif passphrase:
        log.warning( "It is recommended to not use '--passphrase <password>'; specify '-' to read from input" )
    if check:
        try:
            mnemonic		= recover_bip39( mnemonic )
        except ValueError as exc:
            log.error( f"Invalid BIP-39 mnemonic: {exc}" )
            sys.exit( 1 )
    return mnemonic, passphrase


def emit( record, text ):
    """Output the record as JSON, or the text lines."""
    if cli.json:
        click.echo( json.dumps( record, indent=4 ))
    else:
        for line in text:
            click.echo( line )


def show_derivation( mnemonic, passphrase ):
    """Tabulate (on stderr) the path, chain code and public key at each depth of the derivation."""
    master			= derive_seed( mnemonic, passphrase ).then( derive_master ).unwrap()
    show_table			= [
        [ 0, path_format( () ), master.chain_code.hex(), SECP256K1.public_key( master.key ).hex() ]
    ]
    for depth,derived in enumerate( path_keys( master, ACCOUNT_PATH ), start=1 ):
        if not derived.ok:
            show_table.append( [ depth, path_format( ACCOUNT_PATH[:depth] ), "(failed)", str( derived.failure ) ] )
            break
        xkey			= derived.value
        show_table.append( [ depth, path_format( ACCOUNT_PATH[:depth] ), xkey.chain_code.hex(), SECP256K1.public_key( xkey.key ).hex() ] )
    click.echo( tabulate.tabulate( show_table, headers=("Depth", "Path", "Chain code", "Public key"), tablefmt='orgtbl' ), err=True )


def account_key( mnemonic, passphrase ):
    """The account private key hex; logs the failure and exits w/ non-zero status if impossible."""
    derived			= derive_account( mnemonic, passphrase )
    if not derived.ok:
        log.error( f"Failed to derive {ACCOUNT_PATH_TEXT} key: {derived.failure}" )
        sys.exit( 1 )
    return derived.value


@click.command()
@click.option( "--mnemonic", required=True, help="The BIP-39 mnemonic phrase; '-' reads it from stdin" )
@click.option( "--passphrase", default=None, help="The BIP-39 passphrase (default: ''); '-' reads it from stdin" )
@click.option( '--check/--no-check', default=False, help="Validate the BIP-39 mnemonic checksum (and expand word prefixes) first" )
def seed( mnemonic, passphrase, check ):
    """Output the 512-bit BIP-39 seed."""
    mnemonic,passphrase		= mnemonic_input( mnemonic, passphrase, check )
    secret			= derive_seed( mnemonic, passphrase ).unwrap()
    emit( dict( seed=secret.hex() ), [ secret.hex() ] )


@click.command()
@click.option( "--mnemonic", required=True, help="The BIP-39 mnemonic phrase; '-' reads it from stdin" )
@click.option( "--passphrase", default=None, help="The BIP-39 passphrase (default: ''); '-' reads it from stdin" )
@click.option( '--check/--no-check', default=False, help="Validate the BIP-39 mnemonic checksum (and expand word prefixes) first" )
@click.option( '--show/--no-show', default=False, help="Show the derivation of each step of the path (on stderr)" )
def key( mnemonic, passphrase, check, show ):
    """Output the m/44'/60'/0'/0/0 private key."""
    mnemonic,passphrase		= mnemonic_input( mnemonic, passphrase, check )
    if show:
        show_derivation( mnemonic, passphrase )
    private_key			= account_key( mnemonic, passphrase )
    emit( dict( path=ACCOUNT_PATH_TEXT, private_key=private_key ), [ private_key ] )


@click.command()
@click.option( "--mnemonic", required=True, help="The BIP-39 mnemonic phrase; '-' reads it from stdin" )
@click.option( "--passphrase", default=None, help="The BIP-39 passphrase (default: ''); '-' reads it from stdin" )
@click.option( '--check/--no-check', default=False, help="Validate the BIP-39 mnemonic checksum (and expand word prefixes) first" )
def account( mnemonic, passphrase, check ):
    """Output the m/44'/60'/0'/0/0 Ethereum address (and keys, w/ -v)."""
    mnemonic,passphrase		= mnemonic_input( mnemonic, passphrase, check )
    pair			= keypair( account_key( mnemonic, passphrase ))
    record			= dict( path=ACCOUNT_PATH_TEXT, address=pair.address )
    if cli.verbosity > 0:
        record.update( public_key=pair.public_key, private_key=pair.private_key )
    emit( record, [
        f"{nam:12} {val}"
        for nam,val in record.items()
    ] if cli.verbosity > 0 else [ pair.address ] )


cli.add_command( seed )
cli.add_command( key )
cli.add_command( account )
