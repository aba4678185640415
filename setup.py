import os

from setuptools import setup

# 
# All platforms
# 
HERE				= os.path.dirname( os.path.abspath( __file__ ))


def requirements( name ):
    return list(
        # Remove whitespace, elide blank lines and comments
        ''.join( r.split() )
        for r in open( os.path.join( HERE, name )).readlines()
        if r.strip() and not r.strip().startswith( '#' )
    )


install_requires		= requirements( "requirements.txt" )
tests_require			= requirements( "requirements-tests.txt" )

# Since setuptools is retiring tests_require, add it as an option
extras_require			= {
    'tests':			tests_require,
}

# Must work if setup.py is run in the source distribution context, or from
# within the packaged distribution directory.
__version__			= None
try:
    exec( open( os.path.join( HERE, 'hdderive/version.py' ), 'r' ).read() )
except FileNotFoundError:
    exec( open( os.path.join( HERE, 'version.py' ), 'r' ).read() )

console_scripts			= [
    'hdderive-cli	= hdderive.cli:cli',
]

entry_points			= {
    'console_scripts': 		console_scripts,
}

package_dir			= {
    "hdderive":			"./hdderive",
    "hdderive.cli":		"./hdderive/cli",
}

long_description_content_type	= 'text/markdown'
long_description		= """\
Deriving the standard Ethereum account from a BIP-39 Mnemonic Phrase
requires three standards to be applied in sequence: BIP-39 (mnemonic
to 512-bit seed), BIP-32 (seed to master extended key, and parent to
child key derivation) and BIP-44 (the derivation path).

The [python-hdderive] project computes exactly one thing: the
secp256k1 private key (and its Ethereum address) at the [derivation
path] *m/44'/60'/0'/0/0*, as used by Trezor, Ledger and MetaMask for
the first Ethereum account.

# Deriving the Account

    $ python3 -m hdderive --no-json key --mnemonic -
    BIP-39 mnemonic: abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about
    BIP-39 passphrase:
    1ab42cc412b618bdea3a599e3c9bae199ebf030895b039e9db1e30dafb12b727

    $ python3 -m hdderive account --check --mnemonic -
    ...
    {
        "path": "m/44'/60'/0'/0/0",
        "address": "0x9858EfFD232B4033E47d90003D41EC34EcaEda94"
    }

Use `--show` to display the chain code and public key at each step of the
derivation, and `-v` to include the public and private key with the address.

The mnemonic is used exactly as supplied; use `--check` to validate (and
canonicalize) it as a BIP-39 Mnemonic first.

# Using the API

    >>> from hdderive import derive_account_key, account
    >>> derive_account_key( "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about" )
    '1ab42cc412b618bdea3a599e3c9bae199ebf030895b039e9db1e30dafb12b727'

Each step returns a `Derived` result carrying either its value or its failure,
so steps chain without raising:

    >>> from hdderive import derive_seed, derive_master, walk_path
    >>> derive_seed( mnemonic, passphrase ).then( derive_master ).then( walk_path ).unwrap()

[python-hdderive] <https://github.com/pjkundert/python-hdderive.git>

[derivation path]
<https://medium.com/myetherwallet/hd-wallets-and-derivation-paths-explained-865a643c7bf2>
"""

classifiers			= [
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "License :: Other/Proprietary License",
    "Programming Language :: Python :: 3",
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Environment :: Console",
    "Topic :: Security :: Cryptography",
    "Topic :: Office/Business :: Financial",
]
project_urls			= {
    "Bug Tracker": "https://github.com/pjkundert/python-hdderive/issues",
}

setup(
    name			= "hdderive",
    version			= __version__,
    install_requires		= install_requires,
    extras_require		= extras_require,
    packages			= package_dir.keys(),
    package_dir			= package_dir,
    include_package_data	= True,
    zip_safe			= True,
    entry_points		= entry_points,
    author			= "Perry Kundert",
    author_email		= "perry@dominionrnd.com",
    project_urls		= project_urls,
    description			= "Derive the standard m/44'/60'/0'/0/0 Ethereum account key from a BIP-39 Mnemonic Phrase",
    long_description		= long_description,
    long_description_content_type = long_description_content_type,
    license			= "Dual License; GPLv3 and Proprietary",
    keywords			= "Ethereum cryptocurrency BIP-39 BIP-32 BIP-44 HD wallet key derivation secp256k1",
    url				= "https://github.com/pjkundert/python-hdderive",
    classifiers			= classifiers,
    python_requires		= ">=3.9",
)
