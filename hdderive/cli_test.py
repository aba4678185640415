import json
import logging

from click.testing	import CliRunner

from .cli		import cli

log				= logging.getLogger( 'cli_test' )

BIP39_ABANDON			= "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"
BIP39_ABANDON_SEED		= "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc19a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
BIP39_ABANDON_KEY		= "1ab42cc412b618bdea3a599e3c9bae199ebf030895b039e9db1e30dafb12b727"
BIP39_ABANDON_ADDRESS		= "0x9858EfFD232B4033E47d90003D41EC34EcaEda94"


def test_cli_seed():
    runner			= CliRunner()
    result			= runner.invoke( cli, [ 'seed', '--mnemonic', '-' ], input=BIP39_ABANDON + "\n" )
    assert result.exit_code == 0, result.output
    assert json.loads( result.output ) == dict( seed=BIP39_ABANDON_SEED )

    # The passphrase may also be read from input
    result			= runner.invoke( cli, [ '--no-json', 'seed', '--mnemonic', '-', '--passphrase', '-' ], input=BIP39_ABANDON + "\nTREZOR\n" )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == (
        "c55257c360c07c72029aebc1b53c05ed0362ada38ead3e3e9efa3708e53495531f09a6987599d18264c1e1c92f2cf141630c7a3c4ab7c81b2f001698e7463b04" )


def test_cli_key():
    runner			= CliRunner()
    result			= runner.invoke( cli, [ '--no-json', 'key', '--mnemonic', '-' ], input=BIP39_ABANDON + "\n" )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == BIP39_ABANDON_KEY

    result			= runner.invoke( cli, [ 'key', '--check', '--mnemonic', '-' ], input="  Abandon " + BIP39_ABANDON[8:].upper() + "\n" )
    assert result.exit_code == 0, result.output
    assert json.loads( result.output ) == {
        "path": "m/44'/60'/0'/0/0",
        "private_key": BIP39_ABANDON_KEY,
    }


def test_cli_key_show():
    runner			= CliRunner()
    result			= runner.invoke( cli, [ '--no-json', 'key', '--show', '--mnemonic', '-' ], input=BIP39_ABANDON + "\n" )
    assert result.exit_code == 0, result.output
    # The derivation table is on stderr; present in the (mixed) output
    assert BIP39_ABANDON_KEY in result.output
    assert "Chain code" in result.output
    assert "m/44'/60'/0'/0/0" in result.output


def test_cli_account():
    runner			= CliRunner()
    result			= runner.invoke( cli, [ 'account', '--mnemonic', '-' ], input=BIP39_ABANDON + "\n" )
    assert result.exit_code == 0, result.output
    assert json.loads( result.output ) == {
        "path": "m/44'/60'/0'/0/0",
        "address": BIP39_ABANDON_ADDRESS,
    }

    result			= runner.invoke( cli, [ '-v', 'account', '--mnemonic', '-' ], input=BIP39_ABANDON + "\n" )
    assert result.exit_code == 0, result.output
    record			= json.loads( result.output )
    assert record['address'] == BIP39_ABANDON_ADDRESS
    assert record['private_key'] == BIP39_ABANDON_KEY
    assert len( record['public_key'] ) == 66

    result			= runner.invoke( cli, [ '--no-json', 'account', '--mnemonic', '-' ], input=BIP39_ABANDON + "\n" )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == BIP39_ABANDON_ADDRESS


def test_cli_check_invalid():
    runner			= CliRunner()
    result			= runner.invoke( cli, [ 'key', '--check', '--mnemonic', '-' ], input=' '.join( [ 'abandon' ] * 12 ) + "\n" )
    assert result.exit_code == 1
    assert BIP39_ABANDON_KEY not in result.output

    # Without --check, any phrase whatsoever is used as supplied
    result			= runner.invoke( cli, [ '--no-json', 'key', '--mnemonic', '-' ], input=' '.join( [ 'abandon' ] * 12 ) + "\n" )
    assert result.exit_code == 0, result.output
    assert len( result.output.strip() ) == 64
