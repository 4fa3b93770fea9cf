import secrets

try:
    import factory
except ImportError:
    raise ImportError(
        "The triggerable_exits.tools.factories module requires the `factory_boy` library."
    )

from eth_typing import Address, BLSPubkey

from triggerable_exits.constants import ADDRESS_SIZE, VALIDATOR_PUBKEY_SIZE
from triggerable_exits.rlp.exits import ExitRequest


def mk_address() -> Address:
    return Address(secrets.token_bytes(ADDRESS_SIZE))


def mk_validator_pubkey() -> BLSPubkey:
    return BLSPubkey(secrets.token_bytes(VALIDATOR_PUBKEY_SIZE))


class ExitRequestFactory(factory.Factory):
    class Meta:
        model = ExitRequest

    source_address = factory.LazyFunction(mk_address)
    validator_pubkey = factory.LazyFunction(mk_validator_pubkey)
