from eth_typing import Address, BLSPubkey
from eth_utils import encode_hex, humanize_hash
import rlp

from .sedes import address_sedes, validator_pubkey_sedes


class ExitRequest(rlp.Serializable):
    """
    A request, paid for by ``source_address``, to exit the validator identified by
    ``validator_pubkey``. The same record is the queue entry and the block body's
    exit operation.
    """
    fields = [
        ('source_address', address_sedes),
        ('validator_pubkey', validator_pubkey_sedes),
    ]

    def __init__(self, source_address: Address, validator_pubkey: BLSPubkey) -> None:
        super().__init__(source_address, validator_pubkey)

    def __str__(self) -> str:
        return (
            f"source_address={encode_hex(self.source_address)}, "
            f"validator_pubkey={humanize_hash(self.validator_pubkey)}"
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {str(self)}>"
