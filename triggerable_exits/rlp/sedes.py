from typing import (
    Any,
    List,
    Union,
)

from rlp import sedes

from triggerable_exits.constants import ADDRESS_SIZE, VALIDATOR_PUBKEY_SIZE

DecodedZeroOrOneLayerRLP = Union[bytes, List[bytes]]


class ZeroOrOneLayerRLP:
    """
    An RLP object of unknown interpretation, with a maximum "depth" of 1.

    It can be either a simple bytes object, or a list of bytes objects.
    """
    @classmethod
    def serialize(cls, obj: Any) -> DecodedZeroOrOneLayerRLP:
        return obj

    @classmethod
    def deserialize(cls, encoded: DecodedZeroOrOneLayerRLP) -> Any:
        return encoded


address_sedes = sedes.Binary.fixed_length(ADDRESS_SIZE)
validator_pubkey_sedes = sedes.Binary.fixed_length(VALIDATOR_PUBKEY_SIZE)


# Transactions stay uninterpreted bytes (or list of bytes, for legacy txns) in the
#   block body; decoding them is the execution environment's business.
UninterpretedTransaction = DecodedZeroOrOneLayerRLP
UninterpretedTransactionRLP = ZeroOrOneLayerRLP
