from typing import (
    Iterable,
    Union,
)

from eth.abc import (
    BlockHeaderAPI,
    SignedTransactionAPI,
)
from eth.rlp.headers import BlockHeader
import rlp
from rlp import sedes

from .exits import ExitRequest
from .sedes import (
    UninterpretedTransaction,
    UninterpretedTransactionRLP,
)


class BlockBody(rlp.Serializable):
    """
    A block body extended with the ordered exit operations dequeued into the block.
    """
    fields = [
        ('transactions', sedes.CountableList(UninterpretedTransactionRLP)),
        ('uncles', sedes.CountableList(BlockHeader)),
        ('exits', sedes.CountableList(ExitRequest)),
    ]

    def __init__(
            self,
            transactions: Iterable[Union[UninterpretedTransaction, SignedTransactionAPI]] = (),
            uncles: Iterable[BlockHeaderAPI] = (),
            exits: Iterable[ExitRequest] = ()) -> None:
        if not isinstance(transactions, (list, bytes)):
            transactions = rlp.decode(rlp.encode(transactions))
        super().__init__(transactions, uncles, tuple(exits))
