from abc import ABC, abstractmethod
from typing import Hashable

from eth_typing import Address

from triggerable_exits.rlp.exits import ExitRequest
from triggerable_exits.typing import Gas, StorageSlot


class StorageAPI(ABC):
    """
    Durable slot -> uint256 store owned by the exit mechanism.

    Unset slots read as zero. Checkpoints nest: ``record`` opens one, ``commit``
    folds it into its parent and ``discard`` reverts every write made since it
    was opened.
    """

    @abstractmethod
    def get(self, slot: StorageSlot) -> int:
        ...

    @abstractmethod
    def set(self, slot: StorageSlot, value: int) -> None:
        ...

    @abstractmethod
    def record(self) -> Hashable:
        ...

    @abstractmethod
    def commit(self, checkpoint: Hashable) -> None:
        ...

    @abstractmethod
    def discard(self, checkpoint: Hashable) -> None:
        ...

    @abstractmethod
    def persist(self) -> None:
        """
        Flush all committed writes to the underlying database.
        """
        ...


class ValueTransferAPI(ABC):
    """
    Provided by the execution environment to move value out of the precompile.
    """

    @abstractmethod
    def transfer(self, recipient: Address, amount: int, gas: Gas) -> bool:
        """
        Send ``amount`` to ``recipient``, giving the recipient ``gas`` to execute.
        Return ``False`` if the recipient rejected the transfer.
        """
        ...


class ExitOperationConsumerAPI(ABC):
    """
    The consensus-side process that actions finalized exits.
    """

    @abstractmethod
    def process_exit(self, exit_request: ExitRequest) -> None:
        """
        Action a single exit. Raise
        :class:`~triggerable_exits.exceptions.ExitOperationRejected` if it cannot
        be actioned; this never affects the validity of the block.
        """
        ...
