from typing import Iterable

from eth_typing import Address, BLSPubkey
from eth_utils import (
    big_endian_to_int,
    get_extended_debug_logger,
    to_tuple,
)

from triggerable_exits.abc import StorageAPI
from triggerable_exits.constants import (
    ADDRESS_SIZE,
    QUEUE_HEAD_STORAGE_SLOT,
    QUEUE_STORAGE_OFFSET,
    QUEUE_TAIL_STORAGE_SLOT,
    SLOTS_PER_EXIT_REQUEST,
    STORAGE_WORD_SIZE,
    VALIDATOR_PUBKEY_SIZE,
)
from triggerable_exits.rlp.exits import ExitRequest
from triggerable_exits.typing import QueueIndex, StorageSlot

# pubkey[32:48] is stored in the high-order bytes of the third slot
PUBKEY_TAIL_SIZE = VALIDATOR_PUBKEY_SIZE - STORAGE_WORD_SIZE
PUBKEY_TAIL_PADDING = b'\x00' * (STORAGE_WORD_SIZE - PUBKEY_TAIL_SIZE)


def get_request_slot(index: QueueIndex) -> StorageSlot:
    return StorageSlot(QUEUE_STORAGE_OFFSET + index * SLOTS_PER_EXIT_REQUEST)


def _word(value: int) -> bytes:
    return value.to_bytes(STORAGE_WORD_SIZE, 'big')


class ExitQueue:
    """
    FIFO of pending exit requests over an append-only region of storage.

    Live entries are exactly the positions ``[head_index, tail_index)``. Entries
    below ``head_index`` are dead and are overwritten after the pointers are reset
    to zero, which only happens when the queue drains.
    """
    logger = get_extended_debug_logger('triggerable_exits.ExitQueue')

    def __init__(self, storage: StorageAPI) -> None:
        self.storage = storage

    @property
    def head_index(self) -> QueueIndex:
        return QueueIndex(self.storage.get(QUEUE_HEAD_STORAGE_SLOT))

    @property
    def tail_index(self) -> QueueIndex:
        return QueueIndex(self.storage.get(QUEUE_TAIL_STORAGE_SLOT))

    def pending_count(self) -> int:
        return self.tail_index - self.head_index

    def enqueue(self, exit_request: ExitRequest) -> QueueIndex:
        tail_index = self.tail_index
        slot = get_request_slot(tail_index)

        self.storage.set(slot, big_endian_to_int(exit_request.source_address))
        self.storage.set(
            StorageSlot(slot + 1),
            big_endian_to_int(exit_request.validator_pubkey[:STORAGE_WORD_SIZE]),
        )
        self.storage.set(
            StorageSlot(slot + 2),
            big_endian_to_int(
                exit_request.validator_pubkey[STORAGE_WORD_SIZE:] + PUBKEY_TAIL_PADDING
            ),
        )
        self.storage.set(QUEUE_TAIL_STORAGE_SLOT, tail_index + 1)

        self.logger.debug("Enqueued %s at position %d", exit_request, tail_index)
        return tail_index

    def get_request(self, index: QueueIndex) -> ExitRequest:
        if not self.head_index <= index < self.tail_index:
            raise IndexError(
                f"Position {index} is outside the live range "
                f"[{self.head_index}, {self.tail_index})"
            )
        slot = get_request_slot(index)

        source_address = _word(self.storage.get(slot))[-ADDRESS_SIZE:]
        pubkey_head = _word(self.storage.get(StorageSlot(slot + 1)))
        pubkey_tail = _word(self.storage.get(StorageSlot(slot + 2)))[:PUBKEY_TAIL_SIZE]

        return ExitRequest(
            source_address=Address(source_address),
            validator_pubkey=BLSPubkey(pubkey_head + pubkey_tail),
        )

    @to_tuple
    def peek_batch(self, max_count: int) -> Iterable[ExitRequest]:
        if max_count < 0:
            raise ValueError(f"max_count cannot be negative: {max_count}")
        head_index = self.head_index
        batch_size = min(max_count, self.tail_index - head_index)
        for index in range(head_index, head_index + batch_size):
            yield self.get_request(QueueIndex(index))

    def advance(self, n: int) -> None:
        head_index = self.head_index
        tail_index = self.tail_index
        if not 0 <= n <= tail_index - head_index:
            raise ValueError(
                f"Cannot advance the queue head by {n} with only "
                f"{tail_index - head_index} pending exits"
            )

        new_head_index = head_index + n
        if new_head_index == tail_index:
            self.storage.set(QUEUE_HEAD_STORAGE_SLOT, 0)
            self.storage.set(QUEUE_TAIL_STORAGE_SLOT, 0)
            self.logger.debug("Queue drained after dequeuing %d exits, pointers reset", n)
        else:
            self.storage.set(QUEUE_HEAD_STORAGE_SLOT, new_head_index)
            self.logger.debug("Dequeued %d exits, head now at %d", n, new_head_index)

    def __len__(self) -> int:
        return self.pending_count()
