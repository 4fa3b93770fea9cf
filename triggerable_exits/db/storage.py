from eth.abc import DatabaseAPI
from eth.db.atomic import AtomicDB
from eth.db.journal import JournalDB, JournalDBCheckpoint
from eth.validation import validate_uint256
from eth_typing import Address
from eth_utils import (
    big_endian_to_int,
    encode_hex,
    get_extended_debug_logger,
    int_to_big_endian,
)

from triggerable_exits.abc import StorageAPI
from triggerable_exits.constants import STORAGE_WORD_SIZE
from triggerable_exits.typing import StorageSlot


class PrecompileStorage(StorageAPI):
    """
    Storage of a single precompile address, kept in a key-value database.

    Every write goes through a :class:`~eth.db.journal.JournalDB` so that an
    admission, or an entire candidate block, can be reverted. Writes reach the
    underlying database only on :meth:`persist`. As with account storage, a slot
    holding zero is absent from the database.
    """
    logger = get_extended_debug_logger('triggerable_exits.db.PrecompileStorage')

    def __init__(self, address: Address, db: DatabaseAPI = None) -> None:
        if db is None:
            db = AtomicDB()
        self.address = address
        self._db = db
        self._journal = JournalDB(db)

    def _slot_key(self, slot: StorageSlot) -> bytes:
        validate_uint256(slot, title="Storage Slot")
        return self.address + slot.to_bytes(STORAGE_WORD_SIZE, 'big')

    def get(self, slot: StorageSlot) -> int:
        key = self._slot_key(slot)
        try:
            return big_endian_to_int(self._journal[key])
        except KeyError:
            return 0

    def set(self, slot: StorageSlot, value: int) -> None:
        validate_uint256(value, title="Storage Value")
        key = self._slot_key(slot)
        self.logger.debug2("Set %s slot %d to %d", encode_hex(self.address), slot, value)
        if value:
            self._journal[key] = int_to_big_endian(value)
        elif key in self._journal:
            del self._journal[key]

    def record(self) -> JournalDBCheckpoint:
        return self._journal.record()

    def commit(self, checkpoint: JournalDBCheckpoint) -> None:
        self._journal.commit(checkpoint)

    def discard(self, checkpoint: JournalDBCheckpoint) -> None:
        self._journal.discard(checkpoint)

    def persist(self) -> None:
        self._journal.persist()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: address={encode_hex(self.address)}>"
