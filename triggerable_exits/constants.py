from eth_typing import Address

from triggerable_exits.typing import StorageSlot


ADDRESS_SIZE = 20
VALIDATOR_PUBKEY_SIZE = 48
STORAGE_WORD_SIZE = 32

# Input length of an admission call: the validator pubkey and nothing else
EXIT_CALL_DATA_SIZE = VALIDATOR_PUBKEY_SIZE

#
# Storage layout
#
EXCESS_EXITS_STORAGE_SLOT = StorageSlot(0)
EXIT_COUNT_STORAGE_SLOT = StorageSlot(1)
QUEUE_HEAD_STORAGE_SLOT = StorageSlot(2)
QUEUE_TAIL_STORAGE_SLOT = StorageSlot(3)
# First slot of the append-only request region
QUEUE_STORAGE_OFFSET = StorageSlot(4)
# source_address, validator_pubkey[0:32], validator_pubkey[32:48]
SLOTS_PER_EXIT_REQUEST = 3

DEFAULT_PRECOMPILE_ADDRESS = Address(
    b'\x0f\x1e\x2d\x3c\x4b\x5a\x69\x78\x87\x96\xa5\xb4\xc3\xd2\xe1\xf0\x00\x00\xaa\xaa'
)
