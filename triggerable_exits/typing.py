from typing import NewType

Fee = NewType("Fee", int)  # wei
Gas = NewType("Gas", int)

StorageSlot = NewType("StorageSlot", int)  # uint256 key within the precompile's storage
QueueIndex = NewType("QueueIndex", int)  # absolute position in the exit request queue
