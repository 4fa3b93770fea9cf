from typing import List, NamedTuple

from eth_typing import Address

from triggerable_exits.abc import ValueTransferAPI
from triggerable_exits.typing import Gas


class Transfer(NamedTuple):
    recipient: Address
    amount: int
    gas: Gas


class RecordingValueTransfer(ValueTransferAPI):
    """
    Accept every transfer except to addresses in ``rejecting_recipients``, and keep
    a log of the accepted ones.
    """
    def __init__(self, *rejecting_recipients: Address) -> None:
        self.rejecting_recipients = set(rejecting_recipients)
        self.transfers: List[Transfer] = []

    def transfer(self, recipient: Address, amount: int, gas: Gas) -> bool:
        if recipient in self.rejecting_recipients:
            return False
        self.transfers.append(Transfer(recipient, amount, gas))
        return True
