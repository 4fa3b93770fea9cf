from typing import List, Set

from eth_typing import BLSPubkey
from eth_utils import encode_hex

from triggerable_exits.abc import ExitOperationConsumerAPI
from triggerable_exits.exceptions import ExitOperationRejected
from triggerable_exits.rlp.exits import ExitRequest


class ValidatorSetConsumer(ExitOperationConsumerAPI):
    """
    Minimal stand-in for the consensus side: exits validators from a set of active
    pubkeys, rejecting unknown or already exited ones.
    """
    def __init__(self, active_pubkeys: Set[BLSPubkey]) -> None:
        self.active_pubkeys = set(active_pubkeys)
        self.exited: List[ExitRequest] = []

    def process_exit(self, exit_request: ExitRequest) -> None:
        pubkey = exit_request.validator_pubkey
        if pubkey not in self.active_pubkeys:
            raise ExitOperationRejected(f"Validator {encode_hex(pubkey)} is not active")
        self.active_pubkeys.remove(pubkey)
        self.exited.append(exit_request)
