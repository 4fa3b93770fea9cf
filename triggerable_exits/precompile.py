from eth_typing import Address, BLSPubkey
from eth_utils import (
    encode_hex,
    get_extended_debug_logger,
)

from triggerable_exits.abc import StorageAPI, ValueTransferAPI
from triggerable_exits.configs import ExitConfig
from triggerable_exits.constants import (
    ADDRESS_SIZE,
    EXIT_CALL_DATA_SIZE,
    STORAGE_WORD_SIZE,
    VALIDATOR_PUBKEY_SIZE,
)
from triggerable_exits.exceptions import (
    InsufficientPayment,
    InvalidCallData,
    RefundTransferFailed,
)
from triggerable_exits.fee_market import FeeMarket
from triggerable_exits.queue import ExitQueue
from triggerable_exits.rlp.exits import ExitRequest
from triggerable_exits.typing import Fee


class ExitPrecompile:
    """
    Entry point invoked by the execution environment for every call to the exit
    precompile.

    An admission is all-or-nothing: it runs inside a storage checkpoint that is
    discarded if the payment is too low or the refund of any overpayment fails.
    """
    logger = get_extended_debug_logger('triggerable_exits.ExitPrecompile')

    def __init__(self,
                 storage: StorageAPI,
                 config: ExitConfig,
                 value_transfer: ValueTransferAPI) -> None:
        self.storage = storage
        self.config = config
        self.value_transfer = value_transfer
        self.fee_market = FeeMarket(storage, config)
        self.queue = ExitQueue(storage)

    def __call__(self, caller: Address, value: int, data: bytes) -> bytes:
        """
        Dispatch a raw call: 48 bytes of input request an exit, empty input with
        no value queries the current fee.
        """
        if len(data) == EXIT_CALL_DATA_SIZE:
            self.trigger_exit(caller, value, BLSPubkey(data))
            return b''
        elif len(data) == 0:
            if value:
                raise InvalidCallData(f"Fee query must not carry value, got {value}")
            return self.get_fee().to_bytes(STORAGE_WORD_SIZE, 'big')
        else:
            raise InvalidCallData(
                f"Expected {EXIT_CALL_DATA_SIZE} bytes of input or none, got {len(data)}"
            )

    def get_fee(self) -> Fee:
        return self.fee_market.current_fee()

    def trigger_exit(self,
                     caller: Address,
                     payment: int,
                     validator_pubkey: BLSPubkey) -> ExitRequest:
        if len(caller) != ADDRESS_SIZE:
            raise InvalidCallData(f"Caller must be a {ADDRESS_SIZE} byte address: {caller!r}")
        if len(validator_pubkey) != VALIDATOR_PUBKEY_SIZE:
            raise InvalidCallData(
                f"Validator pubkey must be {VALIDATOR_PUBKEY_SIZE} bytes, "
                f"got {len(validator_pubkey)}"
            )

        fee = self.fee_market.current_fee()
        if payment < fee:
            raise InsufficientPayment(payment, fee)

        exit_request = ExitRequest(source_address=caller, validator_pubkey=validator_pubkey)

        checkpoint = self.storage.record()
        try:
            self.fee_market.record_usage(1)
            self.queue.enqueue(exit_request)
            self._refund(caller, payment - fee)
        except Exception:
            self.storage.discard(checkpoint)
            raise
        else:
            self.storage.commit(checkpoint)

        self.logger.debug(
            "Admitted exit of %s from %s for fee %d",
            encode_hex(validator_pubkey),
            encode_hex(caller),
            fee,
        )
        return exit_request

    def _refund(self, caller: Address, excess_payment: int) -> None:
        if excess_payment <= 0:
            return

        gas = self.config.EXCESS_RETURN_GAS_STIPEND
        if not self.value_transfer.transfer(caller, excess_payment, gas):
            raise RefundTransferFailed(
                f"Refund of {excess_payment} to {encode_hex(caller)} was rejected "
                f"with a gas stipend of {gas}"
            )
        self.logger.debug2("Refunded %d to %s", excess_payment, encode_hex(caller))
