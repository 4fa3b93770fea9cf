import enum
from typing import (
    Hashable,
    Iterable,
    NamedTuple,
    Sequence,
    Tuple,
)

from eth_typing import Address, BLSPubkey, Hash32
from eth_utils import (
    encode_hex,
    get_extended_debug_logger,
    to_tuple,
)

from triggerable_exits.abc import (
    ExitOperationConsumerAPI,
    StorageAPI,
    ValueTransferAPI,
)
from triggerable_exits.block_finalization import finalize_block
from triggerable_exits.block_validation import validate_block_exits
from triggerable_exits.configs import ExitConfig
from triggerable_exits.exceptions import (
    AdmissionError,
    BlockPhaseError,
    ExitOperationRejected,
    InvalidExitBlock,
)
from triggerable_exits.fee_market import FeeMarket
from triggerable_exits.precompile import ExitPrecompile
from triggerable_exits.queue import ExitQueue
from triggerable_exits.rlp.exits import ExitRequest


logger = get_extended_debug_logger('triggerable_exits.block_processing')


class BlockPhase(enum.Enum):
    IDLE = enum.auto()
    ADMITTING = enum.auto()
    VALIDATED = enum.auto()


class ExitCall(NamedTuple):
    caller: Address
    value: int
    data: bytes


@to_tuple
def hand_off_exits(exits: Sequence[ExitRequest],
                   consumer: ExitOperationConsumerAPI) -> Iterable[ExitRequest]:
    """
    Pass finalized exits to ``consumer`` in order and yield the ones it accepted.
    A failure to action one exit has no bearing on the block or on the exits after it.
    """
    for exit_request in exits:
        try:
            consumer.process_exit(exit_request)
        except ExitOperationRejected as err:
            logger.warning("Consumer rejected %s: %s", exit_request, err)
        except Exception:
            logger.exception("Consumer failed to process %s", exit_request)
        else:
            yield exit_request


class ExitBlockProcessor:
    """
    Drives the exit mechanism through one block at a time: admissions, then
    validation of the block's exits, then finalization.

    Every change made while processing a block is held in a storage checkpoint
    until the block is finalized, so an invalid block leaves no trace.
    """
    logger = get_extended_debug_logger('triggerable_exits.ExitBlockProcessor')

    def __init__(self,
                 storage: StorageAPI,
                 config: ExitConfig,
                 value_transfer: ValueTransferAPI,
                 consumer: ExitOperationConsumerAPI = None) -> None:
        self.storage = storage
        self.config = config
        self.consumer = consumer
        self.precompile = ExitPrecompile(storage, config, value_transfer)

        self._phase = BlockPhase.IDLE
        self._block_checkpoint: Hashable = None

    @property
    def phase(self) -> BlockPhase:
        return self._phase

    @property
    def queue(self) -> ExitQueue:
        return self.precompile.queue

    @property
    def fee_market(self) -> FeeMarket:
        return self.precompile.fee_market

    def _require_phase(self, expected: BlockPhase, action: str) -> None:
        if self._phase is not expected:
            raise BlockPhaseError(
                f"Cannot {action} while in phase {self._phase.name}, "
                f"expected {expected.name}"
            )

    def begin_block(self) -> None:
        self._require_phase(BlockPhase.IDLE, "begin a block")
        self._block_checkpoint = self.storage.record()
        self._phase = BlockPhase.ADMITTING

    def abort_block(self) -> None:
        """
        Discard every change made since :meth:`begin_block`.
        """
        if self._phase is BlockPhase.IDLE:
            raise BlockPhaseError("No block in progress to abort")
        self.storage.discard(self._block_checkpoint)
        self._block_checkpoint = None
        self._phase = BlockPhase.IDLE

    def call(self, caller: Address, value: int, data: bytes) -> bytes:
        self._require_phase(BlockPhase.ADMITTING, "call the exit precompile")
        return self.precompile(caller, value, data)

    def trigger_exit(self,
                     caller: Address,
                     payment: int,
                     validator_pubkey: BLSPubkey) -> ExitRequest:
        self._require_phase(BlockPhase.ADMITTING, "trigger an exit")
        return self.precompile.trigger_exit(caller, payment, validator_pubkey)

    def validate_block(self,
                       exits_root: Hash32,
                       exits: Sequence[ExitRequest]) -> Tuple[ExitRequest, ...]:
        self._require_phase(BlockPhase.ADMITTING, "validate a block")
        try:
            expected_exits = validate_block_exits(self.queue, self.config, exits_root, exits)
        except InvalidExitBlock as err:
            self.logger.debug("Rejecting block with exits root %s: %s", encode_hex(exits_root), err)
            self.abort_block()
            raise
        self._phase = BlockPhase.VALIDATED
        return expected_exits

    def finalize_block(self) -> Tuple[ExitRequest, ...]:
        self._require_phase(BlockPhase.VALIDATED, "finalize a block")
        dequeued = finalize_block(self.queue, self.fee_market, self.config)

        self.storage.commit(self._block_checkpoint)
        self.storage.persist()
        self._block_checkpoint = None
        self._phase = BlockPhase.IDLE

        self.logger.info(
            "Finalized block with %d exits, %d pending, next fee %d",
            len(dequeued),
            self.queue.pending_count(),
            self.fee_market.current_fee(),
        )

        if self.consumer is not None:
            hand_off_exits(dequeued, self.consumer)
        return dequeued

    def apply_block(self,
                    calls: Iterable[ExitCall],
                    exits_root: Hash32,
                    exits: Sequence[ExitRequest]) -> Tuple[ExitRequest, ...]:
        """
        Process a whole block: execute the exit precompile calls in order, then
        validate and finalize. A rejected call only fails that call. Raise
        :class:`~triggerable_exits.exceptions.InvalidExitBlock` if the block must
        be rejected, in which case none of its effects are kept.
        """
        self.begin_block()
        try:
            for call in calls:
                try:
                    self.call(call.caller, call.value, call.data)
                except AdmissionError as err:
                    self.logger.debug("Exit call from %s failed: %s", encode_hex(call.caller), err)
        except Exception:
            self.abort_block()
            raise

        self.validate_block(exits_root, exits)
        return self.finalize_block()
