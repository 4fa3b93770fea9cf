from typing import Tuple

from eth_utils import get_extended_debug_logger

from triggerable_exits.configs import ExitConfig
from triggerable_exits.fee_market import FeeMarket
from triggerable_exits.queue import ExitQueue
from triggerable_exits.rlp.exits import ExitRequest


logger = get_extended_debug_logger('triggerable_exits.block_finalization')


def finalize_block(queue: ExitQueue,
                   fee_market: FeeMarket,
                   config: ExitConfig) -> Tuple[ExitRequest, ...]:
    """
    Dequeue up to ``MAX_EXITS_PER_BLOCK`` exits and roll the fee market forward.

    Return the dequeued exits, in order.
    """
    dequeue_count = min(queue.pending_count(), config.MAX_EXITS_PER_BLOCK)
    dequeued = queue.peek_batch(dequeue_count)
    queue.advance(dequeue_count)
    fee_market.roll_to_next_block()

    logger.debug(
        "Finalized block: dequeued %d exits, %d still pending",
        dequeue_count,
        queue.pending_count(),
    )
    return dequeued
