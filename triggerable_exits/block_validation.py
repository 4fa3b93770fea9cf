from typing import Sequence, Tuple

from eth_typing import Hash32
from eth_utils import encode_hex

from triggerable_exits._utils.trie import make_exits_root
from triggerable_exits.configs import ExitConfig
from triggerable_exits.exceptions import (
    BlockCommitmentMismatch,
    BlockContentMismatch,
)
from triggerable_exits.queue import ExitQueue
from triggerable_exits.rlp.exits import ExitRequest


def get_expected_exits(queue: ExitQueue, config: ExitConfig) -> Tuple[ExitRequest, ...]:
    return queue.peek_batch(config.MAX_EXITS_PER_BLOCK)


def validate_exits_root(expected_exits: Sequence[ExitRequest], exits_root: Hash32) -> None:
    expected_root = make_exits_root(expected_exits)
    if exits_root != expected_root:
        raise BlockCommitmentMismatch(
            f"Block declares exits root {encode_hex(exits_root)} but the "
            f"{len(expected_exits)} exits due from the queue have root "
            f"{encode_hex(expected_root)}"
        )


def validate_exits_content(expected_exits: Sequence[ExitRequest],
                           exits: Sequence[ExitRequest]) -> None:
    if len(exits) != len(expected_exits):
        raise BlockContentMismatch(
            f"Block declares {len(exits)} exits but {len(expected_exits)} are due "
            f"from the queue"
        )

    for index, (exit_request, expected) in enumerate(zip(exits, expected_exits)):
        if exit_request != expected:
            raise BlockContentMismatch(
                f"Exit at index {index} of the block is {exit_request} but the "
                f"queue mandates {expected}"
            )


def validate_block_exits(queue: ExitQueue,
                         config: ExitConfig,
                         exits_root: Hash32,
                         exits: Sequence[ExitRequest]) -> Tuple[ExitRequest, ...]:
    """
    Check a block's declared exits root and exit list against the batch the queue
    mandates. Must see the queue after the block's last admission and before it is
    finalized. Read-only.

    Return the expected batch, which is what finalization is about to dequeue.
    """
    expected_exits = get_expected_exits(queue, config)
    validate_exits_root(expected_exits, exits_root)
    validate_exits_content(expected_exits, exits)
    return expected_exits
