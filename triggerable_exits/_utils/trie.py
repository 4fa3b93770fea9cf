from typing import (
    Sequence,
)

from eth.db.trie import _make_trie_root_and_nodes, TrieRootAndData
from eth_typing import Hash32
import rlp

from triggerable_exits.rlp.exits import ExitRequest


def make_exits_trie_root_and_nodes(exits: Sequence[ExitRequest]) -> TrieRootAndData:
    """
    Make the indexed trie root, and get the trie nodes, for an ordered list of exits.

    Each exit is rlp-encoded and inserted under the rlp-encoded list index, the same
    scheme used for the transaction and receipt roots.
    """
    encoded_items = tuple(rlp.encode(exit_request) for exit_request in exits)
    return _make_trie_root_and_nodes(encoded_items)


def make_exits_root(exits: Sequence[ExitRequest]) -> Hash32:
    root_hash, _ = make_exits_trie_root_and_nodes(exits)
    return root_hash
