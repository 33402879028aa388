"""Block identity registry.

BlockRegistry is a stateful service that maps stable block identifiers to
compact runtime states and tracks which states carry an auxiliary buffer.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from blockworld.core import block
from blockworld.core.types import MAX_STATE, NO_BLOCK, BlockId, BlockState, Buffer

logger = logging.getLogger(__name__)


class BlockRegistry:
    """Append-only bidirectional map between identifiers and states.

    States are handed out sequentially starting at ``first_state``. Once
    registered, an identifier keeps its state for the registry's lifetime.
    State numbers are local to this instance: two registries may number the
    same identifier differently.

    Args:
        first_state: First state to allocate (default 1; 0 means "no block").
    """

    def __init__(self, first_state: int = 1):
        """Initialize an empty registry.

        Args:
            first_state: First state to allocate. Must be in [1, 0xFFFF].

        Raises:
            ValueError: If first_state would collide with the reserved state 0
                or does not fit 16 bits.
        """
        if not 1 <= first_state <= MAX_STATE:
            raise ValueError(f"first_state must be in [1, {MAX_STATE}], got {first_state}")
        self._next_state = first_state
        self._id_to_state: dict[BlockId, BlockState] = {}
        self._state_to_id: dict[BlockState, BlockId] = {}
        self._buffered: set[BlockState] = set()

    def register(self, block_id: BlockId, *, buffered: bool = False) -> BlockState:
        """Register an identifier, reusing its state if already known.

        Re-registering does not allocate a new state but does overwrite the
        buffer requirement with ``buffered``.

        Args:
            block_id: Identifier to register.
            buffered: Whether blocks of this kind carry an auxiliary buffer.

        Returns:
            The identifier's state.

        Raises:
            OverflowError: If all 16-bit states are exhausted.
        """
        state = self._id_to_state.get(block_id)
        if state is None:
            if self._next_state > MAX_STATE:
                raise OverflowError(f"Block state space exhausted registering {block_id!r}")
            state = self._next_state
            self._next_state += 1
            self._id_to_state[block_id] = state
            self._state_to_id[state] = block_id
            logger.debug("Registered block %s as state %d", block_id, state)
        self.set_buffer_requirement(state, buffered)
        return state

    def set_buffer_requirement(self, state: BlockState, required: bool) -> None:
        """Flag or unflag a state as needing an auxiliary buffer. Idempotent."""
        if required:
            self._buffered.add(state)
        else:
            self._buffered.discard(state)

    def requires_buffer(self, state: BlockState) -> bool:
        return state in self._buffered

    def buffer_template(self, state: BlockState) -> Buffer | None:
        """Fresh empty buffer for a buffer-requiring state, None otherwise."""
        if state in self._buffered:
            return bytearray()
        return None

    def buffered_states(self) -> frozenset[BlockState]:
        return frozenset(self._buffered)

    def state_to_id(self, state: BlockState) -> BlockId | None:
        """Identifier for a state, or None if unregistered or NO_BLOCK."""
        return self._state_to_id.get(state)

    def id_to_state(self, block_id: BlockId | None) -> BlockState | None:
        """State for an identifier, or None if unregistered.

        ``None`` as identifier means "no block" and maps to NO_BLOCK.
        """
        if block_id is None:
            return NO_BLOCK
        return self._id_to_state.get(block_id)

    def has_state(self, state: BlockState) -> bool:
        return state in self._state_to_id

    def has_id(self, block_id: BlockId) -> bool:
        return block_id in self._id_to_state

    def __len__(self) -> int:
        return len(self._id_to_state)

    def __iter__(self) -> Iterator[tuple[BlockId, BlockState]]:
        """Iterate (identifier, state) pairs in registration order."""
        return iter(self._id_to_state.items())

    def __contains__(self, block_id: object) -> bool:
        return block_id in self._id_to_state


def default_registry(first_state: int = 1) -> BlockRegistry:
    """Registry pre-populated with the well-known blocks in ``core.block``."""
    registry = BlockRegistry(first_state=first_state)
    for block_id in block.UNBUFFERED_BLOCKS:
        registry.register(block_id)
    for block_id in block.BUFFERED_BLOCKS:
        registry.register(block_id, buffered=True)
    return registry
