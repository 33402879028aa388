"""Well-known block identifiers."""

from blockworld.core.types import BlockId

AIR: BlockId = "minecraft:air"
STONE: BlockId = "minecraft:stone"
SPONGE: BlockId = "minecraft:sponge"
SIGN: BlockId = "minecraft:sign"

UNBUFFERED_BLOCKS: tuple[BlockId, ...] = (AIR, STONE, SPONGE)
BUFFERED_BLOCKS: tuple[BlockId, ...] = (SIGN,)
