from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from match3.constants import TOKEN_VARIETY


class TokenType(str, Enum):
    """Symbol painted on a tile. Declaration order is spawn priority order."""
    USDC = "USDC"
    AERO = "AERO"
    OWB = "OWB"
    CBBTC = "CBBTC"
    ETH = "ETH"
    ZORA = "ZORA"
    DEGEN = "DEGEN"
    BRETT = "BRETT"


class PowerType(str, Enum):
    ROW = "row"
    COL = "col"
    BOMB = "bomb"


TOKEN_LIST: tuple[TokenType, ...] = tuple(TokenType)
ACTIVE_TOKENS: tuple[TokenType, ...] = TOKEN_LIST[:TOKEN_VARIETY]


class Coord(NamedTuple):
    row: int
    col: int


class Move(NamedTuple):
    src: Coord
    dst: Coord


@dataclass(frozen=True, slots=True)
class Tile:
    """A placed token with a stable identity.

    ``id`` is minted once when the tile spawns and is the join key the
    animation layer uses to follow a tile through gravity and refill.
    """
    id: str
    token: TokenType
    power: Optional[PowerType] = None
