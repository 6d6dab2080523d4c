from match3.components.tile import Tile, TokenType


class TileIdGenerator:
    """Monotonic tile id source scoped to one session.

    The cursor round-trips through ``GameState.next_tile_id`` so each state
    transition resumes where the previous one stopped.
    """

    def __init__(self, start: int = 0, prefix: str = "tile"):
        self.cursor = start
        self.prefix = prefix

    def next_id(self) -> str:
        self.cursor += 1
        return f"{self.prefix}-{self.cursor}"

    def new_tile(self, token: TokenType) -> Tile:
        return Tile(id=self.next_id(), token=token)
