from dataclasses import replace
from typing import Optional, Tuple

from esper import World

from match3.components.board import BoardConfig
from match3.components.game_state import GameState
from match3.components.session import Session
from match3.components.tile import Coord
from match3.events.bus import (
    EventBus,
    EVENT_BOARD_RESHUFFLED,
    EVENT_CASCADE_COMPLETE,
    EVENT_CASCADE_STEP,
    EVENT_GAME_OVER,
    EVENT_GAME_STARTED,
    EVENT_HINT_CLEARED,
    EVENT_HINT_REQUEST,
    EVENT_HINT_SHOWN,
    EVENT_HINT_UNAVAILABLE,
    EVENT_NEW_GAME,
    EVENT_SCORE_CHANGED,
    EVENT_TILE_CLICK,
    EVENT_TILE_DESELECTED,
    EVENT_TILE_SELECTED,
    EVENT_TILE_SWAP_INVALID,
    EVENT_TILE_SWAP_REQUEST,
    EVENT_TILE_SWAP_VALID,
)
from match3.systems.board_ops import in_bounds, is_adjacent
from match3.systems.move_oracle import find_hint_move
from match3.systems.resolution import apply_swap, create_initial_state


class BoardSystem:
    """Drives one play session from input events.

    Logic:
      - EVENT_TILE_CLICK: first click selects, clicking the selection again
        deselects, a non-adjacent click moves the selection and an adjacent
        click requests a swap.
      - EVENT_TILE_SWAP_REQUEST: resolves the swap and publishes the cascade
        steps, score change, reshuffle and game over.
      - EVENT_HINT_REQUEST / EVENT_NEW_GAME: hint oracle and session reset.
    Input is ignored once the session has no moves left.
    """
    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        seed: Optional[int] = None,
        config: Optional[BoardConfig] = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.config = config or BoardConfig()
        state = create_initial_state(seed, config=self.config, rng=self.world.random)
        self.session_entity = self.world.create_entity(Session(state=state, config=self.config))
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_TILE_SWAP_REQUEST, self.on_swap_request)
        self.event_bus.subscribe(EVENT_HINT_REQUEST, self.on_hint_request)
        self.event_bus.subscribe(EVENT_NEW_GAME, self.on_new_game)

    @property
    def session(self) -> Session:
        return self.world.component_for_entity(self.session_entity, Session)

    @property
    def state(self) -> GameState:
        return self.session.state

    @property
    def selected(self) -> Optional[Coord]:
        return self.state.selected

    def is_game_over(self) -> bool:
        return self.state.moves <= 0

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None or self.is_game_over():
            return
        coord = Coord(row, col)
        if not in_bounds(self.state.board, coord):
            return
        self._clear_hint()
        selected = self.state.selected
        if selected is None:
            self._set_selected(coord)
        elif selected == coord:
            self._set_selected(None)
            self.event_bus.emit(EVENT_TILE_DESELECTED, reason='same_tile', prev_row=row, prev_col=col)
        elif not is_adjacent(selected, coord):
            self._set_selected(coord)
        else:
            self.event_bus.emit(EVENT_TILE_SWAP_REQUEST, src=selected, dst=coord)

    def on_swap_request(self, sender, **kwargs):
        src = kwargs.get('src')
        dst = kwargs.get('dst')
        if not src or not dst or self.is_game_over():
            return
        self._clear_hint()
        session = self.session
        previous = session.state
        result = apply_swap(previous, src, dst, rng=self.world.random, config=self.config)
        session.state = result.next_state
        if not result.did_consume_move:
            self.event_bus.emit(EVENT_TILE_SWAP_INVALID, src=src, dst=dst, reason=self._rejection_reason(previous, src, dst))
            return
        self.event_bus.emit(EVENT_TILE_SWAP_VALID, src=src, dst=dst, steps=result.steps)
        for depth, step in enumerate(result.steps, start=1):
            self.event_bus.emit(EVENT_CASCADE_STEP, depth=depth, step=step)
        delta = result.next_state.score - previous.score
        self.event_bus.emit(EVENT_CASCADE_COMPLETE, depth=len(result.steps), points=delta)
        if result.did_reshuffle:
            session.reshuffles += 1
            self.event_bus.emit(EVENT_BOARD_RESHUFFLED, board=result.next_state.board)
        self.event_bus.emit(
            EVENT_SCORE_CHANGED,
            score=result.next_state.score,
            delta=delta,
            moves=result.next_state.moves,
        )
        if self.is_game_over():
            self.event_bus.emit(
                EVENT_GAME_OVER,
                score=result.next_state.score,
                moves_used=self.config.initial_moves - result.next_state.moves,
                hints_used=session.hints_used,
            )

    def on_hint_request(self, sender, **kwargs):
        if self.is_game_over():
            return
        session = self.session
        move = find_hint_move(session.state.board)
        if move is None:
            self.event_bus.emit(EVENT_HINT_UNAVAILABLE)
            return
        session.hint = move
        session.hints_used += 1
        self.event_bus.emit(EVENT_HINT_SHOWN, src=move.src, dst=move.dst)

    def on_new_game(self, sender, **kwargs):
        seed = kwargs.get('seed')
        state = create_initial_state(
            seed,
            config=self.config,
            rng=self.world.random,
            next_tile_id=self.state.next_tile_id,
        )
        self.world.add_component(self.session_entity, Session(state=state, config=self.config))
        self.event_bus.emit(EVENT_GAME_STARTED, state=state)

    def _set_selected(self, coord: Optional[Tuple[int, int]]):
        session = self.session
        session.state = replace(session.state, selected=Coord(*coord) if coord is not None else None)
        if coord is not None:
            self.event_bus.emit(EVENT_TILE_SELECTED, row=coord[0], col=coord[1])

    def _clear_hint(self):
        session = self.session
        if session.hint is not None:
            session.hint = None
            self.event_bus.emit(EVENT_HINT_CLEARED)

    @staticmethod
    def _rejection_reason(state: GameState, src, dst) -> str:
        if state.moves <= 0:
            return 'no_moves_left'
        if not (in_bounds(state.board, src) and in_bounds(state.board, dst)):
            return 'out_of_bounds'
        if not is_adjacent(src, dst):
            return 'not_adjacent'
        return 'no_match'
