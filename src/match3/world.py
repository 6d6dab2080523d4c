import random

from esper import World
from .events.bus import EventBus


def create_world(
    event_bus: EventBus,
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> World:
    """Create the ECS world a play session lives in.

    The world carries the session's random generator as ``world.random`` so
    refill and reshuffle draws are reproducible when a seed is given.
    """
    world = World()
    if rng is None:
        rng = random.Random(seed) if seed is not None else random.Random()
    setattr(world, "random", rng)
    setattr(world, "event_bus", event_bus)
    return world
