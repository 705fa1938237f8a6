import logging

import numpy as np

from .constants import DAMPING, DT, G, HEIGHT, WIDTH

logger = logging.getLogger(__name__)


def bound(entity, width, height, damping=DAMPING):
    """
    Reflect the entity's velocity off the arena walls.

    The arena is centered on the origin. Each axis is checked on its own: an
    entity beyond a wall and still moving outward has that velocity component
    inverted and the whole velocity scaled by `damping`. A corner strike
    applies both corrections one after the other.
    """
    halfwidth = width / 2
    halfheight = height / 2
    pos = entity.position
    vel = entity.velocity

    if (pos.x < -halfwidth and vel.x < 0) or (pos.x > halfwidth and vel.x > 0):
        vel = vel.invert_x().scalar_mul(damping)

    if (pos.y < -halfheight and vel.y < 0) or (pos.y > halfheight and vel.y > 0):
        vel = vel.invert_y().scalar_mul(damping)

    entity.velocity = vel


def step(entities, dt, bounds=(WIDTH, HEIGHT), damping=DAMPING, g=G):
    """
    Advance every entity by one tick of length `dt`.

    All accelerations are computed first, against positions that no entity
    has moved yet. Only then is each entity bounded and integrated.
    """
    width, height = bounds

    for i, e in enumerate(entities):
        e.update_gravitational_acceleration(entities, self_index=i, g=g)

    for e in entities:
        bound(e, width, height, damping)
        e.update(dt)


class World:
    def __init__(self, width=WIDTH, height=HEIGHT, damping=DAMPING, g=G):
        self.width = width
        self.height = height
        self.damping = damping
        self.g = g

        self.entities = []
        self.tick_count = 0

    def add_entity(self, entity):
        self.entities.append(entity)

    def reset(self, entities):
        """Discard the current entities and start over from `entities`."""
        self.entities = list(entities)
        self.tick_count = 0
        logger.info("World reset with %d entities", len(self.entities))

    def bound(self, entity):
        bound(entity, self.width, self.height, self.damping)

    def step(self, dt=DT):
        step(self.entities, dt, (self.width, self.height), self.damping, self.g)
        self.tick_count += 1
        logger.debug("Tick %d advanced %d entities by %s", self.tick_count, len(self.entities), dt)

    # --- Diagnostics ---

    def state_array(self):
        """N x 7 array of (mass, px, py, vx, vy, ax, ay) rows."""
        if not self.entities:
            return np.zeros((0, 7), dtype=np.float64)
        return np.array([e.to_record() for e in self.entities], dtype=np.float64)

    def center_of_mass(self):
        state = self.state_array()
        masses = state[:, 0]
        total_mass = float(np.sum(masses))
        if total_mass == 0:
            return np.zeros(2)
        return np.sum(masses[:, None] * state[:, 1:3], axis=0) / total_mass

    def total_momentum(self):
        state = self.state_array()
        return np.sum(state[:, 0:1] * state[:, 3:5], axis=0)

    def kinetic_energy(self):
        state = self.state_array()
        return float(0.5 * np.sum(state[:, 0] * np.sum(state[:, 3:5] ** 2, axis=1)))

    def __repr__(self):
        return f"<World {self.width}x{self.height} entities={len(self.entities)} ticks={self.tick_count}>"
