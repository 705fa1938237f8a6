import logging
import math

from .Point import Point
from .Vec2 import Vec2
from .constants import G, MIN_DISTANCE

logger = logging.getLogger(__name__)


def _as_value(cls, value, name):
    # a Point is never a velocity and a Vec2 is never a position
    if value is None:
        return cls(0.0, 0.0)
    if isinstance(value, cls):
        return value.copy()
    if isinstance(value, (Point, Vec2)):
        raise TypeError(f"{name} must be a {cls.__name__}, got {type(value).__name__}")
    return cls(*value)


class Entity:
    """
    A point mass moving in the plane.

    position, velocity and acceleration are immutable values that are
    replaced wholesale on every tick, never modified component-wise.
    """
    def __init__(self, mass, position=None, velocity=None, acceleration=None):
        self._mass = 1.0
        self.mass = mass
        self.position = _as_value(Point, position, "position")
        self.velocity = _as_value(Vec2, velocity, "velocity")
        self.acceleration = _as_value(Vec2, acceleration, "acceleration")

    @classmethod
    def from_record(cls, mass, posx, posy, velx, vely, accelx, accely):
        return cls(mass, Point(posx, posy), Vec2(velx, vely), Vec2(accelx, accely))

    @property
    def mass(self):
        return self._mass

    @mass.setter
    def mass(self, value):
        value = float(value)
        # mass divides the force when deriving acceleration
        if not math.isfinite(value) or value <= 0.0:
            raise ValueError(f"mass must be a positive finite number, got {value}")
        self._mass = value

    def distance(self, other):
        return self.position.distance(other.position)

    def gravitational_force(self, other, g=G):
        """
        Magnitude of the attraction between two entities. Entities closer
        than MIN_DISTANCE exert no force on each other.
        """
        d = self.distance(other)
        if d < MIN_DISTANCE:
            return 0.0
        return (g * self._mass * other.mass) / (d * d)

    def update_gravitational_acceleration(self, entities, self_index=None, g=G):
        """
        Set acceleration to the sum of the pulls of every other entity in
        `entities`. When `self_index` is given the entity at that index is
        skipped, otherwise this entity is skipped by identity.

        Only positions are read, so running this over a whole collection
        before moving anything sees a single consistent snapshot.
        """
        acceleration = Vec2(0.0, 0.0)
        for i, other in enumerate(entities):
            if self_index is None:
                if other is self:
                    continue
            elif i == self_index:
                continue

            d = self.distance(other)
            if d < MIN_DISTANCE:
                continue
            # force / self.mass without forming m1 * m2, which overflows first
            accel_scalar = g * other.mass / (d * d)
            normal = self.position.displacement_vector(other.position).normalize()
            total = acceleration.add(normal.scalar_mul(accel_scalar))
            if not (math.isfinite(total.x) and math.isfinite(total.y)):
                logger.debug("Dropping non-finite pull on %r from entity %d", self, i)
                continue
            acceleration = total
        self.acceleration = acceleration

    def update(self, dt):
        # semi-implicit Euler: position moves with the velocity from before this call
        self.position = self.position.add(self.velocity.scalar_mul(dt))
        self.velocity = self.velocity.add(self.acceleration.scalar_mul(dt))

    def to_record(self):
        return (self._mass,
                self.position.x, self.position.y,
                self.velocity.x, self.velocity.y,
                self.acceleration.x, self.acceleration.y)

    def __repr__(self):
        return (f"Entity(mass={self._mass}, pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"vel=({self.velocity.x:.2f}, {self.velocity.y:.2f}), "
                f"acc=({self.acceleration.x:.2f}, {self.acceleration.y:.2f}))")

    def __str__(self):
        return self.__repr__()
