import math

from .Vec2 import Vec2


class Point:
    """
    Immutable absolute position. Only a Vec2 can be added to or subtracted
    from a Point; the difference between two points is their
    displacement_vector.
    """
    __slots__ = ('_x', '_y')

    def __init__(self, x, y):
        object.__setattr__(self, '_x', float(x))
        object.__setattr__(self, '_y', float(y))

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def add(self, vector):
        return Point(self._x + vector.x, self._y + vector.y)

    def subtract(self, vector):
        return Point(self._x - vector.x, self._y - vector.y)

    def __add__(self, vector):
        if not isinstance(vector, Vec2):
            return NotImplemented
        return self.add(vector)

    def __sub__(self, vector):
        if not isinstance(vector, Vec2):
            return NotImplemented
        return self.subtract(vector)

    def displacement_vector(self, other):
        """Vector leading from this point to `other`."""
        return Vec2(other.x - self._x, other.y - self._y)

    def distance(self, other):
        dx = other.x - self._x
        dy = other.y - self._y
        return math.sqrt(dx * dx + dy * dy)

    def __reduce__(self):
        return (self.__class__, (self._x, self._y))

    def copy(self):
        return Point(self._x, self._y)

    def __iter__(self):
        yield self._x
        yield self._y

    def __eq__(self, other):
        if other is None or not isinstance(other, Point):
            return False
        return self._x == other.x and self._y == other.y

    def __hash__(self):
        return hash(('Point', self._x, self._y))

    def __repr__(self):
        return f"Point(x={self._x}, y={self._y})"

    def __str__(self):
        return self.__repr__()
