import math


class Vec2:
    """
    Immutable 2D relative quantity (displacement, velocity, acceleration).
    Every operation returns a new Vec2.
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

    def add(self, other):
        return Vec2(self._x + other.x, self._y + other.y)

    def subtract(self, other):
        return Vec2(self._x - other.x, self._y - other.y)

    def scalar_mul(self, scalar):
        return Vec2(self._x * scalar, self._y * scalar)

    def __add__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar):
        if isinstance(scalar, Vec2):
            return NotImplemented
        return self.scalar_mul(scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        return Vec2(self._x / scalar, self._y / scalar)

    def __neg__(self):
        return self.invert()

    def dot(self, other):
        return self._x * other.x + self._y * other.y

    def length(self):
        return math.sqrt(self._x * self._x + self._y * self._y)

    def length_sq(self):
        return self._x * self._x + self._y * self._y

    def normalize(self):
        l = self.length()
        if l > 0.0:
            return self.scalar_mul(1.0 / l)
        return Vec2(0.0, 0.0)

    def rotate(self, radians):
        """Counterclockwise rotation by `radians`."""
        c = math.cos(radians)
        s = math.sin(radians)
        return Vec2(self._x * c - self._y * s, self._x * s + self._y * c)

    # zero components stay +0.0 so equality and repr are stable
    def invert_x(self):
        return Vec2(-self._x if self._x != 0 else 0.0, self._y)

    def invert_y(self):
        return Vec2(self._x, -self._y if self._y != 0 else 0.0)

    def invert(self):
        return Vec2(-self._x if self._x != 0 else 0.0,
                    -self._y if self._y != 0 else 0.0)

    def __reduce__(self):
        return (self.__class__, (self._x, self._y))

    def copy(self):
        return Vec2(self._x, self._y)

    def __iter__(self):
        yield self._x
        yield self._y

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec2):
            return False
        return self._x == other.x and self._y == other.y

    def __hash__(self):
        return hash(('Vec2', self._x, self._y))

    def __repr__(self):
        return f"Vec2(x={self._x}, y={self._y})"

    def __str__(self):
        return self.__repr__()
