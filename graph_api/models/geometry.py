"""
    Geometry primitives used for node placement and edge routing.
"""
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y}


@dataclass(frozen=True)
class Size:
    width: float = 0.0
    height: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {'width': self.width, 'height': self.height}


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size"""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_point_and_size(cls, top_left: Point, size: Size) -> 'Rect':
        return cls(top_left.x, top_left.y, size.width, size.height)

    @classmethod
    def centered_at(cls, center: Point, size: Size) -> 'Rect':
        return cls(center.x - size.width / 2, center.y - size.height / 2,
                   size.width, size.height)

    @property
    def top_left(self) -> Point:
        return Point(self.x, self.y)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def contains(self, other: 'Rect') -> bool:
        return (self.x <= other.x and self.y <= other.y
                and other.x + other.width <= self.x + self.width
                and other.y + other.height <= self.y + self.height)

    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}
