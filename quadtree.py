#quadtree.py

import numbers
from collections import namedtuple
import constants as C
import logger as log

class QuadTreeInvariantError(AssertionError):
    """Raised when a split leaves a point with no child to hold it. Always a bug."""

class Rectangle(namedtuple('Rectangle', ['x_min', 'x_max', 'y_min', 'y_max'])):
    """An axis-aligned boundary. The max edges are exclusive."""
    __slots__ = ()

    def contains(self, point):
        """Checks if a point is inside this rectangle (half-open on both axes)."""
        x, y = point
        return self.x_min <= x < self.x_max and self.y_min <= y < self.y_max

    def intersects(self, range_rect):
        """Checks if another rectangle overlaps this one with a non-empty interior."""
        return (self.x_min < range_rect[1] and self.x_max > range_rect[0] and
                self.y_min < range_rect[3] and self.y_max > range_rect[2])

    def quadrants(self, mid_x, mid_y):
        """Returns the four sub-rectangles in insertion order: TL, BL, TR, BR."""
        return (
            Rectangle(self.x_min, mid_x, self.y_min, mid_y),
            Rectangle(self.x_min, mid_x, mid_y, self.y_max),
            Rectangle(mid_x, self.x_max, self.y_min, mid_y),
            Rectangle(mid_x, self.x_max, mid_y, self.y_max),
        )

def contains(boundary, point):
    """Half-open containment test usable on plain (x_min, x_max, y_min, y_max) tuples."""
    x1, x2, y1, y2 = boundary
    x, y = point
    return x1 <= x < x2 and y1 <= y < y2

def intersects(a, b):
    a_x1, a_x2, a_y1, a_y2 = a
    b_x1, b_x2, b_y1, b_y2 = b
    return a_x1 < b_x2 and a_x2 > b_x1 and a_y1 < b_y2 and a_y2 > b_y1

def midpoint(a, b):
    """
    Returns the value halfway between a and b.

    Coordinates that define their own midpoint(other) method use it. Integers
    truncate toward zero, so integer splits are not always centered. Anything
    else is averaged with true division.
    """
    custom = getattr(a, 'midpoint', None)
    if callable(custom):
        return custom(b)
    if isinstance(a, numbers.Integral) and isinstance(b, numbers.Integral):
        total = a + b
        if total >= 0:
            return total // 2
        return -((-total) // 2)
    return (a + b) / 2

# How leaves decide to split. Shared by every node of one tree.
SplitRule = namedtuple('SplitRule', ['midpoint', 'max_depth'])

def _fail(message):
    log.log(f"ERROR: [QuadTree] {message}")
    raise QuadTreeInvariantError(message)

class Leaf:
    """A node that stores up to `capacity` distinct points directly."""
    __slots__ = ('capacity', 'boundary', 'depth', 'points')

    def __init__(self, capacity, boundary, depth=0):
        self.capacity = capacity
        self.boundary = boundary
        self.depth = depth
        self.points = []

    def is_leaf(self):
        return True

    def insert(self, point, rule):
        """
        Inserts a point, returning (accepted, node).

        `node` is the node that should occupy this slot afterwards: self, or
        the Internal node that replaced this leaf when it split.
        """
        if not self.boundary.contains(point):
            return False, self

        if point in self.points:
            return True, self

        if len(self.points) < self.capacity or not self._can_split(rule):
            self.points.append(point)
            return True, self

        node = self._split(rule)
        return node.insert(point, rule)

    def _can_split(self, rule):
        if rule.max_depth is not None and self.depth >= rule.max_depth:
            return False
        x1, x2, y1, y2 = self.boundary
        mid_x = rule.midpoint(x1, x2)
        mid_y = rule.midpoint(y1, y2)
        # A split only makes progress if at least one axis gets narrower.
        return x1 < mid_x < x2 or y1 < mid_y < y2

    def _split(self, rule):
        x1, x2, y1, y2 = self.boundary
        mid_x = rule.midpoint(x1, x2)
        mid_y = rule.midpoint(y1, y2)
        children = [Leaf(self.capacity, quadrant, self.depth + 1)
                    for quadrant in self.boundary.quadrants(mid_x, mid_y)]

        for held in self.points:
            for index, child in enumerate(children):
                accepted, children[index] = child.insert(held, rule)
                if accepted:
                    break
            else:
                _fail(f"Point {held} was not accepted by any child of {tuple(self.boundary)} during a split.")

        log.debug(f"[QuadTree] Split leaf {tuple(self.boundary)} at depth {self.depth} "
                  f"around ({mid_x}, {mid_y}) holding {len(self.points)} points.")
        return Internal(self.capacity, self.boundary, children, self.depth)

    def search(self, range_rect, found):
        """Appends the points inside range_rect to found."""
        if not self.boundary.intersects(range_rect):
            return found
        for p in self.points:
            if range_rect.contains(p):
                found.append(p)
        return found

    def size(self):
        return len(self.points)

    def __repr__(self):
        return f"Leaf(capacity={self.capacity}, boundary={tuple(self.boundary)}, points={len(self.points)})"

class Internal:
    """A node that owns exactly four children covering its quadrants."""
    __slots__ = ('capacity', 'boundary', 'depth', 'children')

    def __init__(self, capacity, boundary, children, depth=0):
        self.capacity = capacity
        self.boundary = boundary
        self.depth = depth
        self.children = children

    def is_leaf(self):
        return False

    def insert(self, point, rule):
        if not self.boundary.contains(point):
            return False, self

        for index, child in enumerate(self.children):
            accepted, self.children[index] = child.insert(point, rule)
            if accepted:
                return True, self

        _fail(f"Point {point} is inside {tuple(self.boundary)} but no child accepted it.")

    def search(self, range_rect, found):
        if not self.boundary.intersects(range_rect):
            return found
        for child in self.children:
            child.search(range_rect, found)
        return found

    def size(self):
        return sum(child.size() for child in self.children)

    def __repr__(self):
        return f"Internal(capacity={self.capacity}, boundary={tuple(self.boundary)})"

class QuadTree:
    """
    A point quadtree over a fixed root boundary.

    The tree starts as a single Leaf. A leaf that receives its capacity+1-th
    distinct point is replaced by an Internal node with four fresh leaves,
    and never turns back into a leaf. Points outside the root boundary are
    ignored by insert().

    Not thread-safe: inserts must be serialized by the caller. Searches never
    mutate the tree.
    """

    contains = staticmethod(contains)
    intersects = staticmethod(intersects)

    def __init__(self, boundary, capacity=C.DEFAULT_CAPACITY, midpoint_fn=None, max_depth=C.MAX_DEPTH):
        if capacity < 1:
            raise ValueError(f"QuadTree capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self.rule = SplitRule(midpoint_fn if midpoint_fn is not None else midpoint, max_depth)
        self.root = Leaf(capacity, Rectangle(*boundary))

    @classmethod
    def new(cls, boundary):
        """Creates a tree with the default leaf capacity."""
        return cls(boundary)

    @classmethod
    def with_capacity(cls, capacity, boundary, **kwargs):
        return cls(boundary, capacity, **kwargs)

    @property
    def boundary(self):
        return self.root.boundary

    def insert(self, point):
        """Inserts a point. Returns False if it lies outside the root boundary."""
        x, y = point
        accepted, self.root = self.root.insert((x, y), self.rule)
        return accepted

    def search(self, boundary):
        """Returns every stored point inside boundary, in no particular order."""
        return self.root.search(Rectangle(*boundary), [])

    def size(self):
        return self.root.size()

    def __len__(self):
        return self.size()

    def __iter__(self):
        for _, node in self.nodes():
            if node.is_leaf():
                yield from node.points

    def nodes(self):
        """Yields (depth, node) for every node, depth first, parents before children."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node.depth, node
            if not node.is_leaf():
                stack.extend(reversed(node.children))

    def depth(self):
        return max(depth for depth, _ in self.nodes())

    def leaf_count(self):
        return sum(1 for _, node in self.nodes() if node.is_leaf())

    def __repr__(self):
        return f"QuadTree(boundary={tuple(self.boundary)}, capacity={self.capacity}, size={self.size()})"
