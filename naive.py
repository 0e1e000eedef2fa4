#naive.py

from quadtree import contains

class NaiveIndex:
    """
    Linear-scan baseline with the same insert/search/size API as QuadTree.
    Only used to measure the quadtree against and to check its answers.
    """
    def __init__(self, boundary):
        self.boundary = tuple(boundary)
        self.points = []

    def insert(self, point):
        x, y = point
        point = (x, y)
        if not contains(self.boundary, point):
            return False
        if point not in self.points:
            self.points.append(point)
        return True

    def search(self, boundary):
        return [p for p in self.points if contains(boundary, p)]

    def size(self):
        return len(self.points)

    def __len__(self):
        return len(self.points)
