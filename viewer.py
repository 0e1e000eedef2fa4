#viewer.py

import pygame
import constants as C
import logger as log
from quadtree import QuadTree
from point_sets import clustered_points

class Viewport:
    """Maps between world coordinates of a boundary and screen pixels."""
    def __init__(self, boundary, screen_width=C.SCREEN_WIDTH, screen_height=C.SCREEN_HEIGHT):
        self.x_min, self.x_max, self.y_min, self.y_max = boundary
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.scale_x = screen_width / (self.x_max - self.x_min)
        self.scale_y = screen_height / (self.y_max - self.y_min)

    def world_to_screen(self, world_x, world_y):
        screen_x = (world_x - self.x_min) * self.scale_x
        screen_y = (world_y - self.y_min) * self.scale_y
        return int(screen_x), int(screen_y)

    def screen_to_world(self, screen_x, screen_y):
        """Converts a point from screen coordinates to world coordinates."""
        world_x = screen_x / self.scale_x + self.x_min
        world_y = screen_y / self.scale_y + self.y_min
        return world_x, world_y

    def boundary_to_rect(self, boundary):
        """Returns (left, top, width, height) in pixels for a world boundary."""
        x1, x2, y1, y2 = boundary
        left, top = self.world_to_screen(x1, y1)
        right, bottom = self.world_to_screen(x2, y2)
        return left, top, right - left, bottom - top

    def drag_to_boundary(self, start, end):
        """Turns two screen positions into a world query boundary with sorted edges."""
        ax, ay = self.screen_to_world(*start)
        bx, by = self.screen_to_world(*end)
        return (min(ax, bx), max(ax, bx), min(ay, by), max(ay, by))

def draw_tree(screen, viewport, tree):
    """Draws every node boundary, then every point."""
    for _, node in tree.nodes():
        pygame.draw.rect(screen, C.COLOR_NODE_BORDER, viewport.boundary_to_rect(node.boundary), 1)
    for x, y in tree:
        pygame.draw.circle(screen, C.COLOR_POINT, viewport.world_to_screen(x, y), C.VIEWER_POINT_RADIUS_PIXELS)

def draw_query(screen, viewport, query, found):
    pygame.draw.rect(screen, C.COLOR_QUERY, viewport.boundary_to_rect(query), 1)
    for x, y in found:
        pygame.draw.circle(screen, C.COLOR_POINT_FOUND, viewport.world_to_screen(x, y), C.VIEWER_POINT_RADIUS_PIXELS)

class Viewer:
    def __init__(self, capacity=C.VIEWER_CAPACITY, point_count=C.VIEWER_POINT_COUNT, world_size=C.VIEWER_WORLD_SIZE, seed=None):
        self.capacity = capacity
        self.point_count = point_count
        self.world = (0, world_size, 0, world_size)
        self.seed = seed
        self.viewport = Viewport(self.world)
        self.tree = None
        self.query = None
        self.found = []
        self.drag_start = None
        self.populate()

    def populate(self):
        """Rebuilds the tree from a fresh clustered point set."""
        self.tree = QuadTree.with_capacity(self.capacity, self.world)
        for p in clustered_points(self.point_count, self.world[1], self.seed):
            self.tree.insert(p)
        if self.seed is not None:
            self.seed += 1
        self.query = None
        self.found = []
        log.log(f"Viewer tree built: {self.tree.size()} points, {self.tree.leaf_count()} leaves, depth {self.tree.depth()}.")

    def handle_mouse_up(self, pos):
        if self.drag_start is None:
            return
        dx = abs(pos[0] - self.drag_start[0])
        dy = abs(pos[1] - self.drag_start[1])
        if max(dx, dy) < C.VIEWER_DRAG_THRESHOLD_PIXELS:
            x, y = self.viewport.screen_to_world(*pos)
            if self.tree.insert((int(x), int(y))):
                log.debug(f"Inserted ({int(x)}, {int(y)}) by click.")
        else:
            self.query = self.viewport.drag_to_boundary(self.drag_start, pos)
            self.found = self.tree.search(self.query)
            log.log(f"Query {tuple(round(v) for v in self.query)} found {len(self.found)} points.")
        self.drag_start = None

    def status_string(self):
        text = f"Points: {self.tree.size()} | Leaves: {self.tree.leaf_count()} | Depth: {self.tree.depth()}"
        if self.query is not None:
            text += f" | Found: {len(self.found)}"
        return text

    def run(self):
        log.log("Attempting to initialize Pygame...")
        pygame.init()
        screen = pygame.display.set_mode((C.SCREEN_WIDTH, C.SCREEN_HEIGHT))
        pygame.display.set_caption("QuadTree Viewer")
        font = pygame.font.Font(None, C.UI_FONT_SIZE)
        clock = pygame.time.Clock()
        log.log("CONTROLS: [Drag] to query, [Click] to insert, [R] to regenerate, [ESC] to quit.")

        running = True
        while running:
            clock.tick(C.CLOCK_TICK_RATE)
            for event in pygame.event.get():
                if event.type == pygame.QUIT: running = False
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.drag_start = event.pos
                if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    self.handle_mouse_up(event.pos)
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE: running = False
                    if event.key == pygame.K_r: self.populate()

            screen.fill(C.COLOR_BLACK)
            draw_tree(screen, self.viewport, self.tree)
            if self.query is not None:
                draw_query(screen, self.viewport, self.query, self.found)
            if self.drag_start is not None:
                preview = self.viewport.drag_to_boundary(self.drag_start, pygame.mouse.get_pos())
                pygame.draw.rect(screen, C.COLOR_QUERY, self.viewport.boundary_to_rect(preview), 1)

            text_surface = font.render(self.status_string(), True, C.COLOR_WHITE)
            screen.blit(text_surface, (C.UI_TEXT_POS_X, C.UI_TEXT_POS_Y))
            pygame.display.flip()

        log.log("Quitting Pygame...")
        pygame.quit()
