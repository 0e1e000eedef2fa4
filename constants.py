# constants.py

# =============================================================================
# --- QUADTREE ---
# =============================================================================
DEFAULT_CAPACITY = 64 # Distinct points a leaf holds before it splits
MAX_DEPTH = 64 # Leaves at this depth absorb extra points instead of splitting

# =============================================================================
# --- LOGGING ---
# =============================================================================
LOG_DEBUG = False # Emit "DEBUG:" messages (every split is logged when True)

# =============================================================================
# --- POINT GENERATION ---
# =============================================================================
XORSHIFT_FALLBACK_SEED = 0x9E3779B97F4A7C15 # Used when a zero seed is given
XORSHIFT_MASK = 0xFFFFFFFFFFFFFFFF
CLUSTER_NOISE_SCALE = 0.004
CLUSTER_NOISE_OCTAVES = 4
CLUSTER_NOISE_PERSISTENCE = 0.5
CLUSTER_NOISE_LACUNARITY = 2.0
CLUSTER_DENSITY_EXPONENT = 3.0 # Higher values give tighter clusters
CLUSTER_SAMPLE_BATCH = 4096

# =============================================================================
# --- BENCHMARK ---
# =============================================================================
BENCH_WORLD_SIZE = 10000
BENCH_QUERY_SIZE = 50
BENCH_SIZE_START = 200
BENCH_SIZE_END = 5000
BENCH_SIZE_STEP = 200
BENCH_SEARCH_REPEATS = 50
BENCH_SEED = None # None seeds from the clock, like the original bench
MICROSECONDS_PER_SECOND = 1_000_000.0
MILLISECONDS_PER_SECOND = 1000.0
PROFILER_PRINT_LINE_COUNT = 20

# =============================================================================
# --- GRAPHING ---
# =============================================================================
GRAPH_FILE_PATH = 'quadtree_vs_naive_search.png'
GRAPH_FIGURE_SIZE = (12, 7)

# =============================================================================
# --- VIEWER ---
# =============================================================================
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 800
CLOCK_TICK_RATE = 60
VIEWER_WORLD_SIZE = 1000
VIEWER_CAPACITY = 4
VIEWER_POINT_COUNT = 2000
VIEWER_POINT_RADIUS_PIXELS = 2
VIEWER_DRAG_THRESHOLD_PIXELS = 4
UI_FONT_SIZE = 24
UI_TEXT_POS_X = 10
UI_TEXT_POS_Y = 10
COLOR_BLACK = (0, 0, 0)
COLOR_WHITE = (255, 255, 255)
COLOR_NODE_BORDER = (70, 70, 90)
COLOR_POINT = (120, 200, 120)
COLOR_POINT_FOUND = (255, 200, 40)
COLOR_QUERY = (220, 60, 60)
