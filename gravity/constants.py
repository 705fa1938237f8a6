# --- Arena ---
WIDTH, HEIGHT = 640, 640

# --- Physics ---
# Made-up gravitational constant so that attraction plays out over seconds
G = 6.67834e2
DAMPING = 0.7
DT = 0.01
MIN_DISTANCE = 1e-9

# --- Ticking ---
TICK_INTERVAL_MS = 10
MIN_TICK_INTERVAL_MS = 1
MAX_TICK_INTERVAL_MS = 1000
FPS = 60

# --- Entity input table ---
ENTITY_LIMIT = 18
ENTITY_FIELDS = 7
FIELD_NAMES = ('mass', 'x position', 'y position', 'x velocity', 'y velocity',
               'x acceleration', 'y acceleration')
FIELD_LABELS = ('Mass', 'X-Pos', 'Y-Pos', 'X-Vel', 'Y-Vel', 'X-Acc', 'Y-Acc')

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
