# --- Window ---
WIDTH, HEIGHT = 1280, 720
FPS = 60

# simulation plane -> screen: plane origin lands here, y already points down
ORIGIN_X, ORIGIN_Y = WIDTH // 2 - 125, 320
SCALE = 1.0

# --- Colors ---
BACKGROUND = (17, 17, 17)
WHITE = (255, 255, 255)
GREY = (120, 120, 120)
FLOOR_COLOR = (60, 60, 60)
CUT_COLOR = (255, 80, 80)
WIND_COLOR = (80, 160, 255)
