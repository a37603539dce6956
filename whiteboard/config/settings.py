"""
Configuration settings for the whiteboard.
"""

class BoardConfig:
    """Configuration constants for drawing and shape recognition."""

    # Shape recognition
    RECOGNITION_MIN_POINTS = 15
    RECOGNITION_MIN_SIZE = 25  # px, both axes
    RECOGNITION_CLOSURE_RATIO = 0.4  # of the bounding box diagonal
    CIRCLE_ERROR_THRESHOLD = 0.22
    RECT_ERROR_THRESHOLD = 0.22

    # Drag-drawn shapes smaller than this in both axes are discarded
    MIN_DRAG_SIZE = 5

    # Drawing modes
    MODES = ['RECTANGLE', 'CIRCLE', 'LINE', 'PEN']
    DEFAULT_MODE = 'RECTANGLE'
    HOVERABLE_TYPES = ('RECTANGLE', 'CIRCLE')

    # Colors
    COLORS = ['black', 'red', 'green', 'blue']
    DEFAULT_COLOR = 'black'
    COLOR_RGB = {
        'black': (0, 0, 0),
        'red': (255, 0, 0),
        'green': (0, 128, 0),
        'blue': (0, 0, 255),
    }
    # Hover fills (RGBA)
    HOVER_FILL = {
        'black': (0, 0, 0, 13),
        'red': (255, 0, 0, 26),
        'green': (0, 128, 0, 26),
        'blue': (0, 0, 255, 26),
    }
    HOVER_OUTLINE_ALPHA = 102  # 40%

    # Rendering
    LINE_WIDTH = 2
    FONT_SIZE = 16
    LABEL_CURSOR = '|'
    BACKGROUND = (255, 255, 255)
    WINDOW_WIDTH = 1280
    WINDOW_HEIGHT = 800
    FPS = 60

    # Persistence
    STORAGE_FILE = 'whiteboard_data.json'
