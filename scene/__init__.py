from .config import ViewConfig
from .limits import ViewMapping, apply_limits
from .world import Frame, draw_world, render_frame
