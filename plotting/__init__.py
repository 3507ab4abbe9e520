from .canvas import paint_commands, to_hex
from .renderer import (
    draw_frame_on_axis,
    render_frame_to_file,
    render_frame_image,
    render_frame_grid,
)
