from __future__ import annotations

import argparse
from dataclasses import replace

import customtkinter

from animation import FrameDriver, TkTickSource
from plotting import paint_commands, render_frame_to_file, to_hex
from scene import ViewConfig, render_frame

WINDOW_X = 100
WINDOW_Y = 60
BORDER = 4


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Two-dimensional animation drawn with hierarchical modeling subroutines.")
    p.add_argument("--preserve-aspect", action="store_true", help="widen the limits to keep the viewport aspect ratio")
    p.add_argument("--interval-ms", type=int, default=ViewConfig.frame_interval_ms, help="timer period in milliseconds")
    p.add_argument("--export", type=str, default="", help="render one frame to this path and exit (no window)")
    p.add_argument("--frame", type=int, default=0, help="frame number to export")
    p.add_argument("--format", type=str, default=None, choices=["png", "svg"], help="export format (default: from extension)")
    return p.parse_args()


class HierarchyApp(customtkinter.CTk):
    """
    Window with a "Run Animation" checkbox above the drawing canvas.
    """
    def __init__(self, config: ViewConfig):
        super().__init__()

        self.view_config = config

        self.title("Subroutine Hierarchy")
        self.geometry(f"+{WINDOW_X}+{WINDOW_Y}")
        self.resizable(False, False)
        self.configure(fg_color=to_hex(config.border))

        self.setup_ui()

        self.driver = FrameDriver(
            TkTickSource(self, interval_ms=config.frame_interval_ms),
            request_redraw=self.redraw,
        )
        self.canvas.bind("<Configure>", self.on_canvas_configure)

        self.redraw()

    def setup_ui(self) -> None:
        """Configures the static GUI widgets."""
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self.control_frame = customtkinter.CTkFrame(self, corner_radius=0)
        self.control_frame.grid(row=0, column=0, padx=BORDER, pady=(BORDER, 5), sticky="ew")

        self.animation_check = customtkinter.CTkCheckBox(
            self.control_frame,
            text="Run Animation",
            command=self.on_toggle_animation,
        )
        self.animation_check.pack(padx=10, pady=6)

        self.canvas = customtkinter.CTkCanvas(
            self,
            width=self.view_config.width,
            height=self.view_config.height,
            background=to_hex(self.view_config.background),
            highlightthickness=0,
        )
        self.canvas.grid(row=1, column=0, padx=BORDER, pady=(0, BORDER))

    def viewport_size(self) -> tuple[int, int]:
        # Before the canvas is mapped Tk reports 1x1.
        width = self.canvas.winfo_width()
        height = self.canvas.winfo_height()
        if width <= 1 or height <= 1:
            return self.view_config.width, self.view_config.height
        return width, height

    def redraw(self) -> None:
        width, height = self.viewport_size()
        frame = render_frame(self.driver.frame_number, self.view_config, width=width, height=height)
        paint_commands(self.canvas, frame.commands, self.view_config.background)

    def on_canvas_configure(self, event) -> None:
        """Repaints when the canvas is first mapped or exposed."""
        self.redraw()

    def on_toggle_animation(self) -> None:
        running = self.animation_check.get() == 1
        self.driver.set_running(running)
        print(f"Animation {'started' if running else 'stopped'} at frame {self.driver.frame_number}")


def main() -> None:
    """Entry point for the GUI application."""
    args = parse_args()
    config = replace(
        ViewConfig(),
        preserve_aspect=args.preserve_aspect,
        frame_interval_ms=args.interval_ms,
    )

    if args.export:
        frame = render_frame(args.frame, config)
        out_path = render_frame_to_file(frame, args.export, format=args.format, background=config.background)
        print(f"Saved: {out_path}")
        return

    customtkinter.set_appearance_mode("System")
    customtkinter.set_default_color_theme("blue")

    app = HierarchyApp(config)
    app.mainloop()

    print("Closing application.")


if __name__ == "__main__":
    main()
