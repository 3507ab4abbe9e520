from __future__ import annotations

import argparse
from dataclasses import replace

from animation import FrameDriver, ManualTickSource
from plotting import render_frame_grid
from scene import ViewConfig, render_frame


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render a contact sheet of animation frames without opening a window.")
    p.add_argument(
        "--frames",
        type=int,
        nargs="*",
        default=[0, 15, 30, 45, 60, 90, 120, 180],
        help="frame numbers to render (default: 0 15 30 45 60 90 120 180)",
    )
    p.add_argument("--cols", type=int, default=4, help="columns in the grid")
    p.add_argument("--out", type=str, default="plots/frames.png", help="output image (.png or .svg)")
    p.add_argument("--preserve-aspect", action="store_true", help="widen the limits to keep the viewport aspect ratio")
    return p.parse_args()


def collect_frames(frame_numbers, config: ViewConfig) -> list:
    """Steps a frame driver through the requested frame numbers, capturing each one."""
    wanted = sorted(set(int(f) for f in frame_numbers if int(f) >= 0))
    if not wanted:
        raise ValueError("No valid non-negative frame numbers provided.")
    captured = []
    ticks = ManualTickSource()
    driver = FrameDriver(ticks, request_redraw=lambda: None)
    driver.start()
    for target in wanted:
        ticks.advance(target - driver.frame_number)
        captured.append(render_frame(driver.frame_number, config))
    driver.stop()
    return captured


def main() -> None:
    args = parse_args()
    config = replace(ViewConfig(), preserve_aspect=args.preserve_aspect)
    frames = collect_frames(args.frames, config)
    print(f"Rendering {len(frames)} frames -> {args.out}")
    render_frame_grid(frames, out_path=args.out, cols=args.cols, background=config.background)
    print("Done.")


if __name__ == "__main__":
    main()
