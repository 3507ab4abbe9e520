from .driver import (
    DriverState,
    FrameDriver,
    ManualTickSource,
    TkTickSource,
)
