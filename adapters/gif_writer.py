"""
Animated GIF renderer.

Collects one image per generation and writes them all on `save()`.
Frame timing follows the configured rate; the last frame lingers 3 seconds
longer so the final state is readable before the animation loops.
"""
from __future__ import annotations

from pathlib import Path
from typing import List

from PIL import Image, ImageDraw, ImageFont

from driver import Frame, Status

CELL_SIZE = 8
CELL_PADDING = 2
WHITE = 255
BLACK = 0
LABEL_POS = (10, 8)
FINAL_HOLD_MS = 3000


def frame_duration(frame: Frame, status: Status) -> int:
    """Display time for one frame in milliseconds."""
    if status.rate <= 0:
        raise ValueError("GIF export needs a positive rate")
    duration = 1000 // status.rate
    if status.turns > 0 and frame.generation >= status.turns:
        duration += FINAL_HOLD_MS
    return duration


def frame_image(frame: Frame, status: Status, cell_size: int = CELL_SIZE, padding: int = CELL_PADDING) -> Image.Image:
    pitch = cell_size + padding
    width, height = frame.cols * pitch, frame.rows * pitch
    img = Image.new("L", (width, height), WHITE)
    draw = ImageDraw.Draw(img)
    draw.rectangle([0, 0, width - 1, height - 1], outline=BLACK)

    for r in range(frame.rows):
        for c in range(frame.cols):
            if frame.ages[r, c] > 0:
                x, y = c * pitch, r * pitch
                draw.rectangle([x, y, x + cell_size - 1, y + cell_size - 1], fill=BLACK)

    label = (
        f"Conway's Life | board {frame.rows}x{frame.cols};"
        f" rate {status.rate}/sec; alive = {frame.alive:3d}; gen = {frame.generation}/{status.turns}"
    )
    draw.text(LABEL_POS, label, fill=BLACK, font=ImageFont.load_default())
    return img


class GifRenderer:
    def __init__(self, path, *, cell_size: int = CELL_SIZE, padding: int = CELL_PADDING):
        self.path = Path(path)
        self.cell_size = cell_size
        self.padding = padding
        self.frames: List[Image.Image] = []
        self.durations: List[int] = []
        self.loop = 0

    def render(self, frame: Frame, status: Status) -> None:
        self.frames.append(frame_image(frame, status, self.cell_size, self.padding))
        self.durations.append(frame_duration(frame, status))
        self.loop = status.turns

    def save(self) -> Path:
        if not self.frames:
            raise ValueError("No frames to save")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.frames[0].save(
            self.path,
            format="GIF",
            save_all=True,
            append_images=self.frames[1:],
            duration=self.durations,
            loop=self.loop,
        )
        return self.path
