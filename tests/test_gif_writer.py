import pytest
from PIL import Image
from adapters.gif_writer import GifRenderer, frame_duration, frame_image
from driver import Frame, Simulation, Status
from grid import Grid
from shapes import parse_shape


def _frame(generation=1):
    grid = Grid(10, 10, generation=generation)
    grid.set_alive(8, 8)
    return Frame.from_grid(grid)


def test_frame_duration():
    assert frame_duration(_frame(1), Status(rate=2, turns=3)) == 500
    assert frame_duration(_frame(3), Status(rate=2, turns=3)) == 3500
    assert frame_duration(_frame(7), Status(rate=4, turns=0)) == 250
    with pytest.raises(ValueError):
        frame_duration(_frame(), Status(rate=0, turns=3))


def test_frame_image_geometry():
    img = frame_image(_frame(), Status(rate=2, turns=3))
    assert img.size == (100, 100)
    assert img.getpixel((84, 84)) == 0      # live cell (8, 8)
    assert img.getpixel((54, 84)) == 255    # dead cell (8, 5)
    assert img.getpixel((0, 50)) == 0       # border


def test_gif_has_one_frame_per_generation(tmp_path):
    sim = Simulation(Grid(10, 10), turns=4, rate=2)
    sim.seed_shape(parse_shape("#Life 1.06\n0 -1\n0 0\n0 1\n"))
    renderer = GifRenderer(tmp_path / "out" / "blinker.gif")
    sim.run(renderer)
    path = renderer.save()

    assert path.exists()
    assert renderer.durations == [500, 500, 500, 3500]
    with Image.open(path) as img:
        assert img.n_frames == 4
        assert img.info["duration"] == 500


def test_save_without_frames(tmp_path):
    with pytest.raises(ValueError):
        GifRenderer(tmp_path / "empty.gif").save()
