# tests/test_raster.py
import numpy as np
import pytest
from radar2d.canvas import PixelBuffer, canvas_radius
from radar2d.errors import EmptyInputError
from radar2d.io_sweeps import SweepRecord
from radar2d.projections.polar import round_half_away
from radar2d.registry import build

def sweep(angle, echo):
    return SweepRecord(0, 0, 0, 0, angle, tuple(echo))

def test_canvas_starts_black_and_opaque():
    buf = PixelBuffer(3, 2)
    assert buf.pixels.shape == (2, 3, 4)
    assert (buf.pixels[..., :3] == 0).all()
    assert (buf.pixels[..., 3] == 255).all()

def test_put_many_writes_grey_only():
    buf = PixelBuffer(4, 4)
    buf.put_many([1, 3], [2, 0], [77, 9])
    assert buf.pixels[2, 1].tolist() == [77, 77, 77, 255]
    assert buf.pixels[0, 3].tolist() == [9, 9, 9, 255]

def test_put_many_outside_asserts():
    with pytest.raises(AssertionError):
        PixelBuffer(4, 4).put_many([4], [0], [1])

def test_canvas_size_from_mixed_lengths():
    sweeps = [sweep(0, [1] * 3), sweep(10, [1] * 7), sweep(20, [1])]
    assert canvas_radius(sweeps) == 7
    proj, rast = build("proj", "polar"), build("rast", "last")
    P = proj.project(sweeps, (14, 14))
    img = rast.rasterize(P["uv"], {"v": P["v"]}, (14, 14))
    assert (img.width, img.height) == (14, 14)

def test_empty_input_rejected():
    with pytest.raises(EmptyInputError):
        canvas_radius([])

def test_zero_length_sweeps_rejected():
    with pytest.raises(EmptyInputError):
        canvas_radius([sweep(0, [])])

def test_round_half_away_from_zero():
    a = np.array([0.5, 1.5, 2.5, -0.5, -1.5, 2.49])
    assert round_half_away(a).tolist() == [1, 2, 3, -1, -2, 2]

def test_angle_zero_points_along_x():
    P = build("proj", "polar").project([sweep(0, [10, 20, 30, 40])], (8, 8))
    assert P["uv"].tolist() == [[4, 4], [5, 4], [6, 4], [7, 4]]
    assert P["v"].tolist() == [10, 20, 30, 40]

def test_quarter_turn_points_along_y():
    P = build("proj", "polar").project([sweep(2049, [1, 2, 3, 4])], (8, 8))
    assert P["uv"].tolist() == [[4, 4], [4, 5], [4, 6], [4, 7]]

def test_half_turn_points_along_negative_x():
    P = build("proj", "polar").project([sweep(4098, [1, 2, 3])], (6, 6))
    assert P["uv"].tolist() == [[3, 3], [2, 3], [1, 3]]

def test_range_index_restarts_per_sweep():
    P = build("proj", "polar").project([sweep(0, [1, 2]), sweep(0, [3, 4, 5])], (6, 6))
    assert P["uv"][:, 0].tolist() == [3, 4, 3, 4, 5]

def test_last_write_wins_across_sweeps():
    sweeps = [sweep(0, [5, 10, 20]), sweep(0, [6, 11, 99])]
    proj, rast = build("proj", "polar"), build("rast", "last")
    P = proj.project(sweeps, (6, 6))
    img = rast.rasterize(P["uv"], {"v": P["v"]}, (6, 6))
    assert img.pixels[3, 3:6, 0].tolist() == [6, 11, 99]

def test_last_write_wins_within_uv_order():
    uv = np.array([[1, 1], [2, 2], [1, 1], [1, 1]])
    img = build("rast", "last").rasterize(uv, {"v": np.array([1, 2, 3, 4])}, (4, 4))
    assert img.pixels[1, 1].tolist() == [4, 4, 4, 255]
    assert img.pixels[2, 2, 0] == 2

def test_out_of_canvas_samples_are_discarded():
    uv = np.array([[-1, 0], [0, -1], [4, 0], [0, 4], [3, 3]])
    img = build("rast", "last").rasterize(uv, {"v": np.full(5, 200)}, (4, 4))
    grey = img.pixels[..., 0].astype(int)
    assert grey[3, 3] == 200
    assert grey.sum() == 200
    assert (img.pixels[..., 3] == 255).all()

def test_invgrey_encoder():
    enc = build("enc", "invgrey")
    assert enc.encode(np.array([0, 55, 255], dtype=np.uint8)).tolist() == [255, 200, 0]

def test_unknown_stage_name():
    with pytest.raises(KeyError):
        build("rast", "bilinear")
