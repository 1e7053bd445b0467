"""Tests for the region-finder command."""

import numpy as np
from PIL import Image as PILImage

from cli.find_regions import main
from conftest import block, make_image, paint


def _write_scene(path):
    img = paint(make_image(20, 20), block(2, 2, 8))
    PILImage.fromarray(img.pixels).save(path)
    return img


def test_recolor_by_target(tmp_path):
    src = tmp_path / "scene.png"
    original = _write_scene(src)
    out = tmp_path / "recolored.png"

    code = main([str(src), "--target", "10,10,10", "--min-region", "10",
                 "--seed", "3", "--recolored-out", str(out)])

    assert code == 0
    recolored = np.asarray(PILImage.open(out))
    assert np.array_equal(recolored[0, 0], original.pixels[0, 0])
    assert len(np.unique(recolored[2:10, 2:10].reshape(-1, 3), axis=0)) == 1


def test_pick_and_paint(tmp_path):
    src = tmp_path / "scene.png"
    _write_scene(src)
    out = tmp_path / "painting.png"

    code = main([str(src), "--pick", "3,3", "--min-region", "10",
                 "--painting-out", str(out), "--brush", "0,255,0"])

    assert code == 0
    painting = np.asarray(PILImage.open(out))
    assert painting[3, 3].tolist() == [0, 255, 0, 255]
    assert painting[0, 0].tolist() == [0, 0, 0, 0]


def test_missing_source(tmp_path):
    assert main([str(tmp_path / "missing.png"), "--target", "1,2,3"]) == 1


def test_pick_outside_image(tmp_path):
    src = tmp_path / "scene.png"
    _write_scene(src)
    assert main([str(src), "--pick", "50,50"]) == 1


def test_painting_saved_as_jpeg(tmp_path):
    """The RGBA painting is flattened to RGB for formats without alpha."""
    src = tmp_path / "scene.png"
    _write_scene(src)
    out = tmp_path / "painting.jpg"

    code = main([str(src), "--target", "10,10,10", "--min-region", "10",
                 "--painting-out", str(out)])

    assert code == 0
    with PILImage.open(out) as saved:
        assert saved.mode == "RGB"
        assert saved.size == (20, 20)


def test_unwritable_output(tmp_path):
    src = tmp_path / "scene.png"
    _write_scene(src)

    code = main([str(src), "--target", "10,10,10", "--min-region", "10",
                 "--painting-out", str(tmp_path / "painting.unknownext")])

    assert code == 1
