"""Tests for the stateful region finder."""

import numpy as np
import pytest

from conftest import TARGET, block, make_image, paint
from models.errors import InvalidStateError
from services.region_finder_service import RegionFinderService


def test_defaults_from_environment(monkeypatch):
    monkeypatch.setenv("COLOR_MATCH_THRESHOLD", "7")
    monkeypatch.setenv("MIN_REGION_SIZE", "3")
    finder = RegionFinderService()
    assert finder.color_matcher.threshold == 7
    assert finder.grower.min_region == 3


def test_builtin_defaults(monkeypatch):
    monkeypatch.delenv("COLOR_MATCH_THRESHOLD", raising=False)
    monkeypatch.delenv("MIN_REGION_SIZE", raising=False)
    finder = RegionFinderService()
    assert finder.color_matcher.threshold == 20
    assert finder.grower.min_region == 50


def test_arguments_override_environment(monkeypatch):
    monkeypatch.setenv("MIN_REGION_SIZE", "3")
    finder = RegionFinderService(threshold=5, min_region=11)
    assert finder.color_matcher.threshold == 5
    assert finder.grower.min_region == 11


def test_find_regions_without_image():
    finder = RegionFinderService(min_region=1)
    with pytest.raises(InvalidStateError):
        finder.find_regions(TARGET)
    with pytest.raises(InvalidStateError):
        finder.recolor_image()


def test_find_and_query(two_blocks_image):
    paint(two_blocks_image, block(8, 0, 2))  # 4 px, found first in scan order
    finder = RegionFinderService(two_blocks_image, threshold=20, min_region=1)

    regions = finder.find_regions(TARGET)

    assert finder.count() == regions.count() == 3
    assert finder.largest_region().size == 9
    # tie between the two 9 px blocks keeps the earlier one
    assert finder.largest_region() is regions[1]


def test_each_pass_replaces_previous(two_blocks_image):
    finder = RegionFinderService(two_blocks_image, min_region=1)
    finder.find_regions(TARGET)
    assert finder.count() == 2

    finder.set_image(make_image(4, 4))
    finder.find_regions(TARGET)
    assert finder.count() == 0
    assert finder.largest_region() is None


def test_recolor_image(two_blocks_image):
    finder = RegionFinderService(two_blocks_image, min_region=1)
    finder.find_regions(TARGET)
    out = finder.recolor_image(np.random.default_rng(1))

    assert finder.get_recolored_image() is out
    assert finder.get_image() is two_blocks_image
    assert not np.array_equal(out.pixels, two_blocks_image.pixels)


def test_failed_pass_clears_previous_regions(two_blocks_image):
    finder = RegionFinderService(two_blocks_image, min_region=1)
    finder.find_regions(TARGET)
    assert finder.count() == 2

    finder.set_image(None)
    with pytest.raises(InvalidStateError):
        finder.find_regions(TARGET)
    assert finder.count() == 0
    assert finder.largest_region() is None
