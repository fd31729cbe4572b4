# tests/unit/test_block.py

from pixel_avatar.block import PixelBlock, bounds, px


def test_px_defaults_to_single_cell() -> None:
    block = px("#000000", 3, 4)
    assert block == PixelBlock(x=3, y=4, width=1, height=1, color="#000000")
    assert block.right == 4
    assert block.bottom == 5


def test_as_tuple() -> None:
    assert px("#abcdef", -2, 5, 3, 4).as_tuple() == (-2, 5, 3, 4, "#abcdef")


def test_bounds_empty() -> None:
    assert bounds([]) is None


def test_bounds_spans_all_blocks() -> None:
    blocks = [px("#000", 2, 3, 2, 2), px("#000", -3, 10, 1, 10), px("#000", 15, 0, 5)]
    assert bounds(blocks) == (-3, 0, 20, 20)
