"""Tests for bounding-box trimming."""

from PIL import Image

from conftest import BLACK, TRANSPARENT
from sigpad import BoundingBox, find_bounding_box, trim


class TestBoundingBox:
    def test_blank_image_has_no_box(self, blank_bitmap):
        assert find_bounding_box(blank_bitmap) is None

    def test_single_pixel(self, blank_bitmap):
        blank_bitmap.putpixel((42, 17), (200, 10, 10, 255))
        assert find_bounding_box(blank_bitmap) == BoundingBox(42, 17, 42, 17)

    def test_box_spans_extreme_pixels(self, blank_bitmap):
        for xy in [(10, 60), (75, 20), (30, 90)]:
            blank_bitmap.putpixel(xy, BLACK)
        box = find_bounding_box(blank_bitmap)
        assert box == BoundingBox(10, 20, 75, 90)
        assert (box.width, box.height) == (66, 71)
        assert box.as_crop_box() == (10, 20, 76, 91)

    def test_color_only_difference_counts_as_content(self, blank_bitmap):
        # fully transparent but not equal to the background color
        blank_bitmap.putpixel((3, 4), (255, 255, 255, 0))
        assert find_bounding_box(blank_bitmap) == BoundingBox(3, 4, 3, 4)

    def test_custom_background(self):
        image = Image.new("RGBA", (30, 30), "white")
        image.putpixel((5, 6), BLACK)
        assert find_bounding_box(image, background="white") == BoundingBox(5, 6, 5, 6)
        assert find_bounding_box(image, background=(255, 255, 255, 255)) == BoundingBox(5, 6, 5, 6)

    def test_zero_area_image(self):
        assert find_bounding_box(Image.new("RGBA", (0, 0))) is None

    def test_corners(self, blank_bitmap):
        blank_bitmap.putpixel((0, 0), BLACK)
        blank_bitmap.putpixel((99, 99), BLACK)
        assert find_bounding_box(blank_bitmap) == BoundingBox(0, 0, 99, 99)


class TestTrim:
    def test_blank_returns_none(self, blank_bitmap):
        assert trim(blank_bitmap) is None

    def test_none_input(self):
        assert trim(None) is None

    def test_single_pixel_becomes_1x1(self, blank_bitmap):
        color = (12, 34, 56, 255)
        blank_bitmap.putpixel((42, 17), color)
        trimmed = trim(blank_bitmap)
        assert trimmed.size == (1, 1)
        assert trimmed.getpixel((0, 0)) == color

    def test_pixels_copied_verbatim(self, blank_bitmap):
        blank_bitmap.putpixel((20, 30), (1, 2, 3, 4))
        blank_bitmap.putpixel((22, 33), (250, 251, 252, 128))
        trimmed = trim(blank_bitmap)
        assert trimmed.size == (3, 4)
        assert trimmed.getpixel((0, 0)) == (1, 2, 3, 4)
        assert trimmed.getpixel((2, 3)) == (250, 251, 252, 128)
        assert trimmed.getpixel((1, 1)) == TRANSPARENT

    def test_input_not_mutated(self, blank_bitmap):
        blank_bitmap.putpixel((50, 50), BLACK)
        before = blank_bitmap.tobytes()
        trimmed = trim(blank_bitmap)
        assert trimmed is not blank_bitmap
        assert blank_bitmap.size == (100, 100)
        assert blank_bitmap.tobytes() == before

    def test_trim_is_idempotent(self, blank_bitmap):
        for xy in [(10, 60), (75, 20)]:
            blank_bitmap.putpixel(xy, BLACK)
        once = trim(blank_bitmap)
        twice = trim(once)
        assert twice.size == once.size
        assert twice.tobytes() == once.tobytes()

    def test_skip_trim_returns_input(self, blank_bitmap):
        assert trim(blank_bitmap, trim_blank_space=False) is blank_bitmap

    def test_skip_trim_does_not_scan(self, monkeypatch, blank_bitmap):
        import sigpad.trimming as trimming

        def fail(*args, **kwargs):
            raise AssertionError("scanned despite trim_blank_space=False")

        monkeypatch.setattr(trimming, "find_bounding_box", fail)
        assert trim(blank_bitmap, trim_blank_space=False) is blank_bitmap
