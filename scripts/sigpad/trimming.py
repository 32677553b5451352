"""Crop a rendered signature to the tight box around its content.

A pixel is content when it differs from the background color in any
channel (exact comparison, no tolerance). The scan is linear in the pixel
count and is done by Pillow in C: the image is differenced against a solid
background and the bounding box of the non-zero result is taken.
"""

import logging

from PIL import Image, ImageChops, ImageColor

from sigpad.geometry import BoundingBox

logger = logging.getLogger(__name__)

TRANSPARENT = (0, 0, 0, 0)


def _background_for(image: Image.Image, background):
    if isinstance(background, str):
        return ImageColor.getcolor(background, image.mode)
    return background


def find_bounding_box(image: Image.Image, background=TRANSPARENT):
    """Return the inclusive BoundingBox of all content pixels, or None if blank."""
    width, height = image.size
    if width == 0 or height == 0:
        return None
    solid = Image.new(image.mode, image.size, _background_for(image, background))
    box = ImageChops.difference(image, solid).getbbox(alpha_only=False)
    if box is None:
        return None
    left, upper, right, lower = box
    return BoundingBox(left, upper, right - 1, lower - 1)


def trim(image, background=TRANSPARENT, trim_blank_space: bool = True):
    """Crop image to its content.

    Returns the input itself when trim_blank_space is false, None when the
    image is missing or has no content, and otherwise a new image holding
    the content rectangle with its pixels copied verbatim.
    """
    if image is None:
        return None
    if not trim_blank_space:
        return image

    bbox = find_bounding_box(image, background)
    if bbox is None:
        logger.debug("trim found no content in %dx%d image", *image.size)
        return None
    logger.debug("trimming %dx%d image to %s", image.size[0], image.size[1], tuple(bbox))
    return image.crop(bbox.as_crop_box())
