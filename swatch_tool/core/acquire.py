"""Image acquisition: open a file from disk or grab an image from the clipboard.

Both return a fully decoded Pillow image. Failures become InvalidInput with
the underlying Pillow/OS error chained.
"""

import os

from PIL import Image, ImageGrab, UnidentifiedImageError

from swatch_tool.core.types import InvalidInput


def load_image(path: str) -> Image.Image:
    """Open and decode an image file."""
    if not path:
        raise InvalidInput('No image path given')
    if not os.path.isfile(path):
        raise InvalidInput(f'image not found: {path}')
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise InvalidInput(f'cannot read image {path}: {e}') from e


def grab_clipboard() -> Image.Image:
    """Return the image currently on the clipboard.

    A copied file list (e.g. files copied in a file manager) is accepted too;
    the first entry that decodes as an image wins.
    """
    try:
        content = ImageGrab.grabclipboard()
    except (NotImplementedError, OSError) as e:
        raise InvalidInput(f'clipboard not available: {e}') from e

    if isinstance(content, Image.Image):
        content.load()
        return content
    if isinstance(content, list):
        for path in content:
            try:
                return load_image(path)
            except InvalidInput:
                continue
        raise InvalidInput('clipboard holds files but none is a readable image')
    raise InvalidInput('clipboard does not contain an image')
