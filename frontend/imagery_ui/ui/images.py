import io
import logging
from dataclasses import dataclass
from typing import Optional

from PIL import Image

from imagery_ui.models.result import EncodedImage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedImage:
    src: str
    width: int
    height: int
    format: Optional[str]


def decode_image(image: Optional[EncodedImage]) -> Optional[DecodedImage]:
    """Decode an inline image payload in memory.

    Returns ``None`` for an absent or empty payload; raises ``ValueError``
    when the payload is present but is not a readable image.
    """
    if image is None or image.is_empty:
        return None

    data = image.decode()
    try:
        with Image.open(io.BytesIO(data)) as img:
            width, height = img.size
            fmt = img.format
            img.verify()
    except Exception as e:
        logger.debug("Could not decode %s payload (%d bytes): %s", image.mime_type, len(data), e)
        raise ValueError(f"Not a valid image: {e}")

    return DecodedImage(src=image.data_uri, width=width, height=height, format=fmt)
