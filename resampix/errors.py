"""Exceptions raised while building, cropping and processing images."""

from __future__ import annotations

from enum import Enum


class _ReasonedError(ValueError):
    """An error whose message is picked from a fixed set of reasons."""

    Reason: type[Enum]

    def __init__(self, reason: Enum | str) -> None:
        self.reason = self.Reason(reason)
        super().__init__(self.reason.value)


class ImageRowsError(_ReasonedError):
    """Rows handed over do not fit the image dimensions."""

    class Reason(Enum):
        INVALID_ROWS_COUNT = "Count of rows don't match to image height"
        INVALID_ROW_SIZE = "Size of row don't match to image width"


class InvalidBufferSizeError(ValueError):
    """A buffer does not fit the image dimensions."""

    def __init__(self, message: str = "Size of buffer don't match to image dimensions") -> None:
        super().__init__(message)


class ImageBufferError(_ReasonedError):
    """A buffer cannot back an image."""

    class Reason(Enum):
        INVALID_BUFFER_SIZE = "Size of buffer don't match to image dimensions"
        INVALID_BUFFER_ALIGNMENT = "Alignment of buffer don't match to alignment of u32"


class CropBoxError(_ReasonedError):
    """A crop box does not lie inside the image."""

    class Reason(Enum):
        POSITION_IS_OUT_OF_IMAGE_BOUNDARIES = (
            "Position of the crop box is out of the image boundaries"
        )
        SIZE_IS_OUT_OF_IMAGE_BOUNDARIES = "Size of the crop box is out of the image boundaries"


class DifferentTypesOfPixelsError(ValueError):
    """Source and destination images hold different pixel types."""

    def __init__(
        self,
        message: str = (
            "Type of pixels of the source image is not equal "
            "to pixel type of the destination image."
        ),
    ) -> None:
        super().__init__(message)


class MulDivImagesError(_ReasonedError):
    """A pair of images cannot be used for alpha multiplication or division."""

    class Reason(Enum):
        SIZE_IS_DIFFERENT = "Size of source image does not match to destination image"
        PIXEL_TYPE_IS_DIFFERENT = "Pixel type of source image does not match to destination image"
        UNSUPPORTED_PIXEL_TYPE = "Pixel type of image is not supported"


class MulDivImageError(_ReasonedError):
    """An image cannot be used for alpha multiplication or division."""

    class Reason(Enum):
        UNSUPPORTED_PIXEL_TYPE = "Pixel type of image is not supported"