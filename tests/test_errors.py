import pytest

from resampix.errors import (
    CropBoxError,
    DifferentTypesOfPixelsError,
    ImageBufferError,
    ImageRowsError,
    InvalidBufferSizeError,
    MulDivImageError,
    MulDivImagesError,
)


def test_image_rows_error_messages():
    err = ImageRowsError(ImageRowsError.Reason.INVALID_ROWS_COUNT)
    assert str(err) == "Count of rows don't match to image height"
    assert err.reason is ImageRowsError.Reason.INVALID_ROWS_COUNT
    err = ImageRowsError(ImageRowsError.Reason.INVALID_ROW_SIZE)
    assert str(err) == "Size of row don't match to image width"


def test_reason_accepts_message_string():
    err = CropBoxError("Size of the crop box is out of the image boundaries")
    assert err.reason is CropBoxError.Reason.SIZE_IS_OUT_OF_IMAGE_BOUNDARIES


def test_unknown_reason_is_rejected():
    with pytest.raises(ValueError):
        ImageBufferError("no such reason")


def test_single_message_errors():
    assert str(InvalidBufferSizeError()) == "Size of buffer don't match to image dimensions"
    assert str(DifferentTypesOfPixelsError()).startswith(
        "Type of pixels of the source image is not equal"
    )


def test_buffer_error_alignment_message():
    err = ImageBufferError(ImageBufferError.Reason.INVALID_BUFFER_ALIGNMENT)
    assert str(err) == "Alignment of buffer don't match to alignment of u32"


def test_mul_div_image_error_message_and_base():
    err = MulDivImageError(MulDivImageError.Reason.UNSUPPORTED_PIXEL_TYPE)
    assert isinstance(err, ValueError)
    assert str(err) == "Pixel type of image is not supported"
    assert err.reason is MulDivImageError.Reason.UNSUPPORTED_PIXEL_TYPE


def test_mul_div_images_error_reasons():
    err = MulDivImagesError(MulDivImagesError.Reason.SIZE_IS_DIFFERENT)
    assert isinstance(err, ValueError)
    assert err.reason is MulDivImagesError.Reason.SIZE_IS_DIFFERENT
    assert str(err) == "Size of source image does not match to destination image"
    err = MulDivImagesError(MulDivImagesError.Reason.PIXEL_TYPE_IS_DIFFERENT)
    assert str(err) == "Pixel type of source image does not match to destination image"