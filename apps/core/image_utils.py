"""
Image validation for uploaded product pictures and avatars.

Usage Example:
    from apps.core.image_utils import ImageProcessor

    is_valid, error = ImageProcessor.validate_image(uploaded_file, max_size=2 * 1024 * 1024)
    if not is_valid:
        raise ValidationError(error)
"""

from typing import Optional, Tuple

from django.core.files.uploadedfile import UploadedFile

from PIL import Image, UnidentifiedImageError


class ImageProcessor:
    """
    Checks uploaded images before they are stored.

    Only the size and the decoded format are inspected; the file is saved
    unchanged.
    """

    ALLOWED_FORMATS = {"PNG", "JPEG", "GIF"}

    @classmethod
    def validate_image(
        cls, image_file: UploadedFile, max_size: int
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate uploaded image file.

        Checks:
        - File size (must be <= max_size bytes)
        - File format (must be PNG, JPEG or GIF)
        - Image can be opened and decoded

        Args:
            image_file: Django UploadedFile object
            max_size: Largest accepted size in bytes

        Returns:
            tuple: (is_valid, error_message)
                - is_valid: True if image is valid, False otherwise
                - error_message: None if valid, error description if invalid
        """
        if image_file.size > max_size:
            return False, f"File size must be less than {max_size // (1024 * 1024)}MB"

        try:
            image_file.seek(0)
            img = Image.open(image_file)

            if img.format not in cls.ALLOWED_FORMATS:
                return False, "Invalid file type. Only JPEG, PNG and GIF are allowed."

            img.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            return False, f"Invalid image file: {str(e)}"
        finally:
            image_file.seek(0)

        return True, None
