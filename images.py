from config import settings
from exceptions import ReportValidationError


class PlaceholderImageStorage:
    """Accepts any selected image and hands back a placeholder URL.

    Nothing is uploaded; swap in a real storage backend with the same
    ``store`` method to host photos.
    """

    def __init__(self, placeholder_url=None):
        self.placeholder_url = placeholder_url or settings.placeholder_image_url

    def store(self, image_source):
        if not image_source or not str(image_source).strip():
            raise ReportValidationError("A photo of the road issue is required")
        return self.placeholder_url
