"""
Content Hasher - Content-addressed names for image blobs
"""
import hashlib


class ContentHasher:
    """Derives stable identifiers from blob contents"""

    IMAGE_EXTENSION = ".png"

    @staticmethod
    def digest(data: bytes) -> str:
        """SHA-256 hex digest of data"""
        return hashlib.sha256(data).hexdigest()

    def image_name(self, data: bytes) -> str:
        """Filename for an image blob, identical for identical bytes"""
        return f"{self.digest(data)}{self.IMAGE_EXTENSION}"
