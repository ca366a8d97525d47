"""
Media type checks.
"""

SUPPORTED_DISPLAYABLE_MEDIA_TYPES = {
    'images': (
        'image/jpeg',
        'image/png',
        'image/gif',
        'image/webp',
        'image/svg+xml',
        'image/avif',
        'image/apng',
    ),
    'videos': (
        'video/mp4',
        'video/webm',
        'video/ogg',
        'video/quicktime',  # MOV, limited browser support
    ),
}


def is_supported_displayable_media(mime: str, image: bool = True, video: bool = True) -> bool:
    """Check whether a MIME type can be displayed as an image or a video."""
    if image and mime in SUPPORTED_DISPLAYABLE_MEDIA_TYPES['images']:
        return True
    return video and mime in SUPPORTED_DISPLAYABLE_MEDIA_TYPES['videos']
