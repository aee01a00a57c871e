"""Domain errors raised by the service layer.

Routes translate these into HTTP responses. Storage faults are not
wrapped: SQLAlchemy errors propagate as-is and the app-level handler
turns them into a generic 500.
"""


class NotFoundError(Exception):
    """Raised when a requested row does not exist."""


class ContentNotFound(NotFoundError):
    def __init__(self, content_id: int):
        super().__init__("Content not found")
        self.content_id = content_id


class MediaNotFound(NotFoundError):
    def __init__(self, media_id: int):
        super().__init__("Media not found")
        self.media_id = media_id


class UserNotFound(NotFoundError):
    def __init__(self, user_id: int):
        super().__init__("User not found")
        self.user_id = user_id
