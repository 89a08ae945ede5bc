
class ServerError(Exception):
    """Base class for server-related errors"""

    def __init__(self, msg="Server error occurred", status_code=500):
        self.msg = msg
        self.status_code = status_code
        super().__init__(self.msg)


class InvalidRequestError(ServerError):
    """Raised when request is invalid"""

    def __init__(self, msg="Invalid request", status_code=400):
        super().__init__(msg=msg, status_code=status_code)


class MissingFileError(InvalidRequestError):
    """Raised when an upload request carries no file"""

    def __init__(self, msg="No file uploaded", status_code=400):
        super().__init__(msg=msg, status_code=status_code)


class FileTooLargeError(ServerError):
    """Raised when an uploaded file exceeds the configured size cap"""

    def __init__(self, msg="File too large", status_code=413):
        super().__init__(msg=msg, status_code=status_code)


class ResourceNotFoundError(ServerError):
    """Raised when requested resource is not found"""

    def __init__(self, msg="Not found", status_code=404):
        super().__init__(msg=msg, status_code=status_code)


class PersistenceError(ServerError):
    """Raised when the contact log cannot be read or written"""

    def __init__(self, msg="Contact log operation failed", status_code=500):
        super().__init__(msg=msg, status_code=status_code)


class UploadError(ServerError):
    """Raised when an uploaded file cannot be stored"""

    def __init__(self, msg="File upload failed", status_code=500):
        super().__init__(msg=msg, status_code=status_code)


class NotificationError(ServerError):
    """Raised when the admin notification email cannot be sent"""

    def __init__(self, msg="Notification failed", status_code=502):
        super().__init__(msg=msg, status_code=status_code)
