class BannerException(Exception):
    """Base class for errors raised while saving or deleting a banner."""


class BannerBindException(BannerException):
    """Posted data does not match the banner form."""


class BannerPersistException(BannerException):
    """The banner could not be written to the database."""


class FileUploadException(BannerException):
    def __init__(self, code: int | str | None = None):
        self.code = code
        super().__init__(f"Error code #{code}")
