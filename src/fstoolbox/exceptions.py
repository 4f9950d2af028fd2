from typing import Optional


class DirectoryNotFoundError(FileNotFoundError):
    """
    Exception raised when the root of a walk or probe is missing or is not a directory.

    Attributes:
        path (str): The path that was expected to be a directory.

    Example:
        >>> error = DirectoryNotFoundError("/no/such/dir")
        >>> str(error)
        'Directory not found: /no/such/dir'
        >>> error.path
        '/no/such/dir'
        >>> isinstance(error, FileNotFoundError)
        True
    """

    def __init__(self, path: str, message: Optional[str] = None) -> None:
        """
        Initialize the exception with the missing path.

        Args:
            path (str): The path that was expected to be a directory.
            message (str, optional): Overrides the default message.
        """
        self.path = path
        self.message = message or f"Directory not found: {path}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class FilesystemIOError(OSError):
    """
    Exception raised when a filesystem operation fails while creating or deleting entries.

    The underlying ``OSError`` is chained as ``__cause__`` and its errno is kept.

    Attributes:
        path (str): Path of the entry the operation failed on.

    Example:
        >>> error = FilesystemIOError("/etc/passwd", "Failed to remove file")
        >>> str(error)
        'Failed to remove file: /etc/passwd'
    """

    def __init__(self, path: str, message: str = "Filesystem operation failed", errno: Optional[int] = None) -> None:
        self.path = path
        self.message = f"{message}: {path}"
        super().__init__(self.message)
        self.errno = errno

    def __str__(self) -> str:
        return self.message


class InvalidPathError(ValueError):
    """
    Exception raised when a path argument has the wrong form, e.g. a start path that is not absolute.

    Example:
        >>> str(InvalidPathError("The start path `relativePath` is not absolute"))
        'The start path `relativePath` is not absolute'
    """

    pass


class ConfigurationError(RuntimeError):
    """
    Exception raised when root-relative rendering is requested and no root path is configured.

    Example:
        >>> str(ConfigurationError()).startswith('No root path has been set')
        True
    """

    def __init__(
        self,
        message: str = (
            "No root path has been set. The root path must be set with the `ROOT` environment variable "
            "or the `fstoolbox.config.ROOT` constant"
        ),
    ) -> None:
        super().__init__(message)
