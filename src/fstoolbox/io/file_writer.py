"""File creation helpers that also create missing parent directories."""

import os
import tempfile
from typing import Iterable, Optional, Union

from fstoolbox.config import get_tmp_dir
from fstoolbox.exceptions import FilesystemIOError
from fstoolbox.types import PathType

# Data accepted by create_file(): nothing, text, bytes, or chunks of either
DataType = Union[None, str, bytes, Iterable[Union[str, bytes]]]


def _to_bytes(data: DataType) -> bytes:
    """Convert the data to write into bytes, encoding text as UTF-8.

    Example:
        >>> _to_bytes(None), _to_bytes("abc"), _to_bytes(["a", b"b", "c"])
        (b'', b'abc', b'abc')
    """
    if data is None:
        return b""
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        return data.encode("utf-8")
    return b"".join(chunk.encode("utf-8") if isinstance(chunk, str) else chunk for chunk in data)


def create_file(filename: PathType, data: DataType = None, dir_mode: int = 0o777, ignore_errors: bool = False) -> bool:
    """Write data to a file, recursively creating the directory that holds it.

    An existing file is overwritten.

    Args:
        filename: Path of the file to write.
        data: The data to write: None for an empty file, text (written as UTF-8),
            bytes, or an iterable of text/bytes chunks.
        dir_mode: Mode for the directories that have to be created.
        ignore_errors: If True, failures return False instead of raising.

    Returns:
        True once the file is written, False on an ignored failure.

    Raises:
        FilesystemIOError: If the directory or the file cannot be created.

    Example:
        >>> create_file("/tmp/fstoolbox/example/file.txt", "content")  # doctest: +SKIP
        True
    """
    filename = os.fspath(filename)
    try:
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, dir_mode, exist_ok=True)
        with open(filename, "wb") as f:
            f.write(_to_bytes(data))
    except OSError as e:
        if not ignore_errors:
            raise FilesystemIOError(filename, "Failed to create file", e.errno) from e
        return False

    return True


def create_tmp_file(data: DataType = None, directory: Optional[PathType] = None, prefix: str = "tmp") -> str:
    """Create a temporary file and write data into it.

    The file is not removed automatically.

    Args:
        data: The data to write, as for ``create_file()``.
        directory: Where to create the file. Defaults to ``fstoolbox.config.TMP``,
            or to the system temporary directory when that is unset.
        prefix: Prefix of the generated filename.

    Returns:
        The path of the temporary file.

    Raises:
        FilesystemIOError: If the file cannot be created.
    """
    directory = os.fspath(directory) if directory is not None else get_tmp_dir()
    try:
        fd, filename = tempfile.mkstemp(prefix=prefix, dir=directory)
    except OSError as e:
        raise FilesystemIOError(directory, "Failed to create a temporary file in", e.errno) from e
    os.close(fd)

    create_file(filename, data)
    return filename
