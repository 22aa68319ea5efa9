"""Progress reporting for file uploads."""

import io
import logging
import os
import sys
from typing import BinaryIO, Optional

from tqdm import tqdm

logger = logging.getLogger(__name__)


class ProgressReader(io.RawIOBase):
    """Binary reader that advances a progress bar as bytes are consumed.

    Data passes through untouched. Seeking moves the bar to the new offset so
    a rewind before the transfer starts does not count twice.
    """

    def __init__(self, fd: BinaryIO, total: int, desc: Optional[str] = None):
        super().__init__()
        self._fd = fd
        self._bar = None
        self._bar = tqdm(
            total=total,
            desc=desc,
            unit="B",
            unit_scale=True,
            unit_divisor=1024,
            file=sys.stdout,
        )

    @property
    def bytes_read(self) -> int:
        return self._bar.n

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        chunk = self._fd.read(size)
        self._bar.update(len(chunk))
        return chunk

    def readinto(self, buffer) -> int:
        chunk = self.read(len(buffer))
        buffer[: len(chunk)] = chunk
        return len(chunk)

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        position = self._fd.seek(offset, whence)
        self._bar.n = position
        return position

    def tell(self) -> int:
        return self._fd.tell()

    def close(self) -> None:
        """Close the bar. The wrapped file belongs to the caller."""
        if not self.closed and self._bar is not None:
            self._bar.close()
        super().close()


def _file_size(fd: BinaryIO) -> Optional[int]:
    try:
        return os.fstat(fd.fileno()).st_size
    except (OSError, ValueError) as e:
        logger.warning("could not create progress bar: could not stat: %s", e)
        return None


def progress_reader(fd: BinaryIO, desc: Optional[str] = None) -> BinaryIO:
    """Wrap `fd` in a ProgressReader, or return it unchanged if no bar can be built."""
    size = _file_size(fd)
    if size is None:
        return fd
    try:
        return ProgressReader(fd, size, desc=desc)
    except (OSError, ValueError) as e:
        logger.warning("could not create progress bar: %s", e)
        return fd
