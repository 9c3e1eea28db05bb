"""
File-backed fixed-width record table.

This module implements the storage pattern shared by the flight and
reservation tables:
- append: add one record at the end of the file
- scan_all: lazily read every record in insertion order
- rewrite_where: copy every record to a staged file, transforming or
  dropping the matching ones, then atomically swap the staged file in

The original file is never modified in place, so a crash during a rewrite
leaves either the old table or the new one. Concurrent writers are not
supported.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, Generic, Iterator, Optional, TypeVar, Union

from ..exceptions import StorageUnavailable
from .codec import RecordCodec, RecordDecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Predicate = Callable[[T], bool]
Transform = Callable[[T], Optional[T]]


class RecordStore(Generic[T]):
    """
    Fixed-width record table stored in a single file.

    Every operation opens the file, does its work and closes it again; no
    handle or record is kept between calls.
    """

    def __init__(self, path: Union[str, Path], codec: RecordCodec[T]):
        """
        Initialize a record store.

        Args:
            path: Backing file location
            codec: Codec for the record kind held in this table
        """
        self.path = Path(path)
        self.codec = codec
        logger.debug(f"RecordStore initialized for {self.path}")

    def ensure_exists(self) -> None:
        """Create the backing file (and its directory) if it is missing."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "ab"):
                pass
        except OSError as e:
            logger.error(f"Could not create or access {self.path}: {e}")
            raise StorageUnavailable(self.path, str(e)) from e

    def append(self, record: T) -> None:
        """
        Append one record to the end of the table.

        Raises:
            StorageUnavailable: If the file cannot be opened or written
            RecordEncodeError: If the record does not fit the layout; nothing
                is written
        """
        data = self.codec.encode(record)
        try:
            with open(self.path, "ab") as fh:
                fh.write(data)
        except OSError as e:
            logger.error(f"Failed to append record to {self.path}: {e}")
            raise StorageUnavailable(self.path, str(e)) from e
        logger.debug(f"Appended record to {self.path}")

    def scan_all(self) -> Iterator[T]:
        """
        Yield every record in insertion order.

        An absent file is an empty table. Each call rescans from the start.

        Raises:
            StorageUnavailable: If the file exists but cannot be read, or
                holds a truncated or undecodable record
        """
        try:
            fh = open(self.path, "rb")
        except FileNotFoundError:
            return
        except OSError as e:
            logger.error(f"Failed to open {self.path} for reading: {e}")
            raise StorageUnavailable(self.path, str(e)) from e

        with fh:
            yield from self._read_records(fh)

    def rewrite_where(self, predicate: Predicate, transform: Transform) -> bool:
        """
        Rewrite the table, passing matching records through ``transform``.

        ``transform`` returns the replacement record, or None to drop the
        record from the table. Records that do not match are copied
        unchanged. The staged copy replaces the original only when at least
        one record matched.

        Args:
            predicate: Selects the records to transform
            transform: Produces the replacement record or None

        Returns:
            bool: Whether any record matched

        Raises:
            StorageUnavailable: If the source or the staging file cannot be
                opened or written
        """
        try:
            source = open(self.path, "rb")
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.error(f"Failed to open {self.path} for rewrite: {e}")
            raise StorageUnavailable(self.path, str(e)) from e

        with source:
            try:
                fd, staged_name = tempfile.mkstemp(
                    prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
                )
            except OSError as e:
                logger.error(f"Failed to create staging file next to {self.path}: {e}")
                raise StorageUnavailable(self.path, str(e)) from e

            staged = Path(staged_name)
            matched = False
            try:
                with os.fdopen(fd, "wb") as out:
                    for record in self._read_records(source):
                        if predicate(record):
                            matched = True
                            record = transform(record)
                            if record is None:
                                continue
                        out.write(self.codec.encode(record))
                    out.flush()
                    os.fsync(out.fileno())
            except OSError as e:
                staged.unlink(missing_ok=True)
                logger.error(f"Failed to write staged copy of {self.path}: {e}")
                raise StorageUnavailable(self.path, str(e)) from e
            except BaseException:
                staged.unlink(missing_ok=True)
                raise

        if not matched:
            staged.unlink(missing_ok=True)
            return False

        try:
            os.replace(staged, self.path)
        except OSError as e:
            staged.unlink(missing_ok=True)
            logger.error(f"Failed to swap staged copy into {self.path}: {e}")
            raise StorageUnavailable(self.path, str(e)) from e

        logger.debug(f"Rewrote {self.path}")
        return True

    def _read_records(self, fh) -> Iterator[T]:
        size = self.codec.record_size
        while True:
            try:
                chunk = fh.read(size)
            except OSError as e:
                logger.error(f"Failed to read {self.path}: {e}")
                raise StorageUnavailable(self.path, str(e)) from e
            if not chunk:
                return
            if len(chunk) != size:
                raise StorageUnavailable(self.path, "truncated record at end of file")
            try:
                yield self.codec.decode(chunk)
            except RecordDecodeError as e:
                logger.error(f"Corrupt record in {self.path}: {e}")
                raise StorageUnavailable(self.path, str(e)) from e
