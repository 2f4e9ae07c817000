"""
Environment Scenarios

Faults that depend on state outside the program: the filesystem, a
database endpoint, and the import system. Each action raises; the runner's
fault boundary turns the exception into an Outcome.
"""

import asyncio
import importlib
import logging
from pathlib import Path

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine

from ..exceptions import DatabaseUnavailableError, UnknownTypeError
from ..logging_config import mask_url
from ..utils.records import read_record

logger = logging.getLogger(__name__)


def read_missing_file(path: Path) -> str:
    """Open a text file and read its first line."""
    with open(path, encoding="utf-8") as reader:
        return reader.readline()


def open_missing_file(path: Path):
    """Open a file without reading it."""
    with open(path, "rb"):
        pass


def read_past_end(path: Path) -> int:
    """
    Read records until the stream runs out.

    Never returns normally on a well-formed file: the read after the last
    record raises EOFError, re-raised here with the number of records read.
    """
    count = 0
    with open(path, "rb") as stream:
        while True:
            try:
                read_record(stream)
            except EOFError as e:
                raise EOFError(f"End of file reached after {count} records.") from e
            count += 1


async def _connect(database_url: str, timeout: float):
    engine = create_async_engine(database_url, connect_args={"timeout": timeout})
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    finally:
        await engine.dispose()


def connect_database(database_url: str, timeout: float = 2.0):
    """
    Open (and immediately close) a connection to database_url.

    Raises:
        DatabaseUnavailableError: If the endpoint cannot be reached, chained
            to the driver or network error
    """
    safe_url = mask_url(database_url)
    logger.debug("Connecting to %s (timeout %.1fs)", safe_url, timeout)
    try:
        asyncio.run(asyncio.wait_for(_connect(database_url, timeout), timeout + 1))
    except (OSError, asyncio.TimeoutError, SQLAlchemyError) as e:
        reason = str(e).strip() or type(e).__name__
        raise DatabaseUnavailableError(
            f"Cannot connect to {safe_url}: {reason}"
        ) from e


def load_type(dotted_name: str) -> type:
    """
    Resolve a class from a dotted name such as "package.module.ClassName".

    Raises:
        ImportError: If the module cannot be imported, or the module has no
            such attribute (UnknownTypeError)
    """
    module_name, _, attr = dotted_name.rpartition(".")
    if not module_name:
        raise UnknownTypeError(f"{dotted_name!r} is not a dotted type name")

    module = importlib.import_module(module_name)
    try:
        return getattr(module, attr)
    except AttributeError as e:
        raise UnknownTypeError(f"module {module_name!r} has no type {attr!r}") from e
