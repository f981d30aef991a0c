"""Probing of hostnames with the ``httpx`` tool."""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Iterable

from asmm8.utils import write_temp_file

logger = logging.getLogger(__name__)

INPUT_FILE = "tempHttpx.txt"
OUTPUT_FILE = "temp.csv"


class HttpxError(RuntimeError):
    """Raised when httpx cannot be run."""


def run_httpx(domains: Iterable[str]) -> None:
    """Write ``domains`` to a temporary list and run httpx on it, writing CSV output."""
    try:
        write_temp_file(INPUT_FILE, domains)
    except OSError as exc:
        logger.debug("%s", exc)
        raise HttpxError("Write temp file for HTTPx results failed.") from exc
    command = ["httpx", "-l", INPUT_FILE, "-silent", "-td", "-csv", "-o", OUTPUT_FILE]
    try:
        subprocess.run(command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=True)
    except (subprocess.CalledProcessError, OSError) as exc:
        logger.debug("%s", exc)
        logger.critical("Httpx run failed")
        raise HttpxError("Httpx run failed") from exc
    logger.info("Httpx run completed")
    os.remove(INPUT_FILE)