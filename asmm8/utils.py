"""Helpers for lists of hostnames, external tools and temporary files."""

from __future__ import annotations

import ipaddress
import logging
import shutil
import subprocess
from typing import Iterable

logger = logging.getLogger(__name__)

REQUIRED_TOOLS = {
    "alterx": "github.com/projectdiscovery/alterx/cmd/alterx@v0.1.0",
    "dnsx": "github.com/projectdiscovery/dnsx/cmd/dnsx@v1.2.3",
    "subfinder": "github.com/projectdiscovery/subfinder/v2/cmd/subfinder@v2.12.0",
}


def build_where_query_for_domains(domains: Iterable[str]) -> str:
    """Join domains into a ``name = "..." OR ...`` clause."""
    return " OR ".join(f'name = "{domain}"' for domain in domains)


def remove_duplicates(items: Iterable[str]) -> list[str]:
    """Drop repeated items, keeping the order of first occurrence."""
    return list(dict.fromkeys(items))


def difference(first: Iterable[str], second: Iterable[str]) -> list[str]:
    """Items of ``first`` that are not in ``second``, in order."""
    lookup = set(second)
    return [item for item in first if item not in lookup]


def check_tool(name: str) -> bool:
    """Whether an executable called ``name`` is on the PATH."""
    if shutil.which(name) is None:
        logger.warning("%s is not installed", name)
        return False
    return True


def install_go_tool(name: str, path: str) -> None:
    """Install a tool with ``go install``; raises CalledProcessError on failure."""
    try:
        subprocess.run(
            ["go", "install", path],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=True,
        )
    except subprocess.CalledProcessError as exc:
        logger.debug("An error occurred while installing the package: %s\n%s", exc, exc.output)
        logger.error("An error occurred while installing the tool: %s", name)
        raise
    logger.info("Successfully installed the package: %s", path)


def install_tools() -> None:
    """Install every required tool that is missing."""
    for name, path in REQUIRED_TOOLS.items():
        if not check_tool(name):
            install_go_tool(name, path)
    logger.info("All needed tools are installed!")


def write_temp_file(name: str, lines: Iterable[str]) -> None:
    """Append each line, newline-terminated, to the file ``name``."""
    with open(name, "a", encoding="utf-8") as handle:
        handle.writelines(f"{line}\n" for line in lines)


def is_valid_ip_address(ip: str) -> bool:
    """Whether ``ip`` is a literal IPv4 or IPv6 address."""
    if "%" in ip:
        return False
    try:
        ipaddress.ip_address(ip)
    except ValueError:
        return False
    return True