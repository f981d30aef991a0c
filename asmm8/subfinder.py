"""Passive subdomain discovery with the ``subfinder`` tool."""

from __future__ import annotations

import logging
import subprocess

logger = logging.getLogger(__name__)

CONFIG_PATH = "./configs/subfinderconfig.yaml"
PROVIDER_CONFIG_PATH = "./configs/subfinderprovider-config.yaml"


class SubfinderError(RuntimeError):
    """Raised when subfinder fails for a seed domain."""

    def __init__(self, seed_domain: str, message: str) -> None:
        super().__init__(message)
        self.seed_domain = seed_domain
        self.partial_results: dict[str, list[str]] = {}


def filter_subdomains(output: str, seed_domain: str) -> list[str]:
    """Non-empty output lines that contain ``seed_domain``, in order."""
    return [line for line in output.split("\n") if line and seed_domain in line]


def run_subfinder(seed_domain: str) -> list[str]:
    """Run subfinder for ``seed_domain`` and return the hostnames it reports."""
    logger.info("Running `Subfinder` on %s", seed_domain)
    command = [
        "subfinder", "-d", seed_domain, "-silent", "-all",
        "-config", CONFIG_PATH, "-pc", PROVIDER_CONFIG_PATH,
    ]
    try:
        completed = subprocess.run(command, capture_output=True, text=True, check=True)
    except subprocess.CalledProcessError as exc:
        logger.debug("`Subfinder` reported the following err %s", exc.stderr)
        logger.error("An error has ocurred with `Subfinder`")
        raise SubfinderError(seed_domain, f"subfinder failed for {seed_domain}: {exc}") from exc
    except OSError as exc:
        logger.error("An error has ocurred with `Subfinder`")
        raise SubfinderError(seed_domain, f"subfinder failed for {seed_domain}: {exc}") from exc
    hostnames = filter_subdomains(completed.stdout or "", seed_domain)
    logger.info("`Subfinder` run completed for %s", seed_domain)
    return hostnames