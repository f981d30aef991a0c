"""Passive subdomain discovery with ``amass`` and ``oam_subs``."""

from __future__ import annotations

import logging
import subprocess

from asmm8.subfinder import filter_subdomains

logger = logging.getLogger(__name__)

CONFIG_PATH = "./configs/amassconfig.yaml"
ERROR_LOG_PATH = "./amasserror.log"


def _run(command: list[str], tool: str) -> str | None:
    try:
        completed = subprocess.run(command, capture_output=True, text=True, check=True)
    except subprocess.CalledProcessError as exc:
        logger.debug("`%s` reported the following err %s", tool, exc.stderr)
        logger.error("An error has occured with `%s`", tool)
        return None
    except OSError as exc:
        logger.debug("%s", exc)
        logger.error("An error has occured with `%s`", tool)
        return None
    return completed.stdout or ""


def run_amass(seed_domain: str) -> list[str]:
    """Enumerate with amass, then list names with oam_subs; empty on failure."""
    logger.info("Running `Amass` on %s", seed_domain)
    enum_command = [
        "amass", "enum", "-passive", "-config", CONFIG_PATH,
        "-log", ERROR_LOG_PATH, "-nocolor", "-d", seed_domain,
    ]
    if _run(enum_command, "Amass") is None:
        return []
    logger.info("Running `oam_subs` on %s", seed_domain)
    names_command = ["oam_subs", "-names", "-config", CONFIG_PATH, "-d", seed_domain]
    output = _run(names_command, "oam_subs")
    if output is None:
        return []
    hostnames = filter_subdomains(output, seed_domain)
    logger.info("`Amass` Run completed for %s", seed_domain)
    return hostnames