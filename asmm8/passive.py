"""Passive enumeration of subdomains for a set of seed domains."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Mapping, Optional

from asmm8.subfinder import SubfinderError, run_subfinder
from asmm8.utils import remove_duplicates

logger = logging.getLogger(__name__)


@dataclass
class PassiveRunner:
    """Runs passive discovery over ``seed_domains``."""

    seed_domains: list[str] = field(default_factory=list)
    results: int = 0
    subdomains: dict[str, list[str]] = field(default_factory=dict)

    def run_passive_enum(self, prev_results: Mapping[str, list[str]]) -> dict[str, list[str]]:
        """Discover subdomains per seed domain, merged with ``prev_results`` and deduplicated.

        Raises the first SubfinderError met; its ``partial_results`` hold what
        was found before merging.
        """
        found: dict[str, list[str]] = {}
        first_error: Optional[SubfinderError] = None
        if self.seed_domains:
            with ThreadPoolExecutor(max_workers=len(self.seed_domains)) as pool:
                futures = []
                for domain in self.seed_domains:
                    logger.info("Finding domains for %s", domain)
                    futures.append((domain, pool.submit(run_subfinder, domain)))
                for domain, future in futures:
                    try:
                        hostnames = future.result()
                    except SubfinderError as exc:
                        if first_error is None:
                            first_error = exc
                        continue
                    if hostnames:
                        found.setdefault(domain, []).extend(hostnames)

        if first_error is not None:
            first_error.partial_results = found
            raise first_error

        logger.info("Cleaning results from passive scan.")
        for domain in self.seed_domains:
            found[domain] = remove_duplicates([*found.get(domain, []), *prev_results.get(domain, [])])
        return found