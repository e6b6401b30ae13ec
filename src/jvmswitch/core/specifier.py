"""Parsing of version specifiers such as ``17``, ``1.8`` or ``temurin-21``.

Grammar: ``[<distro>][-]<version>`` where ``<distro>`` is the leading run of
ASCII letters and ``<version>`` is a bare integer, a legacy ``1.<minor>``
form, or a dotted form of which only the first component counts.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from jvmswitch.core.runtime import parse_major_token

logger = logging.getLogger(__name__)


class SpecifierPolicy(Enum):
    """What to parse when a distro-qualified specifier has no period.

    STRIPPED parses the remainder after the distro prefix, so ``temurin-17``
    selects 17. ORIGINAL parses the full specifier text instead, which makes
    every undotted distro-qualified specifier unparseable.
    """

    STRIPPED = "stripped"
    ORIGINAL = "original"


@dataclass(frozen=True)
class Query:
    """A request for a runtime: optional distro substring plus major version."""

    distro: str | None
    version: int

    def describe(self) -> str:
        if self.distro is None:
            return str(self.version)
        return f"{self.distro} {self.version}"


@dataclass(frozen=True)
class UnparseableSpecifier:
    """Sentinel returned when a specifier does not match the grammar."""

    text: str

    @property
    def message(self) -> str:
        return f"Did not understand version spec {self.text!r}"


def _split_distro(text: str) -> tuple[str | None, str]:
    end = 0
    while end < len(text) and text[end].isascii() and text[end].isalpha():
        end += 1
    distro = text[:end] or None
    remainder = text[end:].lstrip("-")
    return distro, remainder


def parse_specifier(
    text: str, policy: SpecifierPolicy = SpecifierPolicy.STRIPPED
) -> Query | UnparseableSpecifier:
    """Parse a user or project specifier into a Query.

    Args:
        text: Specifier as typed or read from a config file (already trimmed)
        policy: How to treat an undotted remainder after a distro prefix

    Returns:
        Query on success, UnparseableSpecifier otherwise
    """
    distro, remainder = _split_distro(text)

    head, sep, rest = remainder.partition(".")
    if sep:
        token = rest if head == "1" else head
    elif policy is SpecifierPolicy.ORIGINAL:
        token = text
    else:
        token = remainder

    version = parse_major_token(token)
    if version is None:
        logger.debug("Rejected specifier %r (version token %r)", text, token)
        return UnparseableSpecifier(text=text)

    query = Query(distro=distro, version=version)
    logger.debug("Parsed specifier %r as %s", text, query)
    return query
