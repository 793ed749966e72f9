"""
A thin wrapper around `semantic_version`, the external SemVer grammar that
generated candidates are judged against.

Valid-tagged candidates are promised to parse here; invalid-tagged ones
are promised not to.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from semantic_version import SimpleSpec, Version

logger = logging.getLogger(__name__)


class SemVerError(Exception):
    """
    Raised when a version or requirement string is rejected by the grammar.
    """

    pass


@dataclass(frozen=True)
class ParsedRequirement:
    """
    A requirement accepted by the grammar.
    """

    spec: SimpleSpec
    """The parsed requirement."""

    comparators: tuple[str, ...]
    """The comparator clauses, in order, without surrounding whitespace."""


def parse_version(text: str) -> Version:
    """
    Parse a full `MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]` version.

    Raises `SemVerError` if `text` is not a valid SemVer 2.0.0 version.
    """
    try:
        return Version(text)
    except ValueError as exc:
        logger.debug(f"rejected version {text!r}: {exc}")
        raise SemVerError(f"invalid version: {text!r}") from exc


def parse_requirement(text: str) -> ParsedRequirement:
    """
    Parse a comma-separated version requirement such as `>=1.2, <2`.

    A single space may follow each comma; comparators themselves may not be
    empty.

    Raises `SemVerError` if `text` is not a valid requirement.
    """
    blocks = text.split(",")
    comparators = tuple(
        block[1:] if index and block.startswith(" ") else block
        for index, block in enumerate(blocks)
    )
    if not all(comparators):
        logger.debug(f"rejected requirement {text!r}: empty comparator")
        raise SemVerError(f"invalid requirement (empty comparator): {text!r}")

    try:
        spec = SimpleSpec(",".join(comparators))
    except ValueError as exc:
        logger.debug(f"rejected requirement {text!r}: {exc}")
        raise SemVerError(f"invalid requirement: {text!r}") from exc
    return ParsedRequirement(spec, comparators)


def is_valid_version(text: str) -> bool:
    try:
        parse_version(text)
    except SemVerError:
        return False
    return True


def is_valid_requirement(text: str) -> bool:
    try:
        parse_requirement(text)
    except SemVerError:
        return False
    return True
