"""Tag exclusion filtering."""

import logging
import re
from typing import Iterable, Sequence

from allbranding.core.config import ConfigError
from allbranding.models.release import Release

logger = logging.getLogger(__name__)


def compile_patterns(patterns: Iterable[str]) -> tuple[re.Pattern, ...]:
    """Compile exclusion patterns, failing on the first invalid one."""
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise ConfigError(f"Invalid ignore regex {pattern!r}: {e}") from e
    return tuple(compiled)


def is_excluded(tag: str, patterns: Sequence[re.Pattern]) -> bool:
    """Check if any pattern matches somewhere in the tag."""
    return any(pattern.search(tag) for pattern in patterns)


def filter_releases(releases: Iterable[Release], patterns: Sequence[re.Pattern]) -> list[Release]:
    """Drop releases whose tag matches an exclusion pattern."""
    kept = []
    for release in releases:
        if is_excluded(release.tag_name, patterns):
            logger.debug("ignoring release %s", release.tag_name)
            continue
        kept.append(release)
    return kept
