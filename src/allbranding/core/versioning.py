"""Version parsing and release ordering.

Tags are read with the grammar used by Go's hashicorp/go-version: an optional
``v``, one or more dot separated numbers, an optional pre-release and an
optional ``+metadata``. Ordering follows semver precedence, so any pre-release
sorts before its release and metadata is ignored.
"""

import enum
import functools
import logging
import re

from allbranding.models.release import Release

logger = logging.getLogger(__name__)

NON_NUMERIC = re.compile(r"[^0-9.]+")

VERSION_PATTERN = re.compile(
    r"^v?(?P<segments>[0-9]+(?:\.[0-9]+)*?)"
    r"(?:-(?P<pre>[0-9]+[0-9A-Za-z\-~]*(?:\.[0-9A-Za-z\-~]+)*)"
    r"|-?(?P<pre_alpha>[A-Za-z\-~]+[0-9A-Za-z\-~]*(?:\.[0-9A-Za-z\-~]+)*))?"
    r"(?:\+(?P<metadata>[0-9A-Za-z\-~]+(?:\.[0-9A-Za-z\-~]+)*))?$"
)


class InvalidVersion(ValueError):
    """Tag is not a valid version string."""

    pass


def _identifier_key(identifier: str) -> tuple:
    # Numeric identifiers sort before alphanumeric ones
    if identifier.isdigit():
        return (0, int(identifier), "")
    return (1, 0, identifier)


@functools.total_ordering
class Version:
    """A parsed version, comparable with semver precedence."""

    def __init__(self, text: str):
        match = VERSION_PATTERN.match(text)
        if match is None:
            raise InvalidVersion(f"Malformed version: {text!r}")

        self.text = text
        self.segments = tuple(int(s) for s in match.group("segments").split("."))
        self.prerelease = match.group("pre") or match.group("pre_alpha") or ""
        self.metadata = match.group("metadata") or ""

    def _key(self) -> tuple:
        # Trailing zero segments do not count: 1.2 == 1.2.0
        segments = list(self.segments)
        while len(segments) > 1 and segments[-1] == 0:
            segments.pop()
        if self.prerelease:
            pre = (0, tuple(_identifier_key(p) for p in self.prerelease.split(".")))
        else:
            pre = (1, ())
        return (tuple(segments), pre)

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f"Version({self.text!r})"

    def __str__(self):
        return self.text


class Ordering(enum.Enum):
    """Relative position of two tags in descending version order."""

    A_BEFORE_B = "before"
    A_AFTER_B = "after"
    EQUAL = "equal"
    INCOMPARABLE = "incomparable"


def strip_non_numeric(tag: str) -> str:
    """Remove every character that is not a digit or a dot."""
    return NON_NUMERIC.sub("", tag)


def parse_version(tag: str, lenient: bool = False) -> Version | None:
    """Parse a tag into a version, or None if it is not a valid version.

    In lenient mode non-numeric characters are stripped first, so
    ``release-1.2.3-rc`` parses as ``1.2.3``.
    """
    candidate = strip_non_numeric(tag) if lenient else tag
    try:
        return Version(candidate)
    except InvalidVersion as e:
        logger.warning("invalid version %r: %s", tag, e)
        return None


def compare(tag_a: str, tag_b: str, lenient: bool = False) -> Ordering:
    """Compare two tags for descending (newest first) order."""
    version_a = parse_version(tag_a, lenient)
    version_b = parse_version(tag_b, lenient)
    if version_a is None or version_b is None:
        return Ordering.INCOMPARABLE

    logger.debug("comparing versions %s and %s", version_a, version_b)
    if version_a > version_b:
        return Ordering.A_BEFORE_B
    if version_a < version_b:
        return Ordering.A_AFTER_B
    return Ordering.EQUAL


def sort_releases(releases: list[Release], lenient: bool = False) -> list[Release]:
    """Sort releases newest first.

    Releases whose tag does not parse are placed after every valid version,
    in their original order.
    """
    parsed = [(release, parse_version(release.tag_name, lenient)) for release in releases]
    valid = [(r, v) for r, v in parsed if v is not None]
    invalid = [r for r, v in parsed if v is None]

    # sorted() is stable with reverse=True, equal versions keep feed order
    valid.sort(key=lambda item: item[1], reverse=True)
    return [r for r, _ in valid] + invalid
