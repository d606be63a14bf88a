"""
Version tag parsing and ordering.

Finds the largest "version tag" in a list of tag names. A version tag is any
tag that looks like a version, using a grammar looser than Semantic
Versioning:

- a leading 'v' is allowed (e.g., "v1.2.3");
- patch is optional (e.g., "1.2");
- anything that starts with a non-digit may follow patch (e.g., "1.2.3-rc.1",
  "1.2.3a3", "1.2.3.post1").

Ordering is numeric on major/minor/patch. Pre-releases of the same base
version are ordered by their suffix stem, then by any trailing number, which
agrees with SemVer precedence for the usual "name.N" convention:

    1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta
    < 1.0.0-beta.2 < 1.0.0-beta.11 < 1.0.0-rc.1 < 1.0.0

It is not full SemVer precedence (dot-separated identifiers are not compared
field by field), and tag sets that stray from that convention may sort
differently than SemVer says. Use is_semver() to check a tag strictly.

All functions here are pure and work on caller-supplied tag names. See
gitnubs.git.tag for the git-backed versions.
"""

import re
from fnmatch import fnmatchcase
from dataclasses import dataclass, field
from typing import Callable, Iterable

# Groups: 1 'v', 2 major, 3 minor, 5 patch,
#         6 pre-release up to any final digits, 7 final digits.
VERSION_TAG_REGEX = r'(v)?([0-9]+)\.([0-9]+)(\.([0-9]+)([^0-9].*?)?([0-9]+)?)?'

# Semantic Versioning 2.0.0 regex, from https://semver.org/
SEMVER_REGEX = (
    r'^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)'
    r'(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)'
    r'(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?'
    r'(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$'
)
SEMVER_PATTERN = re.compile(SEMVER_REGEX)

# Globs passed to `git tag -l` as a prefilter; the regex does the real work.
VERSION_TAG_GLOBS = ("v[0-9]*", "[0-9]*")


@dataclass(frozen=True)
class VersionGrammar:
    """Compiled version tag grammar and its git tag glob prefilter."""
    pattern: re.Pattern = field(
        default_factory=lambda: re.compile(f"^{VERSION_TAG_REGEX}$")
    )
    globs: tuple[str, ...] = VERSION_TAG_GLOBS

    def prefilter(self, tag: str) -> bool:
        """Check tag against the globs, as `git tag -l` would."""
        return any(fnmatchcase(tag, glob) for glob in self.globs)


DEFAULT_GRAMMAR = VersionGrammar()

TagExists = Callable[[str], bool]


@dataclass(frozen=True)
class VersionTagCandidate:
    """A tag name decomposed into version fields."""
    raw: str
    has_v_prefix: bool
    major: int
    minor: int
    patch: int | None = None
    pre_release: str | None = None  # Everything after patch
    pre_release_stem: str = ""  # pre_release minus any trailing digits
    pre_release_number: int | None = None  # Trailing digits of pre_release

    @property
    def base_version(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch or 0}"

    @property
    def base_key(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch or 0)

    @property
    def is_release(self) -> bool:
        return not self.pre_release

    @property
    def full_key(self) -> tuple[bool, str, int, str]:
        """Order within one base version: releases first, then by suffix."""
        number = -1 if self.pre_release_number is None else self.pre_release_number
        return (self.is_release, self.pre_release_stem, number, self.raw)


def parse_candidate(
    tag: str,
    grammar: VersionGrammar = DEFAULT_GRAMMAR,
) -> VersionTagCandidate | None:
    """Decompose a tag name, or return None if it isn't a version tag."""
    match = grammar.pattern.match(tag)
    if not match:
        return None

    v_prefix, major, minor, _, patch, stem, number = match.groups()
    stem = stem or ""
    pre_release = stem + (number or "")
    return VersionTagCandidate(
        raw=tag,
        has_v_prefix=bool(v_prefix),
        major=int(major),
        minor=int(minor),
        patch=int(patch) if patch is not None else None,
        pre_release=pre_release or None,
        pre_release_stem=stem,
        pre_release_number=int(number) if number is not None else None,
    )


def parse_candidates(
    tags: Iterable[str],
    grammar: VersionGrammar = DEFAULT_GRAMMAR,
) -> list[VersionTagCandidate]:
    """Parse all version tags, silently dropping the rest."""
    candidates = []
    for tag in tags:
        tag = tag.strip()
        if not grammar.prefilter(tag):
            continue
        candidate = parse_candidate(tag, grammar)
        if candidate is not None:
            candidates.append(candidate)
    return candidates


def latest_base_version(
    tags: Iterable[str],
    grammar: VersionGrammar = DEFAULT_GRAMMAR,
) -> str | None:
    """
    Get the largest "major.minor.patch" among the version tags.

    Pre-release suffixes are dropped, so ["1.2.3-rc.1"] gives "1.2.3".
    Returns None if there are no version tags.
    """
    candidates = parse_candidates(tags, grammar)
    if not candidates:
        return None
    return max(candidates, key=lambda c: c.base_key).base_version


def _default_tag_exists(tags: list[str]) -> TagExists:
    known = set(tags)
    return lambda name: name in known


def _release_tag(base_version: str, tag_exists: TagExists) -> str | None:
    for name in (base_version, f"v{base_version}"):
        if tag_exists(name):
            return name
    return None


def latest_full_version(
    base_version: str,
    tags: Iterable[str],
    tag_exists: TagExists | None = None,
    grammar: VersionGrammar = DEFAULT_GRAMMAR,
) -> str | None:
    """
    Get the largest tag for a base version, e.g., "1.0.0" -> "1.0.0-rc.2".

    A release tag ("1.0.0", "v1.0.0", or a patchless "1.0") outranks any
    pre-release of the same base version. Otherwise pre-releases are compared
    by suffix stem, then trailing number.

    Args:
        base_version: "major.minor.patch" to look for; "major.minor" means
            patch 0
        tags: Tag names
        tag_exists: Predicate for "is this a real tag"; defaults to
            membership in tags

    Returns:
        Tag name, or None if no tag has that base version
    """
    tags = [tag.strip() for tag in tags]
    if tag_exists is None:
        tag_exists = _default_tag_exists(tags)

    parsed = parse_candidate(base_version, grammar)
    if parsed is not None:
        base_version = parsed.base_version

    release = _release_tag(base_version, tag_exists)
    if release:
        return release

    matching = [
        c for c in parse_candidates(tags, grammar)
        if c.base_version == base_version
    ]
    if not matching:
        return None
    return max(matching, key=lambda c: c.full_key).raw


def largest_version_tag(
    tags: Iterable[str],
    tag_exists: TagExists | None = None,
    grammar: VersionGrammar = DEFAULT_GRAMMAR,
) -> str | None:
    """
    Get the largest version tag (not necessarily the most recent one).

    Example:
        >>> largest_version_tag(["1.0.0-rc.2", "1.0.0-rc.10", "0.9.1"])
        '1.0.0-rc.10'
    """
    tags = [tag.strip() for tag in tags]
    base_version = latest_base_version(tags, grammar)
    if base_version is None:
        return None
    return latest_full_version(base_version, tags, tag_exists, grammar)


def versions_from_tags(
    tags: Iterable[str],
    grammar: VersionGrammar = DEFAULT_GRAMMAR,
) -> list[str]:
    """Filter version tags and strip any leading 'v'."""
    return [
        c.raw[1:] if c.has_v_prefix else c.raw
        for c in parse_candidates(tags, grammar)
    ]


def is_semver(tag: str) -> bool:
    """Check if a version string is strictly Semantic Versioning 2.0.0."""
    return bool(SEMVER_PATTERN.match(tag))
