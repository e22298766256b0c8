"""Gallery slug value object.

Immutable, URL-safe identifier for a gallery. Any input (a display name or
a user-typed slug) goes through the same normalize-then-validate pipeline,
so two slugs compare equal exactly when their normalized text is equal.

Normalization:
    1. Trim surrounding whitespace
    2. Lowercase
    3. Transliterate German umlauts/eszett and common accented vowels
    4. Drop everything except a-z, 0-9, hyphen, underscore and whitespace
    5. Collapse runs of whitespace, hyphens and underscores into one hyphen
    6. Trim leading/trailing hyphens

Validation (first failure wins):
    - not empty
    - 2 to 100 characters
    - only a-z, 0-9, hyphen, underscore
    - not a reserved word

Usage:
    from clientgallery.domain.value_objects import GallerySlug

    slug = GallerySlug.from_name("Müller & Söhne!")
    str(slug)  # 'mueller-soehne'

    unique = await slug.make_unique_async(repo.exists_by_slug)
"""

import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

MIN_LENGTH = 2
MAX_LENGTH = 100
MAX_UNIQUE_ATTEMPTS = 1000

RESERVED_SLUGS = frozenset(
    {"admin", "wp-admin", "wp-content", "wp-includes", "feed", "rss", "atom"}
)

_TRANSLITERATION = str.maketrans(
    {
        "ä": "ae",
        "ö": "oe",
        "ü": "ue",
        "ß": "ss",
        "à": "a",
        "á": "a",
        "è": "e",
        "é": "e",
        "ì": "i",
        "í": "i",
        "ò": "o",
        "ó": "o",
        "ù": "u",
        "ú": "u",
    }
)
_DISALLOWED_PATTERN = re.compile(r"[^a-z0-9\-_\s]")
_SEPARATOR_PATTERN = re.compile(r"[\s\-_]+")
_VALID_PATTERN = re.compile(r"^[a-z0-9\-_]+$")


class InvalidSlugError(ValueError):
    """Raised when text cannot be turned into a valid gallery slug."""


class SlugExhaustedError(RuntimeError):
    """Raised when no free slug variant is found within the attempt limit."""


def normalize_slug(raw: str) -> str:
    """Apply the slug normalization pipeline to raw text.

    Args:
        raw: Display name or user-supplied slug.

    Returns:
        str: Normalized candidate (may still be invalid, e.g. empty).
    """
    text = raw.strip().lower().translate(_TRANSLITERATION)
    text = _DISALLOWED_PATTERN.sub("", text)
    text = _SEPARATOR_PATTERN.sub("-", text)
    return text.strip("-")


@dataclass(frozen=True)
class GallerySlug:
    """URL-safe gallery identifier.

    Attributes:
        value: Normalized slug text.

    Raises:
        InvalidSlugError: If the normalized text violates a slug rule.

    Example:
        >>> GallerySlug("  Summer Wedding 2024 ").value
        'summer-wedding-2024'
        >>> GallerySlug("a")
        Traceback (most recent call last):
        ...
        InvalidSlugError: Gallery slug must be at least 2 characters long
    """

    value: str

    def __post_init__(self) -> None:
        """Normalize, then validate.

        Raises:
            InvalidSlugError: On the first violated rule.
        """
        normalized = normalize_slug(self.value)
        _validate(normalized)
        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "value", normalized)

    @classmethod
    def from_name(cls, name: str) -> "GallerySlug":
        """Derive a slug from a gallery display name."""
        return cls(name)

    @classmethod
    def from_string(cls, slug: str) -> "GallerySlug":
        """Build a slug from user-supplied slug text."""
        return cls(slug)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        """Check whether text yields a valid slug, without raising.

        Args:
            raw: Text to check.

        Returns:
            bool: True if ``GallerySlug(raw)`` would succeed.
        """
        try:
            cls(raw)
        except InvalidSlugError:
            return False
        return True

    def make_unique(self, exists: Callable[[str], bool]) -> "GallerySlug":
        """Find the first variant of this slug that is not taken.

        Tries ``slug``, ``slug-1``, ``slug-2`` ... in order, calling ``exists``
        once per candidate.

        Args:
            exists: Predicate returning True when a candidate is already used.

        Returns:
            GallerySlug: First free candidate.

        Raises:
            SlugExhaustedError: If all candidates up to the attempt limit are taken.
        """
        for candidate in self._candidates():
            if not exists(candidate):
                return GallerySlug(candidate)
        raise SlugExhaustedError(
            f"Cannot generate unique slug after {MAX_UNIQUE_ATTEMPTS} attempts"
        )

    async def make_unique_async(
        self, exists: Callable[[str], Awaitable[bool]]
    ) -> "GallerySlug":
        """Async variant of :meth:`make_unique` for repository lookups.

        Args:
            exists: Async predicate, e.g. ``GalleryRepository.exists_by_slug``.

        Returns:
            GallerySlug: First free candidate.

        Raises:
            SlugExhaustedError: If all candidates up to the attempt limit are taken.
        """
        for candidate in self._candidates():
            if not await exists(candidate):
                return GallerySlug(candidate)
        raise SlugExhaustedError(
            f"Cannot generate unique slug after {MAX_UNIQUE_ATTEMPTS} attempts"
        )

    def _candidates(self):
        yield self.value
        for counter in range(1, MAX_UNIQUE_ATTEMPTS):
            suffix = f"-{counter}"
            # Keep suffixed candidates within the length limit
            base = self.value[: MAX_LENGTH - len(suffix)].rstrip("-_")
            yield f"{base}{suffix}"

    def __str__(self) -> str:
        return self.value


def _validate(slug: str) -> None:
    if not slug:
        raise InvalidSlugError("Gallery slug cannot be empty")
    if len(slug) < MIN_LENGTH:
        raise InvalidSlugError(
            f"Gallery slug must be at least {MIN_LENGTH} characters long"
        )
    if len(slug) > MAX_LENGTH:
        raise InvalidSlugError(
            f"Gallery slug cannot be longer than {MAX_LENGTH} characters"
        )
    if not _VALID_PATTERN.match(slug):
        raise InvalidSlugError(
            "Gallery slug can only contain lowercase letters, numbers, "
            "hyphens, and underscores"
        )
    if slug in RESERVED_SLUGS:
        raise InvalidSlugError(
            f'Gallery slug "{slug}" is reserved and cannot be used'
        )
