"""Search result records.

Immutable value records built during a single page parse
and returned to the caller.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import overload

from imdb_search.helpers.anchor import Anchor, resolve_absolute

NO_RATING = "No rating."
"""Rating sentinel used when a title has no rating element."""

DIRECTOR_ROLES = ("Director", "Directors")
STAR_ROLES = ("Star", "Stars")


# =============================================================================
# TITLE LISTING
# =============================================================================


@dataclass(frozen=True)
class Person:
    """Credited person on a title listing row.

    Attributes:
        name: Display name as shown on the page.
        profile_href: Site-relative link to the person's page.
        role: Role label taken verbatim from the page (e.g. 'Director').
    """

    name: str
    profile_href: str
    role: str


@dataclass(frozen=True)
class TitleSearchItem:
    """One result row of a title listing page.

    Attributes:
        title: Title anchor (name and link).
        image_url: Poster thumbnail URL, empty if absent.
        years: Year label (e.g. '(1977)').
        info: Certificate, runtime and genre spans joined by spaces.
        rating: Rating value, or NO_RATING.
        summary: Plot summary markup.
        people_by_role: Role label to credited people, in page order.
            Stored as a read-only view of a private copy.
    """

    title: Anchor
    image_url: str
    years: str
    info: str
    rating: str
    summary: str
    people_by_role: Mapping[str, tuple[Person, ...]] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "people_by_role", MappingProxyType(dict(self.people_by_role)))

    def get_by_role(self, role: str) -> list[Person]:
        """Return people credited under role, empty if none."""
        return list(self.people_by_role.get(role, ()))

    def get_by_roles(self, roles: Iterable[str]) -> list[Person]:
        """Return people for each role in turn, concatenated.

        Args:
            roles: Role labels, e.g. singular and plural variants.

        Returns:
            All matches for the first role, then the second, and so on.
        """
        result: list[Person] = []
        for role in roles:
            result.extend(self.get_by_role(role))
        return result

    def directors(self) -> list[Person]:
        """Return people listed as 'Director' or 'Directors'."""
        return self.get_by_roles(DIRECTOR_ROLES)

    def stars(self) -> list[Person]:
        """Return people listed as 'Star' or 'Stars'."""
        return self.get_by_roles(STAR_ROLES)

    @property
    def has_rating(self) -> bool:
        """True if the row carried a rating value."""
        return self.rating != NO_RATING

    def join_people(
        self,
        format_role: Callable[[str], str],
        separator: str,
        format_person: Callable[[Person], str],
        person_separator: str,
    ) -> str:
        """Render the people mapping as a single string.

        Example:
            >>> item.join_people(lambda r: f"{r}: ", " | ", lambda p: p.name, ", ")
            'Director: Alice | Stars: Bob, Cara'

        Args:
            format_role: Renders a role label prefix.
            separator: Placed between role groups.
            format_person: Renders one person.
            person_separator: Placed between people of one role.

        Returns:
            Joined string, empty if there are no credits.
        """
        groups = [
            format_role(role) + person_separator.join(format_person(p) for p in people)
            for role, people in self.people_by_role.items()
        ]
        return separator.join(groups)

    def __str__(self) -> str:
        return (
            f"{self.title.text} {self.years}\n"
            f"- {self.info}\n"
            f"- Rating: {self.rating}\n"
            f"- {self.summary}"
        )


@dataclass(frozen=True)
class TitleSearch(Sequence[TitleSearchItem]):
    """Parsed title listing page, in page order."""

    items: tuple[TitleSearchItem, ...] = ()

    @overload
    def __getitem__(self, index: int) -> TitleSearchItem: ...

    @overload
    def __getitem__(self, index: slice) -> "TitleSearch": ...

    def __getitem__(self, index: int | slice) -> "TitleSearchItem | TitleSearch":
        if isinstance(index, slice):
            return TitleSearch(items=self.items[index])
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[TitleSearchItem]:
        return iter(self.items)


# =============================================================================
# QUICK FIND
# =============================================================================


@dataclass(frozen=True)
class FoundItem:
    """One row of a quick find results table.

    Attributes:
        title: Title anchor markup.
        href: Site-relative title link.
        image_src: Thumbnail image URL.
    """

    title: str
    href: str
    image_src: str

    @property
    def title_id(self) -> str:
        """Title identifier from the href path (``/title/<id>/...``).

        The path shape is not validated: an href with fewer than
        three segments yields an empty string.
        """
        parts = self.href.split("/")
        return parts[2] if len(parts) > 2 else ""

    def absolute_url(self, base_url: str) -> str:
        """Return href prefixed with base_url."""
        return resolve_absolute(Anchor(text=self.title, href=self.href), base_url)


@dataclass(frozen=True)
class FoundResults(Sequence[FoundItem]):
    """Parsed quick find page, in page order."""

    items: tuple[FoundItem, ...] = ()

    @overload
    def __getitem__(self, index: int) -> FoundItem: ...

    @overload
    def __getitem__(self, index: slice) -> "FoundResults": ...

    def __getitem__(self, index: int | slice) -> "FoundItem | FoundResults":
        if isinstance(index, slice):
            return FoundResults(items=self.items[index])
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[FoundItem]:
        return iter(self.items)
