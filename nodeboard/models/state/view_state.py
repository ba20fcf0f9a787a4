"""View state value and its transitions.

ViewState is immutable. Every parameter change goes through one of the
``with_*`` methods, which validate the request and return a new state with
the page number reset where the change invalidates the current page.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from nodeboard.constants.defaults import (
    PAGE_SIZE_DEFAULT,
    SEARCH_TERM_DEFAULT,
    SORT_DIRECTION_DEFAULT,
    SORT_KEY_DEFAULT,
)
from nodeboard.constants.enums import SortDirection, SortKey
from nodeboard.constants.limits import FIRST_PAGE, PAGE_SIZE_OPTIONS


class ViewParameterError(ValueError):
    """Base exception for rejected view parameter requests."""


class UnknownSortKeyError(ViewParameterError):
    """Raised when a sort is requested on a field outside SortKey."""

    def __init__(self, key: object) -> None:
        supported = ", ".join(k.value for k in SortKey)
        super().__init__(f"Unknown sort key {key!r} (supported: {supported})")
        self.key = key


class InvalidPageSizeError(ViewParameterError):
    """Raised when a page size outside PAGE_SIZE_OPTIONS is requested."""

    def __init__(self, page_size: object) -> None:
        options = ", ".join(str(size) for size in PAGE_SIZE_OPTIONS)
        super().__init__(f"Invalid page size {page_size!r} (options: {options})")
        self.page_size = page_size


def parse_sort_key(key: SortKey | str) -> SortKey:
    """Resolve a sort key token to SortKey.

    Raises:
        UnknownSortKeyError: If the token names no supported field.
    """
    if isinstance(key, SortKey):
        return key
    try:
        return SortKey(str(key).strip().lower())
    except ValueError:
        raise UnknownSortKeyError(key) from None


def validate_page_size(page_size: int) -> int:
    """Return page_size if it is one of PAGE_SIZE_OPTIONS.

    Raises:
        InvalidPageSizeError: Otherwise.
    """
    if isinstance(page_size, bool) or page_size not in PAGE_SIZE_OPTIONS:
        raise InvalidPageSizeError(page_size)
    return int(page_size)


@dataclass(frozen=True)
class SortConfig:
    """Sort key and direction for the node list."""

    key: SortKey = SORT_KEY_DEFAULT
    direction: SortDirection = SORT_DIRECTION_DEFAULT

    def toggled(self, key: SortKey | str) -> SortConfig:
        """Return the config that results from sorting by ``key``.

        Sorting by the current key flips the direction; any other key starts
        ascending.
        """
        sort_key = parse_sort_key(key)
        if sort_key is self.key:
            return SortConfig(self.key, self.direction.flipped())
        return SortConfig(sort_key, SortDirection.ASC)

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


@dataclass(frozen=True)
class ViewState:
    """User-controlled view parameters."""

    search_term: str = SEARCH_TERM_DEFAULT
    sort_config: SortConfig = field(default_factory=SortConfig)
    page_size: int = PAGE_SIZE_DEFAULT
    page_number: int = FIRST_PAGE

    def with_search_term(self, term: str) -> ViewState:
        return replace(self, search_term=term or "", page_number=FIRST_PAGE)

    def with_sort_key(self, key: SortKey | str) -> ViewState:
        return replace(
            self,
            sort_config=self.sort_config.toggled(key),
            page_number=FIRST_PAGE,
        )

    def with_page_size(self, page_size: int) -> ViewState:
        return replace(
            self,
            page_size=validate_page_size(page_size),
            page_number=FIRST_PAGE,
        )

    def with_page_number(self, page_number: int) -> ViewState:
        """Return a state on ``page_number``; the lower bound is applied here,
        the upper bound by the paginator once the result size is known."""
        return replace(self, page_number=max(FIRST_PAGE, int(page_number)))
