"""Page window resolution shared by the campaign list operations."""

from dataclasses import dataclass

from promo_store.core.config import settings
from promo_store.schemas.pagination import Pagination


@dataclass(frozen=True)
class PageWindow:
    """Resolved LIMIT/OFFSET window."""

    page: int
    size: int
    offset: int


class PaginationPolicy:
    """Applies page and size defaults and computes the row offset.

    - page <= 0 is treated as page 1
    - size unset or <= 0 falls back to ``default_size``; when ``max_size``
      is set, larger sizes are clamped to it
    - a caller-supplied non-negative offset is used verbatim, otherwise the
      offset is ``(page - 1) * size``
    """

    def __init__(
        self,
        default_size: int = settings.DEFAULT_PAGE_SIZE,
        max_size: int | None = settings.MAX_PAGE_SIZE,
    ):
        if default_size <= 0:
            raise ValueError("default_size must be positive")
        if max_size is not None and max_size < default_size:
            raise ValueError("max_size must be >= default_size")
        self.default_size = default_size
        self.max_size = max_size

    def resolve(self, pagination: Pagination | None = None) -> PageWindow:
        """Resolve a requested page into a LIMIT/OFFSET window.

        Args:
            pagination: Requested page, or None for the first default page

        Returns:
            The window to apply to the query
        """
        pagination = pagination or Pagination()

        page = pagination.page if pagination.page > 0 else 1

        size = pagination.size
        if size is None or size <= 0:
            size = self.default_size
        if self.max_size is not None:
            size = min(size, self.max_size)

        if pagination.offset is not None and pagination.offset >= 0:
            offset = pagination.offset
        else:
            offset = (page - 1) * size

        return PageWindow(page=page, size=size, offset=offset)
