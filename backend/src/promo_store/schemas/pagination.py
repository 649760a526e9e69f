from pydantic import BaseModel


class Pagination(BaseModel):
    """Requested page of a list operation.

    Values are taken as given; ``PaginationPolicy`` applies the defaults.
    ``offset`` overrides the page-derived offset when set.
    """

    page: int = 1
    size: int | None = None
    offset: int | None = None
