"""
Page/limit arithmetic shared by the listing queries.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Pagination:
    """Resolved page window."""

    page: int
    limit: int

    @classmethod
    def from_params(
        cls,
        page: int | None,
        limit: int | None,
        default_limit: int = 10,
    ) -> "Pagination":
        """Apply defaults: a missing or zero page is 1, a missing or zero limit is the default."""
        return cls(page=page or 1, limit=limit or default_limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def count_pages(self, total: int) -> int:
        """Number of pages needed for `total` rows; zero when there are none."""
        return math.ceil(total / self.limit)
