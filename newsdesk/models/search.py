import math

from pydantic import BaseModel, Field

from newsdesk.models.news import Article, ResultSet


def total_pages_for(total_results: int, page_size: int) -> int:
    """Number of pages needed to show ``total_results`` at ``page_size`` per page."""
    return math.ceil(total_results / page_size)


class Search(BaseModel):
    """Pagination state for a single search request."""

    search_key: str = ""
    next_page: int = Field(default=1, ge=1)
    total_pages: int = 0
    results: ResultSet = Field(default_factory=ResultSet)

    model_config = {"validate_assignment": True}

    def is_last_page(self) -> bool:
        return self.next_page >= self.total_pages

    def current_page(self) -> int:
        # next_page has already been advanced past the page being shown,
        # except on the first page.
        if self.next_page == 1:
            return self.next_page
        return self.next_page - 1

    def previous_page(self) -> int:
        return self.current_page() - 1

    def format_published_date(self, article: Article) -> str:
        return article.format_published_date()

    def paginate(self, results: ResultSet, page_size: int) -> None:
        """Store fetched results and advance next_page unless this is the last page."""
        self.results = results
        self.total_pages = total_pages_for(results.total_results, page_size)
        if not self.is_last_page():
            self.next_page += 1
