from datetime import datetime

from pydantic import BaseModel, Field


class ArticleSource(BaseModel):
    id: str | None = None
    name: str | None = None

    model_config = {"frozen": True}


class Article(BaseModel):
    source: ArticleSource = Field(default_factory=ArticleSource)
    author: str | None = None
    title: str | None = None
    description: str | None = None
    url: str | None = None
    image_url: str | None = None
    published_at: datetime | None = None
    content: str | None = None

    model_config = {"frozen": True}

    def format_published_date(self) -> str:
        """Render the publication date as e.g. ``March 5, 2021``.

        Uses the timestamp's own calendar date, no timezone conversion.
        """
        if self.published_at is None:
            return ""
        return f"{self.published_at:%B} {self.published_at.day}, {self.published_at.year}"


class ResultSet(BaseModel):
    status: str = ""
    total_results: int = 0
    articles: list[Article] = Field(default_factory=list)

    model_config = {"frozen": True}
