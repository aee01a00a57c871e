"""Dashboard counters."""

from pydantic import BaseModel


class StatsRead(BaseModel):
    pages: int
    blog_posts: int
    testimonials: int
    media: int
