from pydantic import BaseModel, ConfigDict


class Job(BaseModel):
    """A single job posting as served by GET /jobs."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    company: str
    category: str  # retail / campus / food / remote / delivery / tutoring
    pay: int | float  # hourly rate, USD
    location: str
    country: str
    description: str
    requirements: str
    contact: str
    posted: str  # free-text recency, e.g. "2 days ago"
