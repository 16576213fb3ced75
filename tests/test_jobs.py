from backend.jobboard.models.job import Job
from backend.jobboard.services.job_listings import JOBS, list_jobs

JOB_FIELDS = {
    "id",
    "title",
    "company",
    "category",
    "pay",
    "location",
    "country",
    "description",
    "requirements",
    "contact",
    "posted",
}


def test_list_jobs_returns_all_in_order():
    jobs = list_jobs()
    assert len(jobs) == 27
    assert [job.id for job in jobs] == list(range(9, 36))
    assert all(isinstance(job, Job) for job in jobs)


def test_list_jobs_returns_a_copy():
    jobs = list_jobs()
    jobs.clear()
    assert len(list_jobs()) == 27
    assert len(JOBS) == 27


def test_get_jobs_endpoint(client):
    r = client.get("/jobs")
    assert r.status_code == 200, r.text
    data = r.json()
    assert len(data) == 27
    assert [item["id"] for item in data] == list(range(9, 36))
    for item in data:
        assert set(item) == JOB_FIELDS
        assert all(item[field] not in (None, "") for field in JOB_FIELDS)


def test_first_job_verbatim(client):
    first = client.get("/jobs").json()[0]
    assert first == {
        "id": 9,
        "title": "Part-Time Retail Associate",
        "company": "Target",
        "category": "retail",
        "pay": 15,
        "location": "New York, NY",
        "country": "United States",
        "description": "Assist customers, stock shelves, and operate cash registers. Flexible hours for students.",
        "requirements": "High school diploma or equivalent, strong communication skills",
        "contact": "careers@target.com",
        "posted": "2 days ago",
    }


def test_filters_are_ignored(client):
    unfiltered = client.get("/jobs").json()
    filtered = client.get("/jobs", params={"category": "remote", "page": 2}).json()
    assert filtered == unfiltered


def test_jobs_do_not_need_login(client):
    assert client.get("/jobs").status_code == 200
