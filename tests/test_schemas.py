"""
Tests for request/response schemas.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from jobtracker.schemas import (
    AnalyzeRequest, Job, JobAnalysis, JobCreate, JobStatus, JobUpdate, validate_url
)


class TestJobStatus:
    def test_exactly_four_members(self):
        assert [s.value for s in JobStatus] == ["Applied", "Interviewing", "Rejected", "Offer"]

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            JobCreate(title="A", company="B", application_link="https://b.com", status="Ghosted")

    def test_status_is_case_sensitive(self):
        with pytest.raises(ValidationError):
            JobCreate(title="A", company="B", application_link="https://b.com", status="applied")


class TestValidateUrl:
    @pytest.mark.parametrize("url", [
        "https://a.com",
        "http://example.com/careers/123?ref=linkedin",
        "https://jobs.lever.co/acme/0f3c-41",
        "http://localhost:8000/jobs",
        "http://127.0.0.1/jobs",
        "https://a.com#apply",
        "https://careers_portal.example.com/jobs/7",
        "http://[::1]:8000/jobs",
        "ftp://files.example.com/posting.pdf",
        "https://a.com?ref=board&id=9",
    ])
    def test_valid_urls(self, url):
        assert validate_url(url) == url

    @pytest.mark.parametrize("url", [
        "",
        "not a url",
        "example.com",
        "https://",
        "javascript:alert(1)",
        "mailto:jobs@example.com",
        " https://a.com",
    ])
    def test_invalid_urls(self, url):
        with pytest.raises(ValueError, match="valid URL"):
            validate_url(url)

    def test_none_passes_through(self):
        assert validate_url(None) is None


class TestJobCreate:
    def test_accepts_camel_case(self):
        job = JobCreate.model_validate({
            "title": "Dev", "company": "Co", "applicationLink": "https://co.com", "status": "Offer",
        })
        assert job.application_link == "https://co.com"
        assert job.status == JobStatus.OFFER

    def test_accepts_snake_case(self):
        job = JobCreate(title="Dev", company="Co", application_link="https://co.com", status="Applied")
        assert job.status == JobStatus.APPLIED

    @pytest.mark.parametrize("field", ["title", "company", "applicationLink", "status"])
    def test_required_fields(self, field):
        data = {"title": "Dev", "company": "Co", "applicationLink": "https://co.com", "status": "Applied"}
        del data[field]
        with pytest.raises(ValidationError):
            JobCreate.model_validate(data)

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            JobCreate(title="", company="Co", application_link="https://co.com", status="Applied")

    def test_title_length_bounded(self):
        JobCreate(title="x" * 100, company="Co", application_link="https://co.com", status="Applied")
        with pytest.raises(ValidationError):
            JobCreate(title="x" * 101, company="Co", application_link="https://co.com", status="Applied")

    def test_company_length_bounded(self):
        with pytest.raises(ValidationError):
            JobCreate(title="Dev", company="c" * 101, application_link="https://co.com", status="Applied")

    def test_bad_link_rejected(self):
        with pytest.raises(ValidationError, match="valid URL"):
            JobCreate(title="Dev", company="Co", application_link="co.com", status="Applied")


class TestJobUpdate:
    def test_all_fields_optional(self):
        update = JobUpdate()
        assert update.model_dump(exclude_unset=True) == {}

    def test_only_set_fields_dumped(self):
        update = JobUpdate.model_validate({"status": "Interviewing"})
        assert update.model_dump(exclude_unset=True) == {"status": JobStatus.INTERVIEWING}

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            JobUpdate(title="")

    def test_bad_link_rejected(self):
        with pytest.raises(ValidationError):
            JobUpdate.model_validate({"applicationLink": "nope"})


class TestSerialization:
    def test_job_dumps_camel_case(self):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        job = Job(
            id="abc", title="Dev", company="Co", application_link="https://co.com",
            status=JobStatus.APPLIED, created_at=now, updated_at=now,
        )
        data = job.model_dump(mode="json", by_alias=True)
        assert data["applicationLink"] == "https://co.com"
        assert data["status"] == "Applied"
        assert data["createdAt"].startswith("2024-01-01T00:00:00")
        assert "updatedAt" in data

    def test_analysis_dumps_key_skills(self):
        analysis = JobAnalysis(summary="S", key_skills=["a", "b", "c"])
        assert analysis.model_dump(by_alias=True) == {"summary": "S", "keySkills": ["a", "b", "c"]}


class TestAnalyzeRequest:
    def test_minimum_length(self):
        AnalyzeRequest(job_description="0123456789")
        with pytest.raises(ValidationError):
            AnalyzeRequest(job_description="too short")

    def test_accepts_camel_case(self):
        request = AnalyzeRequest.model_validate({"jobDescription": "A long enough description"})
        assert request.job_description == "A long enough description"

    def test_long_description_accepted(self):
        request = AnalyzeRequest(job_description="Responsibilities include " * 5000)
        assert len(request.job_description) > 100000
