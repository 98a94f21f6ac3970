"""
JobTracker - Pydantic schemas for request/response validation.

Defines the job record, its create/update payloads and the AI analysis
shapes. JSON field names are camelCase (applicationLink, createdAt,
keySkills); Python attributes stay snake_case and both are accepted
on input.
"""
from pydantic import AnyUrl, BaseModel, Field, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Dict, Optional, List
from enum import Enum


# --- Enums for validated fields ---

class JobStatus(str, Enum):
    APPLIED = "Applied"
    INTERVIEWING = "Interviewing"
    REJECTED = "Rejected"
    OFFER = "Offer"


# --- Helper validators ---

ALLOWED_URL_SCHEMES = ("http", "https", "ftp")

_url_adapter = TypeAdapter(AnyUrl)


def validate_url(url: Optional[str]) -> Optional[str]:
    """Validate URL format; None passes through for partial updates."""
    if url is None:
        return None
    if url != url.strip():
        raise ValueError('Please enter a valid URL')
    try:
        parsed = _url_adapter.validate_python(url)
    except ValidationError:
        raise ValueError('Please enter a valid URL')
    if parsed.scheme not in ALLOWED_URL_SCHEMES or not parsed.host:
        raise ValueError('Please enter a valid URL')
    return url


class CamelModel(BaseModel):
    """Base model serializing to camelCase JSON."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


# --- Job Schemas ---

class JobBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=100)
    company: str = Field(..., min_length=1, max_length=100)
    application_link: str
    status: JobStatus

    @field_validator('application_link')
    @classmethod
    def validate_application_link(cls, v):
        return validate_url(v)


class JobCreate(JobBase):
    pass


class JobUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    company: Optional[str] = Field(None, min_length=1, max_length=100)
    application_link: Optional[str] = None
    status: Optional[JobStatus] = None

    @field_validator('application_link')
    @classmethod
    def validate_application_link(cls, v):
        return validate_url(v)


class Job(JobBase):
    """A stored job record."""
    id: str
    created_at: datetime
    updated_at: datetime


class JobStats(CamelModel):
    total: int
    by_status: Dict[str, int]


# --- AI Analysis Schemas ---

class AnalyzeRequest(CamelModel):
    job_description: str = Field(..., min_length=10)


class JobAnalysis(CamelModel):
    summary: str
    key_skills: List[str]
