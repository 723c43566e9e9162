from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime


class JobBase(BaseModel):
    job_title: str = Field(alias="jobTitle")
    company_name: str = Field(alias="companyName")
    location: str
    job_type: str = Field(alias="jobType")
    description: Optional[str] = None
    experience: Optional[str] = None
    application_deadline: Optional[date] = Field(default=None, alias="applicationDeadline")


class JobIn(JobBase):
    """Body accepted by create and update; salaries are named minSalary/maxSalary here."""

    min_salary: Optional[int] = Field(default=None, alias="minSalary")
    max_salary: Optional[int] = Field(default=None, alias="maxSalary")

    def to_columns(self) -> dict:
        return {
            "job_title": self.job_title,
            "company_name": self.company_name,
            "location": self.location,
            "job_type": self.job_type,
            "salary_min": self.min_salary,
            "salary_max": self.max_salary,
            "description": self.description,
            "experience": self.experience,
            "application_deadline": self.application_deadline,
        }


class Job(JobBase):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    salary_min: Optional[int] = Field(default=None, alias="salaryMin")
    salary_max: Optional[int] = Field(default=None, alias="salaryMax")
    created_at: datetime = Field(alias="createdAt")


class JobDeleted(BaseModel):
    message: str = "Job deleted successfully"


class ErrorResponse(BaseModel):
    error: str


class Health(BaseModel):
    status: str = "OK"
    message: str = "Server is running"
