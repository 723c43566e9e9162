from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobs_api.database import get_db
from jobs_api.outcomes import Ok, to_response
from jobs_api.repository import JobRepository
from jobs_api.schemas import ErrorResponse, Job, JobDeleted, JobIn

router = APIRouter()

ERRORS = {404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def get_repository(db: Session = Depends(get_db)) -> JobRepository:
    return JobRepository(db)


def _as_schema(outcome):
    if isinstance(outcome, Ok):
        value = outcome.value
        if isinstance(value, list):
            return Ok([Job.model_validate(job) for job in value])
        return Ok(Job.model_validate(value))
    return outcome


@router.get("/jobs", response_model=List[Job], responses=ERRORS)
def list_jobs(repo: JobRepository = Depends(get_repository)):
    """Get all jobs, newest first."""
    return to_response(_as_schema(repo.list_jobs()))


@router.get("/jobs/{job_id}", response_model=Job, responses=ERRORS)
def get_job(job_id: int, repo: JobRepository = Depends(get_repository)):
    """Get single job."""
    return to_response(_as_schema(repo.get_job(job_id)))


@router.post("/jobs", response_model=Job, status_code=201, responses=ERRORS)
def create_job(job: JobIn, repo: JobRepository = Depends(get_repository)):
    return to_response(_as_schema(repo.create_job(job.to_columns())), status_code=201)


@router.put("/jobs/{job_id}", response_model=Job, responses=ERRORS)
def update_job(job_id: int, job: JobIn, repo: JobRepository = Depends(get_repository)):
    """Replace every mutable field of a job."""
    return to_response(_as_schema(repo.update_job(job_id, job.to_columns())))


@router.delete("/jobs/{job_id}", response_model=JobDeleted, responses=ERRORS)
def delete_job(job_id: int, repo: JobRepository = Depends(get_repository)):
    outcome = repo.delete_job(job_id)
    if isinstance(outcome, Ok):
        outcome = Ok(JobDeleted())
    return to_response(outcome)
