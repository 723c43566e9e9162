import logging
from typing import Any

from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobs_api.models import Job
from jobs_api.outcomes import NotFound, Ok, Outcome, StorageError

logger = logging.getLogger(__name__)


def _columns(fields: dict[str, Any]) -> dict:
    return {getattr(Job, key): value for key, value in fields.items()}


class JobRepository:
    """Data access for job postings; every method issues exactly one statement."""

    def __init__(self, db_session: Session):
        self.db_session = db_session

    def _failed(self, action: str, error: SQLAlchemyError) -> StorageError:
        self.db_session.rollback()
        logger.error(f"Error {action}: {error}", exc_info=True)
        return StorageError(error)

    def list_jobs(self) -> Outcome:
        stmt = select(Job).order_by(desc(Job.created_at), desc(Job.id))
        try:
            jobs = self.db_session.scalars(stmt).all()
        except SQLAlchemyError as e:
            return self._failed("listing jobs", e)
        return Ok(list(jobs))

    def get_job(self, job_id: int) -> Outcome:
        try:
            job = self.db_session.scalars(select(Job).where(Job.id == job_id)).first()
        except SQLAlchemyError as e:
            return self._failed(f"fetching job {job_id}", e)
        if job is None:
            return NotFound()
        return Ok(job)

    def create_job(self, fields: dict[str, Any]) -> Outcome:
        """
        Insert a posting; id and createdAt are assigned by the database.

        Args:
            fields: The nine mutable columns keyed by attribute name

        Returns:
            Ok with the stored row, or StorageError if the database rejects it
        """
        stmt = insert(Job).values(_columns(fields)).returning(Job)
        try:
            job = self.db_session.scalars(stmt).one()
            self.db_session.commit()
        except SQLAlchemyError as e:
            return self._failed("creating job", e)
        logger.info(f"Inserted job {job.id}: {job.job_title}")
        return Ok(job)

    def update_job(self, job_id: int, fields: dict[str, Any]) -> Outcome:
        stmt = (
            update(Job)
            .where(Job.id == job_id)
            .values(_columns(fields))
            .returning(Job)
        )
        try:
            job = self.db_session.scalars(stmt).first()
            self.db_session.commit()
        except SQLAlchemyError as e:
            return self._failed(f"updating job {job_id}", e)
        if job is None:
            return NotFound()
        logger.info(f"Updated job {job_id}")
        return Ok(job)

    def delete_job(self, job_id: int) -> Outcome:
        stmt = delete(Job).where(Job.id == job_id).returning(Job.id)
        try:
            deleted_id = self.db_session.scalars(stmt).first()
            self.db_session.commit()
        except SQLAlchemyError as e:
            return self._failed(f"deleting job {job_id}", e)
        if deleted_id is None:
            return NotFound()
        logger.info(f"Deleted job {job_id}")
        return Ok(deleted_id)
