from sqlalchemy import Column, Integer, String, Date, DateTime, Text
from sqlalchemy.sql import func
from jobs_api.database import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True)
    job_title = Column("jobTitle", String(255), nullable=False)
    company_name = Column("companyName", String(255), nullable=False)
    location = Column(String(255), nullable=False)
    job_type = Column("jobType", String(50), nullable=False)
    salary_min = Column("salaryMin", Integer, nullable=True)
    salary_max = Column("salaryMax", Integer, nullable=True)
    description = Column(Text, nullable=True)
    experience = Column(String(100), nullable=True)
    application_deadline = Column("applicationDeadline", Date, nullable=True)
    created_at = Column("createdAt", DateTime, server_default=func.now())
