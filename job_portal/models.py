import enum
import uuid

from sqlalchemy import Column, Integer, BigInteger, String, DateTime, Date, Text, Enum, Uuid
from .db import Base


class JobType(str, enum.Enum):
    FullTime = "FullTime"
    PartTime = "PartTime"
    Contract = "Contract"
    Internship = "Internship"


class Job(Base):
    __tablename__ = "jobs"
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(300), nullable=False, index=True)
    company_name = Column(String(300), nullable=False, index=True)
    location = Column(String(300), nullable=False, index=True)
    job_type = Column(Enum(JobType, name="job_type"), nullable=False, index=True)
    min_salary = Column(BigInteger, nullable=True, index=True)
    max_salary = Column(BigInteger, nullable=True)
    description = Column(Text, nullable=False)
    requirements = Column(Text, nullable=True)
    responsibilities = Column(Text, nullable=True)
    application_deadline = Column(Date, nullable=True)
    # integer so the experience sort orders numerically; rendered as text in responses
    experience_years = Column(Integer, nullable=False, default=0, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)
