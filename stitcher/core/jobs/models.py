import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, Enum as SQLEnum, JSON
from stitcher.core.database.base import Base
from stitcher.core.common.enums import Direction, JobStatus, FailureReason

def utc_now():
    return datetime.now(timezone.utc)

def new_id() -> str:
    return str(uuid.uuid4())

class StitchJobModel(Base):
    __tablename__ = "stitch_jobs"

    id = Column(String(36), primary_key=True, default=new_id)

    label = Column(String, nullable=False)
    directory = Column(String, nullable=True)  # NULL for explicit-file jobs
    input_files = Column(JSON, default=list)
    direction = Column(SQLEnum(Direction), nullable=False)

    status = Column(SQLEnum(JobStatus), default=JobStatus.PENDING, nullable=False)
    failure_reason = Column(SQLEnum(FailureReason), nullable=True)
    output_path = Column(String, nullable=True)
    error_message = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utc_now)
    started_at = Column(DateTime(timezone=True), nullable=True)
    finished_at = Column(DateTime(timezone=True), nullable=True)
