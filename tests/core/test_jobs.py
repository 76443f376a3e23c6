import pytest

from stitcher.core.common.enums import Direction, JobStatus, FailureReason
from stitcher.core.jobs.domain.models import JobSubmission
from stitcher.core.jobs.service.manager import create_job_manager


@pytest.fixture
def submission():
    return JobSubmission(
        label="holiday",
        direction=Direction.HORIZONTAL,
        input_files=["/photos/holiday/1.png", "/photos/holiday/2.png"],
        directory="/photos/holiday"
    )


def test_job_submission_flow(job_manager, job_repo, submission):
    """
    Verifies that a job can be created and stored in the ledger.
    """
    job_id = job_manager.submit_job(submission)
    assert job_id is not None

    job = job_repo.get_job(job_id)
    assert job is not None
    assert job.label == "holiday"
    assert job.status == JobStatus.PENDING
    assert job.direction == Direction.HORIZONTAL
    assert job.input_files == ["/photos/holiday/1.png", "/photos/holiday/2.png"]
    assert job.started_at is None


def test_job_completes(job_manager, job_repo, submission):
    job_id = job_manager.submit_job(submission)

    job_manager.mark_running(job_id)
    assert job_repo.get_job(job_id).status == JobStatus.RUNNING

    job_manager.mark_completed(job_id, "/photos/holiday.png")

    job = job_repo.get_job(job_id)
    assert job.status == JobStatus.COMPLETED
    assert job.output_path == "/photos/holiday.png"
    assert job.started_at is not None
    assert job.finished_at is not None
    assert job.failure_reason is None


def test_job_fails_with_reason(job_manager, job_repo, submission):
    job_id = job_manager.submit_job(submission)
    job_manager.mark_running(job_id)
    job_manager.mark_failed(job_id, FailureReason.ERROR, "Could not read image 2.png")

    job = job_repo.get_job(job_id)
    assert job.status == JobStatus.FAILED
    assert job.failure_reason == FailureReason.ERROR
    assert "2.png" in job.error_message


def test_pending_job_can_be_cancelled(job_manager, job_repo, submission):
    job_id = job_manager.submit_job(submission)
    job_manager.mark_failed(job_id, FailureReason.CANCELLED, "cancelled before start")

    job = job_repo.get_job(job_id)
    assert job.status == JobStatus.FAILED
    assert job.failure_reason == FailureReason.CANCELLED


def test_terminal_states_are_final(job_manager, submission):
    """
    No retries: a COMPLETED or FAILED job never moves again.
    """
    done = job_manager.submit_job(submission)
    job_manager.mark_running(done)
    job_manager.mark_completed(done, "/out.png")

    with pytest.raises(ValueError):
        job_manager.mark_running(done)

    failed = job_manager.submit_job(submission)
    job_manager.mark_failed(failed, FailureReason.ERROR, "boom")

    with pytest.raises(ValueError):
        job_manager.mark_running(failed)


def test_pending_cannot_complete_directly(job_manager, submission):
    job_id = job_manager.submit_job(submission)
    with pytest.raises(ValueError):
        job_manager.mark_completed(job_id, "/out.png")


def test_unknown_job(job_manager):
    with pytest.raises(KeyError):
        job_manager.mark_running("does-not-exist")


def test_list_jobs_by_status(job_manager, job_repo, submission):
    first = job_manager.submit_job(submission)
    job_manager.submit_job(submission)
    job_manager.mark_running(first)

    assert len(job_repo.list_jobs()) == 2
    assert [j.id for j in job_repo.list_jobs(JobStatus.RUNNING)] == [first]
    assert len(job_repo.list_jobs(JobStatus.PENDING)) == 1


def test_create_job_manager_uses_its_own_database(submission):
    first = create_job_manager("sqlite://")
    second = create_job_manager("sqlite://")

    job_id = first.submit_job(submission)

    assert first.repo.get_job(job_id) is not None
    assert second.repo.get_job(job_id) is None
