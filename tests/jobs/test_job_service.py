from datetime import date, datetime

import pytest

from src.shop_attendance.shop_attendance.attendance.service import AttendanceService
from src.shop_attendance.shop_attendance.core.exceptions import ValidationError
from src.shop_attendance.shop_attendance.jobs.service import JobService


@pytest.fixture
def svc(jobs_repo, attendance_repo, clock):
    return JobService(jobs_repo, attendance_repo, clock=clock)


def test_job_before_check_in_has_no_attendance_link(svc, jobs_repo):
    job_id = svc.record_job(1, plate="abc-123", job_type="Oil change", description="5W-30")

    job = jobs_repo.jobs[0]
    assert job.job_id == job_id
    assert job.attendance_id is None
    assert job.plate == "ABC-123"
    assert job.work_date == date(2026, 2, 2)


def test_job_links_the_days_attendance(svc, jobs_repo, attendance_repo, clock):
    AttendanceService(attendance_repo, clock=clock).check_in(1, photo_ref="/uploads/in.jpg")
    svc.record_job(1, plate="XYZ789", job_type="Brakes")

    record = attendance_repo.get_for_user_and_date(1, date(2026, 2, 2))
    assert jobs_repo.jobs[0].attendance_id == record.attendance_id
    assert jobs_repo.jobs[0].description == ""


def test_job_after_check_out_still_allowed(svc, jobs_repo, attendance_repo, clock):
    att = AttendanceService(attendance_repo, clock=clock)
    att.check_in(1, photo_ref="/uploads/in.jpg", now=datetime(2026, 2, 2, 8, 0))
    att.check_out(1, photo_ref="/uploads/out.jpg", now=datetime(2026, 2, 2, 17, 0))

    svc.record_job(1, plate="P1", job_type="Alignment", now=datetime(2026, 2, 2, 17, 30))
    assert len(jobs_repo.jobs) == 1


@pytest.mark.parametrize("plate,job_type", [("", "Brakes"), ("ABC", "  "), (None, "Brakes")])
def test_plate_and_job_type_are_required(svc, jobs_repo, plate, job_type):
    with pytest.raises(ValidationError):
        svc.record_job(1, plate=plate, job_type=job_type)
    assert jobs_repo.jobs == []


def test_list_for_day_is_newest_first(svc):
    svc.record_job(1, plate="A1", job_type="Tires")
    svc.record_job(1, plate="B2", job_type="Battery")
    svc.record_job(2, plate="C3", job_type="Battery")

    plates = [j.plate for j in svc.list_for_day(1, date(2026, 2, 2))]
    assert plates == ["B2", "A1"]
