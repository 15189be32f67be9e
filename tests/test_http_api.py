from __future__ import annotations

import io

from src.student_attendance.student_attendance.attendance.events import ATTENDANCE_UPDATED
from src.student_attendance.student_attendance.core.exceptions import StoreError
from src.student_attendance.student_attendance.database.firestore_base import store_call


def _mark(client, **fields):
    payload = {"RegNo": "A1", "Date": "2024-03-05", "Status": "Present"}
    payload.update(fields)
    return client.post("/attendance", json=payload)


def test_health(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert b"running" in resp.data


def test_student_crud_roundtrip(client, uploader):
    resp = client.post(
        "/students",
        data={"RegNo": "A1", "Name": "Ann", "Department": "CS", "photo": (io.BytesIO(b"img"), "ann.jpg")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["message"] == "Student added"
    student_id = body["id"]

    listed = client.get("/students").get_json()
    assert listed[0]["id"] == student_id
    assert listed[0]["photo"] == uploader.url

    found = client.get("/students/search?q=ann").get_json()
    assert [s["RegNo"] for s in found] == ["A1"]
    assert client.get("/students/search").get_json() == []

    resp = client.put(f"/students/{student_id}", data={"Department": "EE"})
    assert resp.get_json() == {"message": "Student updated"}
    assert client.get("/students").get_json()[0]["Department"] == "EE"

    resp = client.delete(f"/students/{student_id}")
    assert resp.get_json() == {"message": "Student deleted"}
    assert client.get("/students").get_json() == []


def test_unknown_student_is_404(client):
    resp = client.delete("/students/missing")

    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_mark_attendance_publishes_update(client, publisher, attendance_repo):
    resp = _mark(client)

    assert resp.status_code == 200
    assert resp.get_json() == {"id": "_20240305_A1", "message": "Attendance recorded"}
    assert publisher.events == [ATTENDANCE_UPDATED]
    assert attendance_repo.raw("_20240305_A1")["Status"] == "Present"


def test_mark_attendance_missing_fields_is_400_without_broadcast(client, publisher, attendance_repo):
    resp = client.post("/attendance", json={"RegNo": "A1", "Date": "2024-03-05"})

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "RegNo, Date, Status required"}
    assert publisher.events == []
    assert len(attendance_repo) == 0


def test_update_attendance(client, publisher):
    _mark(client)

    resp = client.put("/attendance/_20240305_A1", json={"Status": "Absent", "Reason": "Sick"})
    missing = client.put("/attendance/_20240305_ZZ", json={"Status": "Absent"})

    assert resp.get_json() == {"message": "Attendance updated"}
    assert missing.status_code == 404
    assert publisher.events == [ATTENDANCE_UPDATED, ATTENDANCE_UPDATED]


def test_history_and_csv_export(client):
    _mark(client, Date="2024-03-04", TimeIn="08:00", TimeOut="15:00")
    _mark(client, Date="2024-03-05", Status="Absent", Reason="Sick")
    _mark(client, RegNo="B2")

    history = client.get("/attendance/history/A1").get_json()
    assert [h["Date"] for h in history] == ["2024-03-04", "2024-03-05"]
    assert history[0]["id"] == "_20240304_A1"

    ranged = client.get("/attendance/history/A1?start=2024-03-05&end=2024-03-05").get_json()
    assert [h["Status"] for h in ranged] == ["Absent"]

    resp = client.get("/attendance/history/A1/export")
    assert resp.mimetype == "text/csv"
    assert "attendance_A1.csv" in resp.headers["Content-Disposition"]
    lines = resp.data.decode("utf-8-sig").splitlines()
    assert lines[0] == "Date,Status,Reason,TimeIn,TimeOut,Location"
    assert lines[1] == "2024-03-04,Present,,08:00,15:00,"


def test_bad_date_range_is_400(client):
    resp = client.get("/attendance/overall?start=2024-99-01&end=2024-03-01")

    assert resp.status_code == 400


def test_reports(client, monkeypatch, fixed_now):
    monkeypatch.setattr(
        "src.student_attendance.student_attendance.reports.service.now_local", lambda: fixed_now
    )
    client.post("/students", data={"RegNo": "A1", "Name": "Ann", "Department": "CS"})
    client.post("/students", data={"RegNo": "B2", "Name": "Ben", "Department": "EE"})
    _mark(client, TimeIn="08:00", TimeOut="16:00", Location="Main")
    _mark(client, RegNo="B2", Status="Absent", Reason="Sick")

    summary = client.get("/attendance/summary").get_json()
    overall = client.get("/attendance/overall").get_json()
    ranking = client.get("/attendance/topbottom").get_json()
    locations = client.get("/attendance/locations").get_json()

    assert summary == {"totalStudents": 2, "present": 1, "absent": 1, "absentWithReasons": {"Sick": 1}}
    assert overall["attendanceRate"] == "50.00"
    assert overall["averageArrivalTime"] == "08:00:00"
    assert overall["averageHoursAttended"] == "8.00"
    assert overall["attendanceByDept"] == {"CS": "100.00", "EE": "0.00"}
    assert [s["RegNo"] for s in ranking["top5"]] == ["A1", "B2"]
    assert [s["RegNo"] for s in ranking["bottom5"]] == ["B2", "A1"]
    assert locations == {"Main": 1, "Unknown": 1}


def test_store_failure_is_500_with_message(client, attendance_repo, monkeypatch):
    def boom():
        raise StoreError("deadline exceeded")

    monkeypatch.setattr(attendance_repo, "list_all", boom)

    resp = client.get("/attendance/locations")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "deadline exceeded"}


def test_csv_export_quotes_awkward_filenames(client):
    resp = client.get("/attendance/history/A%201;x/export")

    assert resp.status_code == 200
    assert 'filename="attendance_A 1;x.csv"' in resp.headers["Content-Disposition"]


def test_driver_failure_surfaces_as_500_with_its_message(client, attendance_repo, monkeypatch):
    def boom():
        with store_call("list attendance"):
            raise RuntimeError("503 connection reset")

    monkeypatch.setattr(attendance_repo, "list_all", boom)

    resp = client.get("/attendance/overall")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "503 connection reset"}
