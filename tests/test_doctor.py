from __future__ import annotations

from hindi_transliterator.doctor import collect_doctor_info


def test_doctor_reports_packages_and_data() -> None:
    info = collect_doctor_info()
    assert info["packages"]["regex"]["installed"] is True  # type: ignore[index]

    data = info["data"]
    assert isinstance(data, dict)
    assert data["dictionary_entries"] > 300
    assert data["tables"]["nasalization"] == 10
    keys = {c["key"] for c in data["conflicts"]}
    assert {"bharat", "behind", "gy", "ny", "nn"} <= keys
    assert "sharmaा" in data["invalid_keys"]
