"""
Integration tests for the gym programs API.

Tests program read and partial update with the fake program repository.
"""

import pytest

BASE = "/gym/programs"

NEW_BLOCKS = [
    {
        "name": "Peak",
        "order": 0,
        "weeks": [{"name": "Week 1", "order": 0}, {"name": "Week 2", "order": 1}],
    }
]


@pytest.mark.integration
class TestGetProgram:
    """Integration tests for GET /gym/programs/{id}."""

    def test_get_program(self, client_with_seeded_repo):
        response = client_with_seeded_repo.get(f"{BASE}/program-1")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "program-1"
        assert data["gym_id"] == "gym-1"
        assert len(data["blocks"]) == 2
        assert data["current_progress"]["started_at"] is None

    def test_missing_program_404(self, client_with_seeded_repo):
        assert client_with_seeded_repo.get(f"{BASE}/nope").status_code == 404

    def test_other_gym_404(self, client_with_seeded_repo):
        assert client_with_seeded_repo.get(f"{BASE}/program-other").status_code == 404


@pytest.mark.integration
class TestUpdateProgram:
    """Integration tests for PATCH /gym/programs/{id}."""

    def test_update_metadata(self, client_with_seeded_repo, seeded_program_repo):
        response = client_with_seeded_repo.patch(
            f"{BASE}/program-1", json={"name": "Renamed", "is_active": False}
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"
        assert response.json()["is_active"] is False
        assert seeded_program_repo.get("program-1").name == "Renamed"

    def test_replace_blocks_before_start(self, client_with_seeded_repo):
        response = client_with_seeded_repo.patch(f"{BASE}/program-1", json={"blocks": NEW_BLOCKS})

        assert response.status_code == 200
        assert [b["name"] for b in response.json()["blocks"]] == ["Peak"]

    def test_replace_blocks_after_start_rejected(self, client_with_seeded_repo, seeded_program_repo):
        client_with_seeded_repo.post(f"{BASE}/program-1/progress/start")
        before = seeded_program_repo.get("program-1")

        response = client_with_seeded_repo.patch(f"{BASE}/program-1", json={"blocks": NEW_BLOCKS})

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "PROGRAM_STRUCTURE_LOCKED"
        assert seeded_program_repo.get("program-1") == before

    def test_replace_blocks_after_reset(self, client_with_seeded_repo):
        client_with_seeded_repo.post(f"{BASE}/program-1/progress/start")
        client_with_seeded_repo.post(f"{BASE}/program-1/progress/reset")

        response = client_with_seeded_repo.patch(f"{BASE}/program-1", json={"blocks": NEW_BLOCKS})

        assert response.status_code == 200

    def test_rename_started_program_allowed(self, client_with_seeded_repo):
        client_with_seeded_repo.post(f"{BASE}/program-1/progress/start")

        response = client_with_seeded_repo.patch(f"{BASE}/program-1", json={"name": "Renamed"})

        assert response.status_code == 200
        assert response.json()["current_progress"]["started_at"] is not None

    def test_invalid_body_422(self, client_with_seeded_repo):
        response = client_with_seeded_repo.patch(f"{BASE}/program-1", json={"name": ""})
        assert response.status_code == 422

    def test_invalid_block_422(self, client_with_seeded_repo):
        response = client_with_seeded_repo.patch(
            f"{BASE}/program-1", json={"blocks": [{"name": "No order"}]}
        )
        assert response.status_code == 422

    def test_missing_program_404(self, client_with_seeded_repo):
        response = client_with_seeded_repo.patch(f"{BASE}/nope", json={"name": "X"})
        assert response.status_code == 404
