from __future__ import annotations


def _create_job(client, company="Acme"):
    res = client.post("/api/v1/jobs", json={"company": company, "position": "Engineer"})
    assert res.status_code == 201
    return res.json()["job"]


def test_user_cannot_touch_another_users_job(users, client_for):
    token_a, token_b = users

    with client_for(token_a) as c_a:
        job = _create_job(c_a)

    with client_for(token_b) as c_b:
        res_get = c_b.get(f"/api/v1/jobs/{job['id']}")
        res_patch = c_b.patch(f"/api/v1/jobs/{job['id']}", json={"status": "declined"})
        res_delete = c_b.delete(f"/api/v1/jobs/{job['id']}")

        for res in (res_get, res_patch, res_delete):
            assert res.status_code == 404
            assert res.json() == {"msg": f"No job with id {job['id']}"}
            assert "Acme" not in res.text

    # A's job is untouched
    with client_for(token_a) as c_a:
        res = c_a.get(f"/api/v1/jobs/{job['id']}")
        assert res.status_code == 200
        assert res.json()["job"]["status"] == "pending"


def test_foreign_job_looks_exactly_like_a_missing_one(users, client_for):
    token_a, token_b = users
    with client_for(token_a) as c_a:
        job = _create_job(c_a)

    with client_for(token_b) as c_b:
        foreign = c_b.get(f"/api/v1/jobs/{job['id']}")
        missing = c_b.get("/api/v1/jobs/" + "0" * 32)

    assert foreign.status_code == missing.status_code == 404
    assert set(foreign.json()) == set(missing.json()) == {"msg"}


def test_list_only_returns_callers_jobs(users, client_for):
    token_a, token_b = users

    with client_for(token_a) as c_a:
        a1 = _create_job(c_a, "A1")
    with client_for(token_b) as c_b:
        _create_job(c_b, "B1")
    with client_for(token_a) as c_a:
        a2 = _create_job(c_a, "A2")
        body = c_a.get("/api/v1/jobs").json()

    assert body["count"] == 2
    assert [j["id"] for j in body["jobs"]] == [a1["id"], a2["id"]]
    assert {j["created_by"] for j in body["jobs"]} == {a1["created_by"]}
