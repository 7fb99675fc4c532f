"""
tests/test_password_routes.py
=============================
HTTP tests for the password policy routes.
"""
import pytest

from passgauge.models.policy import DEFAULT_PASSWORD_POLICY

STRONG = "Tr0ub4dor&3xyz9Q"


class TestPolicyRoute:

    def test_returns_policy(self, client):
        response = client.get("/api/v1/auth/password-policy")
        assert response.status_code == 200
        assert response.json() == {"policy": DEFAULT_PASSWORD_POLICY.model_dump()}


class TestStrengthRoute:

    def test_strong_password(self, client):
        response = client.post("/api/v1/auth/password-strength", json={"password": STRONG})
        assert response.status_code == 200
        body = response.json()
        assert body["report"]["score"] == 4
        assert set(body["report"]) == {"score", "entropyBits", "crackTimeSeconds", "checks"}
        assert all(body["report"]["checks"].values())
        assert body["crack_time_display"] == "3833478y"
        assert body["meets_policy"] is True
        assert body["errors"] == []

    def test_weak_password_is_advisory(self, client):
        response = client.post(
            "/api/v1/auth/password-strength",
            json={"password": "alice123rocks", "username": "alice123"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["report"]["checks"]["noIdentityContains"] is False
        assert body["meets_policy"] is False
        assert "Password must not contain username or email local-part" in body["errors"]

    def test_policy_override(self, client):
        response = client.post(
            "/api/v1/auth/password-strength",
            json={"password": "", "policy": {"min_length": 0, "min_strength_score": "bad"}},
        )
        assert response.status_code == 200
        report = response.json()["report"]
        assert report["score"] == 0
        assert report["entropyBits"] == 0
        assert report["checks"]["length"] is True
        assert response.json()["crack_time_display"] == "< 1s"

    def test_password_not_echoed(self, client):
        response = client.post("/api/v1/auth/password-strength", json={"password": STRONG})
        assert STRONG not in response.text

    def test_missing_password(self, client):
        response = client.post("/api/v1/auth/password-strength", json={})
        assert response.status_code == 422

    @pytest.mark.parametrize("path", ["/api/v1/auth/password-strength", "/api/v1/auth/password-check"])
    def test_identity_hint_limits_apply_to_both_requests(self, client, path):
        response = client.post(path, json={"password": STRONG, "username": "u" * 257})
        assert response.status_code == 422


class TestCheckRoute:

    def test_accepts_strong_password(self, client):
        response = client.post("/api/v1/auth/password-check", json={"password": STRONG})
        assert response.status_code == 200
        assert response.json() == {"message": "Password meets security requirements", "success": True}

    def test_rejects_weak_password(self, client):
        response = client.post("/api/v1/auth/password-check", json={"password": "aaaaaaaaaa"})
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["message"] == "Password does not meet security requirements"
        assert "Password contains repeated character runs" in detail["errors"]


class TestServiceRoutes:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_api_root_lists_endpoints(self, client):
        response = client.get("/api/")
        assert response.status_code == 200
        assert "/v1/auth/password-strength" in response.json()["endpoints"]
