"""API tests for users, categories, jobs, applications and skills under the authorization gate."""

import unittest
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from app.models import JobApplication, JobPosting, UserSkill
from tests.support import ApiTestCase


class TestUsers(ApiTestCase):
    def test_admin_lists_users(self) -> None:
        _, admin = self.account("admin")
        self.account("vendor")
        resp = self.client.get("/api/users", headers=self.bearer(admin))
        self.assertEqual(resp.status_code, 200)
        users = resp.json()["users"]
        self.assertEqual([u["role"] for u in users], ["admin", "vendor"])
        self.assertEqual(users[1]["role_specific_data"], "Acme Corp")
        self.assertNotIn("password_hash", resp.text)

    def test_non_admin_cannot_list_users(self) -> None:
        _, seeker = self.account("job_seeker")
        self.assertEqual(self.client.get("/api/users", headers=self.bearer(seeker)).status_code, 403)
        self.assertEqual(self.client.get("/api/users").status_code, 401)

    def test_owner_reads_own_profile_but_not_others(self) -> None:
        seeker_id, seeker = self.account("job_seeker")
        vendor_id, _ = self.account("vendor")
        own = self.client.get(f"/api/users/{seeker_id}", headers=self.bearer(seeker))
        self.assertEqual(own.status_code, 200)
        self.assertEqual(own.json()["user"]["email"], "job_seeker@example.com")
        other = self.client.get(f"/api/users/{vendor_id}", headers=self.bearer(seeker))
        self.assertEqual(other.status_code, 403)

    def test_admin_reads_any_profile_and_missing_is_404(self) -> None:
        _, admin = self.account("admin")
        vendor_id, _ = self.account("vendor")
        resp = self.client.get(f"/api/users/{vendor_id}", headers=self.bearer(admin))
        self.assertEqual(resp.json()["user"]["role_specific_data"], "Acme Corp")
        missing = self.client.get("/api/users/999", headers=self.bearer(admin))
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.json(), {"message": "User not found", "success": False})

    def test_unhandled_database_error_is_logged_500(self) -> None:
        _, admin = self.account("admin")
        failure = OperationalError("SELECT users", {}, Exception("connection lost"))
        with patch("app.api.routes.users.list_user_details", side_effect=failure):
            with self.assertLogs("app.core.exceptions", "ERROR") as logs:
                resp = self.client.get("/api/users", headers=self.bearer(admin))
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"message": "Internal server error", "success": False})
        self.assertIn("GET /api/users", logs.output[0])


class TestCategoriesAndJobs(ApiTestCase):
    def _category(self, admin: str, name: str = "Engineering") -> int:
        resp = self.client.post(
            "/api/categories", json={"name": name}, headers=self.bearer(admin)
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["id"]

    def test_only_admin_creates_categories(self) -> None:
        _, vendor = self.account("vendor")
        resp = self.client.post("/api/categories", json={"name": "X"}, headers=self.bearer(vendor))
        self.assertEqual(resp.status_code, 403)
        _, admin = self.account("admin")
        self._category(admin)
        names = [c["name"] for c in self.client.get("/api/categories").json()["categories"]]
        self.assertEqual(names, ["Engineering"])

    def test_names_are_stripped_and_blank_names_rejected(self) -> None:
        _, admin = self.account("admin")
        blank = self.client.post("/api/categories", json={"name": "  "}, headers=self.bearer(admin))
        self.assertEqual(blank.status_code, 400)
        self._category(admin, name="  Design  ")
        names = [c["name"] for c in self.client.get("/api/categories").json()["categories"]]
        self.assertEqual(names, ["Design"])

    def test_vendor_posts_job_listed_with_names(self) -> None:
        _, admin = self.account("admin")
        category_id = self._category(admin)
        vendor_id, vendor = self.account("vendor", name="Vera Vendor")
        resp = self.client.post(
            "/api/jobs",
            json={
                "title": "Backend Engineer",
                "description": "Build APIs",
                "category_id": category_id,
                "location": "Remote",
                "salary_min": 50000,
                "salary_max": 70000,
            },
            headers=self.bearer(vendor),
        )
        self.assertEqual(resp.status_code, 201, resp.text)

        jobs = self.client.get("/api/jobs").json()["jobs"]
        self.assertEqual(len(jobs), 1)
        self.assertEqual(jobs[0]["vendor_id"], vendor_id)
        self.assertEqual(jobs[0]["vendor_name"], "Vera Vendor")
        self.assertEqual(jobs[0]["category_name"], "Engineering")
        self.assertEqual(jobs[0]["status"], "active")

    def test_job_rules(self) -> None:
        _, seeker = self.account("job_seeker")
        _, vendor = self.account("vendor")
        body = {"title": "T", "description": "D"}
        self.assertEqual(
            self.client.post("/api/jobs", json=body, headers=self.bearer(seeker)).status_code, 403
        )
        bad_salary = {**body, "salary_min": 10, "salary_max": 5}
        self.assertEqual(
            self.client.post("/api/jobs", json=bad_salary, headers=self.bearer(vendor)).status_code,
            400,
        )
        no_category = {**body, "category_id": 404}
        self.assertEqual(
            self.client.post("/api/jobs", json=no_category, headers=self.bearer(vendor)).status_code,
            404,
        )
        blank_title = {**body, "title": "   "}
        self.assertEqual(
            self.client.post("/api/jobs", json=blank_title, headers=self.bearer(vendor)).status_code,
            400,
        )
        self.assertEqual(self.count(JobPosting), 0)


class TestApplications(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.vendor_id, self.vendor = self.account("vendor")
        self.seeker_id, self.seeker = self.account("job_seeker", name="Sam Seeker")
        resp = self.client.post(
            "/api/jobs",
            json={"title": "Data Analyst", "description": "SQL"},
            headers=self.bearer(self.vendor),
        )
        self.job_id = resp.json()["id"]

    def _apply(self, token: str, job_id: int | None = None):
        return self.client.post(
            "/api/applications",
            json={"job_id": job_id or self.job_id},
            headers=self.bearer(token),
        )

    def test_job_seeker_applies_and_reads_own_applications(self) -> None:
        self.assertEqual(self._apply(self.seeker).status_code, 201)
        resp = self.client.get(
            f"/api/applications/jobseeker/{self.seeker_id}", headers=self.bearer(self.seeker)
        )
        self.assertEqual(resp.status_code, 200)
        apps = resp.json()["applications"]
        self.assertEqual(len(apps), 1)
        self.assertEqual(apps[0]["job_title"], "Data Analyst")
        self.assertEqual(apps[0]["company_name"], "Acme Corp")
        self.assertEqual(apps[0]["status"], "pending")

    def test_only_job_seekers_apply_and_job_must_exist(self) -> None:
        self.assertEqual(self._apply(self.vendor).status_code, 403)
        self.assertEqual(self._apply(self.seeker, job_id=999).status_code, 404)
        self.assertEqual(self.count(JobApplication), 0)

    def test_posting_owner_sees_applicants(self) -> None:
        self._apply(self.seeker)
        resp = self.client.get(
            f"/api/applications/job/{self.job_id}", headers=self.bearer(self.vendor)
        )
        self.assertEqual(resp.status_code, 200)
        applicant = resp.json()["applications"][0]
        self.assertEqual(applicant["applicant_name"], "Sam Seeker")
        self.assertEqual(applicant["job_seeker_id"], self.seeker_id)

    def test_other_vendor_and_other_seeker_are_forbidden(self) -> None:
        self._apply(self.seeker)
        _, other_vendor = self.account("vendor", email="other@example.com")
        resp = self.client.get(
            f"/api/applications/job/{self.job_id}", headers=self.bearer(other_vendor)
        )
        self.assertEqual(resp.status_code, 403)
        _, other_seeker = self.account("job_seeker", email="s2@example.com")
        resp = self.client.get(
            f"/api/applications/jobseeker/{self.seeker_id}", headers=self.bearer(other_seeker)
        )
        self.assertEqual(resp.status_code, 403)

    def test_admin_sees_applicants_and_unknown_job_is_404(self) -> None:
        _, admin = self.account("admin")
        ok = self.client.get(f"/api/applications/job/{self.job_id}", headers=self.bearer(admin))
        self.assertEqual(ok.status_code, 200)
        missing = self.client.get("/api/applications/job/999", headers=self.bearer(admin))
        self.assertEqual(missing.status_code, 404)


class TestSkills(ApiTestCase):
    def test_skill_catalogue_and_duplicates(self) -> None:
        self.assertEqual(self.client.post("/api/skills", json={"skill_name": "SQL"}).status_code, 401)
        _, token = self.account("job_seeker")
        first = self.client.post("/api/skills", json={"skill_name": "SQL"}, headers=self.bearer(token))
        self.assertEqual(first.status_code, 201)
        again = self.client.post("/api/skills", json={"skill_name": "SQL"}, headers=self.bearer(token))
        self.assertEqual(again.status_code, 400)
        padded = self.client.post(
            "/api/skills", json={"skill_name": " SQL "}, headers=self.bearer(token)
        )
        self.assertEqual(padded.json()["message"], "Skill already exists")
        blank = self.client.post("/api/skills", json={"skill_name": "\t"}, headers=self.bearer(token))
        self.assertEqual(blank.status_code, 400)
        skills = self.client.get("/api/skills").json()["skills"]
        self.assertEqual([s["skill_name"] for s in skills], ["SQL"])

    def test_user_skills(self) -> None:
        user_id, token = self.account("job_seeker")
        skill_id = self.client.post(
            "/api/skills", json={"skill_name": "Python"}, headers=self.bearer(token)
        ).json()["id"]
        body = {"skill_id": skill_id, "proficiency_level": "Advanced"}
        added = self.client.post("/api/user-skills", json=body, headers=self.bearer(token))
        self.assertEqual(added.status_code, 201)
        dup = self.client.post("/api/user-skills", json=body, headers=self.bearer(token))
        self.assertEqual(dup.status_code, 400)
        self.assertEqual(self.count(UserSkill), 1)

        listed = self.client.get(f"/api/user-skills/{user_id}", headers=self.bearer(token))
        self.assertEqual(listed.json()["user_skills"][0]["skill_name"], "Python")
        self.assertEqual(listed.json()["user_skills"][0]["proficiency_level"], "Advanced")

        missing = self.client.post(
            "/api/user-skills", json={"skill_id": 999}, headers=self.bearer(token)
        )
        self.assertEqual(missing.status_code, 404)
        bad_level = self.client.post(
            "/api/user-skills",
            json={"skill_id": skill_id, "proficiency_level": "Expert"},
            headers=self.bearer(token),
        )
        self.assertEqual(bad_level.status_code, 400)


class TestWelcomeAndHealth(ApiTestCase):
    def test_welcome(self) -> None:
        self.assertEqual(self.client.get("/api").json(), {"message": "Welcome to HireHive"})

    def test_health_reports_database(self) -> None:
        body = self.client.get("/api/health").json()
        self.assertEqual(body, {"status": "ok", "environment": "dev", "database": "connected"})


if __name__ == "__main__":
    unittest.main()
