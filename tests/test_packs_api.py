"""
End-to-end tests for the pack endpoints.
"""
import json
import unittest
from unittest.mock import patch

from core.pack_manager import PACKS_KEY, PackManager
from tests.fixtures import ApiTestCase, draft_payload


class TestPacksApi(ApiTestCase):

    def create(self, **overrides):
        response = self.client.post("/api/packs", json=draft_payload(**overrides))
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def test_list_starts_empty(self):
        response = self.client.get("/api/packs")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [])

    def test_create_pack(self):
        pack = self.create(timeLimit=5)

        self.assertTrue(pack["id"])
        self.assertEqual(pack["name"], "Capitals")
        self.assertEqual(pack["timeLimit"], 10)
        self.assertFalse(pack["isPublic"])
        self.assertEqual(pack["questions"][0]["correctAnswer"], 1)
        self.assertEqual(pack["questions"][0]["options"], ["Berlin", "Paris", "Madrid", "Rome"])

    def test_create_defaults(self):
        payload = draft_payload()
        del payload["timeLimit"]
        del payload["isPublic"]

        response = self.client.post("/api/packs", json=payload)

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["timeLimit"], 30)
        self.assertFalse(response.json()["isPublic"])

    def test_create_invalid_pack_is_400_and_not_stored(self):
        response = self.client.post("/api/packs", json=draft_payload(name="   "))

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Pack name is required"})
        self.assertIsNone(self.store.get_item(PACKS_KEY))

    def test_invalid_correct_answer_names_question(self):
        questions = draft_payload()["questions"] + [
            {"question": "Capital of Spain?", "options": ["Madrid", "Lisbon"], "correctAnswer": 2}
        ]
        response = self.client.post("/api/packs", json=draft_payload(questions=questions))

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Question 2 has invalid correct answer"})

    def test_overlong_name_is_shape_error(self):
        response = self.client.post("/api/packs", json=draft_payload(name="x" * 51))
        self.assertEqual(response.status_code, 422)

    def test_list_returns_summaries_in_order(self):
        first = self.create(name="First")
        second = self.create(name="Second", timeLimit=200)

        summaries = self.client.get("/api/packs").json()

        self.assertEqual([s["id"] for s in summaries], [first["id"], second["id"]])
        self.assertEqual(summaries[1]["timeLimit"], 120)
        self.assertEqual(summaries[0]["questionCount"], 1)
        self.assertNotIn("questions", summaries[0])

    def test_get_pack(self):
        pack = self.create()
        response = self.client.get(f"/api/packs/{pack['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), pack)

    def test_get_unknown_pack(self):
        response = self.client.get("/api/packs/missing")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Pack not found"})

    def test_update_preserves_id_and_position(self):
        first = self.create(name="First")
        self.create(name="Second")

        payload = draft_payload(name="First, edited", isPublic=True)
        payload["id"] = "client-supplied-id-is-ignored"
        response = self.client.put(f"/api/packs/{first['id']}", json=payload)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["id"], first["id"])
        self.assertTrue(response.json()["isPublic"])
        names = [s["name"] for s in self.client.get("/api/packs").json()]
        self.assertEqual(names, ["First, edited", "Second"])

    def test_update_unknown_pack(self):
        response = self.client.put("/api/packs/missing", json=draft_payload())
        self.assertEqual(response.status_code, 404)

    def test_update_with_invalid_draft_keeps_stored_pack(self):
        pack = self.create()

        response = self.client.put(
            f"/api/packs/{pack['id']}",
            json=draft_payload(questions=[])
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "At least one question is required"})
        self.assertEqual(self.client.get(f"/api/packs/{pack['id']}").json(), pack)

    def test_delete_pack(self):
        pack = self.create()

        response = self.client.delete(f"/api/packs/{pack['id']}")

        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.client.get(f"/api/packs/{pack['id']}").status_code, 404)
        self.assertEqual(self.client.get("/api/packs").json(), [])

    def test_delete_unknown_pack(self):
        response = self.client.delete("/api/packs/missing")
        self.assertEqual(response.status_code, 404)

    def test_hand_edited_collection_does_not_break_endpoints(self):
        record = draft_payload()
        record["id"] = "x"
        record["timeLimit"] = [1]
        self.store.set_item(PACKS_KEY, json.dumps([record]))

        listed = self.client.get("/api/packs")
        self.assertEqual(listed.status_code, 200)
        self.assertEqual(listed.json(), [])

        missing = self.client.get("/api/packs/x")
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.json(), {"error": "Pack not found"})

        created = self.client.post("/api/packs", json=draft_payload())
        self.assertEqual(created.status_code, 201)
        self.assertEqual(len(self.client.get("/api/packs").json()), 1)

    def test_storage_fault_on_list_uses_error_body(self):
        with patch.object(PackManager, "list_packs", side_effect=OSError("unreadable")):
            response = self.client.get("/api/packs")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Internal server error"})


if __name__ == "__main__":
    unittest.main()
