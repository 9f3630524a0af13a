import json

from django.test import TestCase
from django.urls import reverse

from compass.constants import Quadrant
from suggestions.models import PoliticianSuggestion, SuggestionVote
from suggestions.services import DuplicateVoteError, cast_vote, create_suggestion

# Block 16 is the free cell at (3, 7) in the authoritarian-right quadrant.
FREE_CELL = {"x": 3, "y": 7, "gridId": 16, "quadrant": "authoritarian-right"}


class SuggestionServiceTests(TestCase):
    def _create(self, user="browser-1"):
        return create_suggestion(
            name=" Gotabaya Rajapaksa ",
            quadrant=Quadrant.AUTHORITARIAN_RIGHT,
            x=3,
            y=7,
            grid_id=16,
            user_identifier=user,
        )

    def test_create_counts_the_suggesters_vote(self):
        suggestion = self._create()
        self.assertEqual(suggestion.name, "Gotabaya Rajapaksa")
        self.assertEqual(suggestion.votes, 1)
        self.assertRegex(suggestion.suggested_by, r"^User_[a-z0-9]{9}$")
        self.assertTrue(
            SuggestionVote.objects.filter(suggestion=suggestion, user_identifier="browser-1").exists()
        )

    def test_vote_increments_counter(self):
        suggestion = self._create()
        suggestion = cast_vote(suggestion=suggestion, user_identifier="browser-2")
        self.assertEqual(suggestion.votes, 2)
        self.assertEqual(suggestion.vote_records.count(), 2)

    def test_repeat_vote_is_refused(self):
        suggestion = self._create()
        with self.assertRaises(DuplicateVoteError):
            cast_vote(suggestion=suggestion, user_identifier="browser-1")
        suggestion.refresh_from_db()
        self.assertEqual(suggestion.votes, 1)


class SuggestionApiTests(TestCase):
    def _post(self, payload, user="browser-1"):
        headers = {"HTTP_X_USER_IDENTIFIER": user} if user else {}
        return self.client.post(
            reverse("suggestions:list"),
            data=json.dumps(payload),
            content_type="application/json",
            **headers,
        )

    def _vote(self, pk, user="browser-2"):
        headers = {"HTTP_X_USER_IDENTIFIER": user} if user else {}
        return self.client.post(reverse("suggestions:vote", args=[pk]), **headers)

    def test_create_and_list(self):
        response = self._post({"name": "Gotabaya Rajapaksa", **FREE_CELL})
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["suggestion"]["votes"], 1)
        self.assertEqual(body["suggestion"]["gridId"], 16)
        self.assertIn("automatic vote", body["message"])

        listing = self.client.get(reverse("suggestions:list")).json()
        self.assertEqual([item["name"] for item in listing["suggestions"]], ["Gotabaya Rajapaksa"])

    def test_list_orders_by_votes(self):
        first = create_suggestion(
            name="A", quadrant=Quadrant.AUTHORITARIAN_RIGHT, x=3, y=7, grid_id=16, user_identifier="u1"
        )
        second = create_suggestion(
            name="B", quadrant=Quadrant.LIBERTARIAN_LEFT, x=-9, y=-1, grid_id=50, user_identifier="u1"
        )
        cast_vote(suggestion=first, user_identifier="u2")
        names = [item["name"] for item in self.client.get(reverse("suggestions:list")).json()["suggestions"]]
        self.assertEqual(names, [first.name, second.name])

    def test_identifier_header_is_required(self):
        response = self._post({"name": "Gotabaya Rajapaksa", **FREE_CELL}, user=None)
        self.assertEqual(response.status_code, 400)
        self.assertFalse(PoliticianSuggestion.objects.exists())

    def test_occupied_cell_is_rejected(self):
        # Block 15 holds a curated figure.
        payload = {"name": "Someone", "x": 1, "y": 7, "gridId": 15, "quadrant": "authoritarian-right"}
        response = self._post(payload)
        self.assertEqual(response.status_code, 400)
        self.assertIn("gridId", response.json()["errors"])

    def test_quadrant_must_match_cell(self):
        response = self._post({"name": "Someone", **FREE_CELL, "quadrant": "libertarian-left"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("quadrant", response.json()["errors"])

    def test_coordinates_must_be_cell_centre(self):
        response = self._post({"name": "Someone", **FREE_CELL, "x": 2, "y": 8})
        self.assertEqual(response.status_code, 400)

    def test_vote_flow(self):
        suggestion_id = self._post({"name": "Gotabaya Rajapaksa", **FREE_CELL}).json()["suggestion"]["id"]

        response = self._vote(suggestion_id)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["suggestion"]["votes"], 2)
        self.assertEqual(response.json()["message"], "Vote recorded successfully")

        repeat = self._vote(suggestion_id)
        self.assertEqual(repeat.status_code, 400)
        self.assertEqual(PoliticianSuggestion.objects.get(pk=suggestion_id).votes, 2)

    def test_vote_requires_identifier(self):
        suggestion_id = self._post({"name": "X", **FREE_CELL}).json()["suggestion"]["id"]
        self.assertEqual(self._vote(suggestion_id, user=None).status_code, 400)

    def test_vote_on_unknown_suggestion(self):
        self.assertEqual(self._vote(9999).status_code, 404)
