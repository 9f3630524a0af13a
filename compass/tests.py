import json
import math
from io import StringIO

from django.core.management import CommandError, call_command
from django.test import SimpleTestCase, TestCase
from django.urls import reverse

from compass.avatars import AVATARS, DEFAULT_AVATAR, get_avatar_url
from compass.constants import ECONOMIC, SOCIAL, Quadrant
from compass.figures import (
    MATCH_CLOSE,
    MATCH_EXACT,
    POLITICAL_FIGURES,
    PoliticalFigure,
    cell_coordinates,
    find_matching_figure,
    get_grid_id_from_coordinates,
)
from compass.grid import (
    calculate_grid_position,
    describe_grid_position,
    get_block_info,
    score_to_grid_position,
)
from compass.models import UserResult
from compass.questions import QUESTIONS, Question, get_questions_for_page, get_total_pages
from compass.scoring import (
    Answer,
    calculate_score,
    get_progress,
    get_quadrant,
    is_quiz_complete,
    round_score,
    score_walkthrough,
)
from compass.services import (
    get_quadrant_distribution,
    get_recent_results,
    get_results_with_pagination,
    save_user_result,
)
from compass.utils import format_score, get_quadrant_label


def _economic_bank(count):
    return tuple(
        Question(index, {"en": f"Economic statement {index}"}, ECONOMIC)
        for index in range(1, count + 1)
    )


class ScoringTests(SimpleTestCase):
    def test_reversed_answer_cancels_normal_answer(self):
        # Question 1 is a normal economic statement, question 2 a reversed one.
        result = calculate_score([Answer(1, 2), Answer(2, 2)])
        self.assertEqual(result.economic, 0.0)
        self.assertEqual(result.social, 0.0)
        self.assertEqual(result.quadrant, Quadrant.CENTRIST)

    def test_reversed_question_flips_sign(self):
        normal = calculate_score([Answer(1, 2)])
        reversed_ = calculate_score([Answer(2, 2)])
        self.assertEqual(normal.economic, -reversed_.economic)
        self.assertGreater(normal.economic, 0)

    def test_all_strongly_agree_reaches_the_edge(self):
        bank = _economic_bank(12)
        result = calculate_score([Answer(q.id, 2) for q in bank], bank)
        self.assertEqual(result.economic, 10.0)
        self.assertEqual(result.social, 0.0)

    def test_scores_stay_within_bounds(self):
        for value in (-2, 2):
            result = calculate_score([Answer(q.id, value) for q in QUESTIONS])
            self.assertLessEqual(abs(result.economic), 10.0)
            self.assertLessEqual(abs(result.social), 10.0)

    def test_unknown_question_ids_are_ignored(self):
        self.assertEqual(calculate_score([Answer(999, 2)]), calculate_score([]))

    def test_last_answer_for_a_question_wins(self):
        result = calculate_score([Answer(1, -2), Answer(1, 2)])
        self.assertEqual(result, calculate_score([Answer(1, 2)]))

    def test_scoring_is_deterministic(self):
        answers = [Answer(q.id, (-2, -1, 1, 2)[q.id % 4]) for q in QUESTIONS]
        self.assertEqual(calculate_score(answers), calculate_score(list(answers)))

    def test_empty_axis_scores_zero(self):
        bank = _economic_bank(3)
        result = calculate_score([Answer(1, 2)], bank)
        self.assertEqual(result.social, 0.0)

    def test_round_score_rounds_ties_up(self):
        self.assertEqual(round_score(2.25), 2.3)
        self.assertEqual(round_score(-2.25), -2.2)
        self.assertEqual(round_score(4.16666), 4.2)

    def test_centrist_takes_priority(self):
        self.assertEqual(get_quadrant(0.5, -0.5), Quadrant.CENTRIST)
        self.assertEqual(get_quadrant(1.0, 1.0), Quadrant.CENTRIST)
        self.assertEqual(get_quadrant(0.5, 1.5), Quadrant.AUTHORITARIAN_RIGHT)

    def test_zero_counts_as_left_and_libertarian(self):
        self.assertEqual(get_quadrant(0, -5), Quadrant.LIBERTARIAN_LEFT)
        self.assertEqual(get_quadrant(0, 5), Quadrant.AUTHORITARIAN_LEFT)
        self.assertEqual(get_quadrant(5, 0), Quadrant.LIBERTARIAN_RIGHT)
        self.assertEqual(get_quadrant(5, 5), Quadrant.AUTHORITARIAN_RIGHT)

    def test_progress_and_completion(self):
        answers = [Answer(q.id, 1) for q in QUESTIONS[:6]]
        self.assertEqual(get_progress(answers), 25)
        self.assertFalse(is_quiz_complete(answers))
        everything = [Answer(q.id, 1) for q in QUESTIONS]
        self.assertEqual(get_progress(everything), 100)
        self.assertTrue(is_quiz_complete(everything))

    def test_walkthrough_explains_each_answer(self):
        walkthrough = score_walkthrough([Answer(1, 2), Answer(2, -2), Answer(13, -2)])
        economic_rows = walkthrough["economic_breakdown"]
        self.assertEqual([row["points"] for row in economic_rows], [2, 2])
        self.assertTrue(economic_rows[1]["is_reversed"])
        self.assertEqual(walkthrough["totals"], {ECONOMIC: 4, SOCIAL: -2})
        self.assertEqual(walkthrough["final_scores"], {"economic": 1.7, "social": -0.8})
        self.assertEqual(walkthrough["quadrant"], Quadrant.LIBERTARIAN_RIGHT)


class QuestionBankTests(SimpleTestCase):
    def test_bank_is_balanced(self):
        economic = [q for q in QUESTIONS if q.category == ECONOMIC]
        social = [q for q in QUESTIONS if q.category == SOCIAL]
        self.assertEqual(len(economic), 12)
        self.assertEqual(len(social), 12)
        self.assertEqual(len({q.id for q in QUESTIONS}), len(QUESTIONS))

    def test_every_question_is_bilingual(self):
        for question in QUESTIONS:
            self.assertTrue(question.prompt("en"))
            self.assertTrue(question.prompt("si"))
            self.assertNotEqual(question.prompt("en"), question.prompt("si"))

    def test_paging(self):
        self.assertEqual(get_total_pages(6), 4)
        self.assertEqual([q.id for q in get_questions_for_page(2, 6)], [7, 8, 9, 10, 11, 12])
        self.assertEqual(get_questions_for_page(5, 6), [])


class GridTests(SimpleTestCase):
    def test_edges(self):
        self.assertEqual(score_to_grid_position(10), 9)
        self.assertEqual(score_to_grid_position(-10), 0)
        self.assertEqual(score_to_grid_position(25), 9)
        self.assertEqual(score_to_grid_position(-25), 0)
        self.assertEqual(score_to_grid_position(0), 5)

    def test_authoritarian_left_corner_is_block_zero(self):
        position = calculate_grid_position(-10, 10)
        self.assertEqual((position.x, position.y, position.block), (0, 0, 0))
        self.assertEqual(position.quadrant, Quadrant.AUTHORITARIAN_LEFT)
        self.assertEqual(position.quadrant_block, 0)

    def test_libertarian_right_corner_is_block_99(self):
        position = calculate_grid_position(10, -10)
        self.assertEqual(position.block, 99)
        self.assertEqual(position.quadrant, Quadrant.LIBERTARIAN_RIGHT)
        self.assertEqual(position.quadrant_block, 24)

    def test_block_round_trip(self):
        for block in range(100):
            info = get_block_info(block)
            economic = info["x"] * 2 - 9
            social = (9 - info["y"]) * 2 - 9
            position = calculate_grid_position(economic, social)
            self.assertEqual(position.block, block)
            self.assertEqual(str(position.quadrant), info["quadrant"])

    def test_description_reflects_depth_in_quadrant(self):
        self.assertEqual(
            describe_grid_position(calculate_grid_position(10, -10)),
            "Extreme Liberal capitalist",
        )
        self.assertEqual(
            describe_grid_position(calculate_grid_position(-10, 10)),
            "Mild Socialist with traditional values",
        )


class FigureMatchingTests(SimpleTestCase):
    def test_grid_id_from_coordinates(self):
        self.assertEqual(get_grid_id_from_coordinates(-9, 9), 0)
        self.assertEqual(get_grid_id_from_coordinates(9, -9), 99)
        self.assertEqual(get_grid_id_from_coordinates(1, 7), 15)
        self.assertEqual(get_grid_id_from_coordinates(50, -50), 99)

    def test_cell_coordinates_invert_grid_id(self):
        for block in range(100):
            x, y = cell_coordinates(block)
            self.assertEqual(get_grid_id_from_coordinates(x, y), block)

    def test_figures_keep_their_cells(self):
        for figure in POLITICAL_FIGURES:
            self.assertEqual(cell_coordinates(figure.block), (figure.x, figure.y))

    def test_exact_match(self):
        match = find_matching_figure(1, 7)
        self.assertEqual(match.match_type, MATCH_EXACT)
        self.assertEqual(match.figure.name, "Mahinda Rajapaksa")
        self.assertEqual(match.distance, 0.0)

    def test_close_match(self):
        match = find_matching_figure(2, 8)
        self.assertEqual(match.match_type, MATCH_CLOSE)
        self.assertEqual(match.figure.name, "Mahinda Rajapaksa")
        self.assertAlmostEqual(match.distance, math.sqrt(2))

    def test_far_query_has_no_match(self):
        figures = [PoliticalFigure(1, 7, "mahinda.jpeg", "Mahinda Rajapaksa")]
        self.assertIsNone(find_matching_figure(10, 10, figures))
        self.assertIsNone(find_matching_figure(0, 0, []))

    def test_non_finite_coordinates_are_clamped(self):
        self.assertEqual(get_grid_id_from_coordinates(float("inf"), float("-inf")), 99)
        self.assertEqual(get_grid_id_from_coordinates(float("-inf"), float("inf")), 0)
        self.assertEqual(find_matching_figure(float("inf"), 0.0), find_matching_figure(10.0, 0.0))
        self.assertEqual(find_matching_figure(float("nan"), 0.0), find_matching_figure(0.0, 0.0))

    def test_first_figure_wins_shared_cell(self):
        match = find_matching_figure(5, 3)
        self.assertEqual(match.figure.image, "swrd.jpg")

    def test_match_serialisation(self):
        data = find_matching_figure(1, 7).to_dict()
        self.assertEqual(data["matchType"], "exact")
        self.assertEqual(data["figure"]["image"], "mahinda.jpeg")


class FormattingTests(SimpleTestCase):
    def test_format_score(self):
        self.assertEqual(format_score(3.5), "+3.5")
        self.assertEqual(format_score(-2), "-2.0")
        self.assertEqual(format_score(0), "0.0")

    def test_quadrant_labels(self):
        self.assertEqual(get_quadrant_label(Quadrant.LIBERTARIAN_LEFT), "Libertarian Socialist")
        self.assertEqual(get_quadrant_label(Quadrant.CENTRIST, "fr"), "Centrist")
        self.assertNotEqual(get_quadrant_label(Quadrant.CENTRIST, "si"), "Centrist")


class AvatarTests(SimpleTestCase):
    def test_catalogue_urls(self):
        self.assertEqual(get_avatar_url("JR.jpg"), "/people/JR.jpg")
        self.assertEqual(DEFAULT_AVATAR, "anura.jpg")
        self.assertEqual(len({avatar.id for avatar in AVATARS}), len(AVATARS))


class ResultServiceTests(TestCase):
    def test_save_rounds_scores(self):
        result = save_user_result(
            name="  Nimal ",
            economic_score=3.25,
            social_score=-7.0,
            quadrant=Quadrant.LIBERTARIAN_RIGHT,
        )
        result.refresh_from_db()
        self.assertEqual(result.name, "Nimal")
        self.assertEqual(float(result.economic_score), 3.3)
        self.assertEqual(result.avatar, "anura.jpg")

    def test_recent_results_are_newest_first(self):
        for name in ("first", "second", "third"):
            save_user_result(
                name=name, economic_score=0, social_score=0, quadrant=Quadrant.CENTRIST
            )
        names = [row["name"] for row in get_recent_results(limit=2)]
        self.assertEqual(names, ["third", "second"])

    def test_pagination_with_search(self):
        for index in range(5):
            save_user_result(
                name=f"Kamal {index}", economic_score=1, social_score=1, quadrant=Quadrant.CENTRIST
            )
        save_user_result(name="Sunil", economic_score=1, social_score=1, quadrant=Quadrant.CENTRIST)

        page = get_results_with_pagination(page=2, limit=2, search="kamal")
        self.assertEqual(page.total, 5)
        self.assertEqual(page.total_pages, 3)
        self.assertEqual([row["name"] for row in page.results], ["Kamal 2", "Kamal 1"])

    def test_distribution_includes_empty_quadrants(self):
        save_user_result(
            name="a", economic_score=-5, social_score=-5, quadrant=Quadrant.LIBERTARIAN_LEFT
        )
        save_user_result(
            name="b", economic_score=-4, social_score=-6, quadrant=Quadrant.LIBERTARIAN_LEFT
        )
        distribution = get_quadrant_distribution()
        self.assertEqual(distribution[Quadrant.LIBERTARIAN_LEFT], 2)
        self.assertEqual(distribution[Quadrant.AUTHORITARIAN_RIGHT], 0)
        self.assertEqual(len(distribution), 5)


class ResultApiTests(TestCase):
    def _post(self, payload):
        return self.client.post(
            reverse("compass:results"), data=json.dumps(payload), content_type="application/json"
        )

    def test_save_and_list(self):
        response = self._post(
            {
                "name": "Ruwan",
                "economicScore": 4.2,
                "socialScore": -1.5,
                "quadrant": "libertarian-right",
                "avatar": "ranil.jpg",
            }
        )
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertTrue(UserResult.objects.filter(uuid=body["id"]).exists())

        listing = self.client.get(reverse("compass:results")).json()
        self.assertEqual(listing["results"][0]["name"], "Ruwan")
        self.assertEqual(listing["results"][0]["avatar"], "ranil.jpg")

    def test_invalid_payloads_are_rejected(self):
        response = self._post({"name": "", "economicScore": 40, "socialScore": 0, "quadrant": "x"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("errors", response.json())

        response = self.client.post(
            reverse("compass:results"), data="{not json", content_type="application/json"
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Invalid JSON payload")

    def test_unknown_avatar_is_rejected(self):
        response = self._post(
            {
                "name": "Ruwan",
                "economicScore": 0,
                "socialScore": 0,
                "quadrant": "centrist",
                "avatar": "../../etc/passwd",
            }
        )
        self.assertEqual(response.status_code, 400)

    def test_paginated_listing(self):
        for index in range(3):
            save_user_result(
                name=f"Amal {index}", economic_score=0, social_score=0, quadrant=Quadrant.CENTRIST
            )
        body = self.client.get(
            reverse("compass:results"), {"mode": "paginated", "page": 1, "limit": 2}
        ).json()
        self.assertEqual(body["total"], 3)
        self.assertEqual(body["totalPages"], 2)
        self.assertEqual(len(body["results"]), 2)

    def test_limit_is_capped(self):
        response = self.client.get(reverse("compass:results"), {"limit": 1000})
        self.assertEqual(response.status_code, 400)

    def test_stats(self):
        save_user_result(name="a", economic_score=0, social_score=0, quadrant=Quadrant.CENTRIST)
        body = self.client.get(reverse("compass:stats")).json()
        self.assertEqual(body["totalUsers"], 1)
        self.assertEqual(body["distribution"]["centrist"], 1)
        self.assertTrue(body["success"])


class QuizApiTests(SimpleTestCase):
    def test_questions_in_sinhala(self):
        body = self.client.get(reverse("compass:questions"), {"lang": "si", "page": 1}).json()
        self.assertEqual(body["language"], "si")
        self.assertEqual(body["totalPages"], 4)
        self.assertEqual(len(body["questions"]), 6)
        self.assertEqual(body["questions"][0]["text"], QUESTIONS[0].prompt("si"))

    def test_questions_reject_bad_paging(self):
        response = self.client.get(reverse("compass:questions"), {"page": "two"})
        self.assertEqual(response.status_code, 400)

    def test_score_endpoint(self):
        payload = {
            "answers": [
                {"questionId": 1, "value": 2},
                {"questionId": 2, "value": -2},
                {"questionId": 5, "value": -2},
                {"questionId": 13, "value": -2},
                {"questionId": 14, "value": 2},
                {"questionId": 16, "value": 2},
            ]
        }
        response = self.client.post(
            reverse("compass:score"), data=json.dumps(payload), content_type="application/json"
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["result"], {"economic": 2.5, "social": -2.5, "quadrant": "libertarian-right"})
        self.assertEqual(body["label"], "Libertarian Capitalist")
        self.assertEqual(body["formatted"], {"economic": "+2.5", "social": "-2.5"})
        self.assertEqual(body["gridPosition"]["block"], 66)
        self.assertEqual(body["progress"], 25)
        self.assertFalse(body["complete"])

    def test_score_rejects_values_outside_the_scale(self):
        payload = {"answers": [{"questionId": 1, "value": 0}]}
        response = self.client.post(
            reverse("compass:score"), data=json.dumps(payload), content_type="application/json"
        )
        self.assertEqual(response.status_code, 400)

    def test_figure_match_endpoint(self):
        body = self.client.get(reverse("compass:figure-match"), {"x": 2, "y": 8}).json()
        self.assertEqual(body["match"]["matchType"], "close")
        self.assertEqual(body["match"]["figure"]["name"], "Mahinda Rajapaksa")

    def test_figure_and_avatar_lists(self):
        figures = self.client.get(reverse("compass:figures")).json()["figures"]
        self.assertEqual(len(figures), len(POLITICAL_FIGURES))
        avatars = self.client.get(reverse("compass:avatars")).json()["avatars"]
        self.assertTrue(all(avatar["url"].startswith("/people/") for avatar in avatars))


class SitePlumbingTests(SimpleTestCase):
    def test_sensitive_paths_are_hidden(self):
        for path in ("/.env", "/package.json", "/.git/config", "/app.js.map", "/server.log"):
            self.assertEqual(self.client.get(path).status_code, 404, path)

    def test_admin_probes_redirect_home(self):
        response = self.client.get("/admin/login/")
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response["Location"], "/")

    def test_security_headers(self):
        response = self.client.get(reverse("compass:avatars"))
        self.assertEqual(response["X-Frame-Options"], "DENY")
        self.assertEqual(response["X-Content-Type-Options"], "nosniff")
        self.assertEqual(response["Referrer-Policy"], "origin-when-cross-origin")
        self.assertEqual(response["X-DNS-Prefetch-Control"], "off")

    def test_sitemap_lists_public_pages(self):
        response = self.client.get("/sitemap.xml")
        self.assertEqual(response.status_code, 200)
        content = response.content.decode()
        for page in ("/quiz", "/community-results", "/suggest-politicians"):
            self.assertIn(page, content)


class ScoringGuideCommandTests(SimpleTestCase):
    def test_example_walkthrough(self):
        out = StringIO()
        call_command("scoring_guide", "--example", "libertarian-right", stdout=out)
        output = out.getvalue()
        self.assertIn("Reversed economic questions: 2, 4, 5, 8, 12", output)
        self.assertIn("Economic +2.5, social -2.5 -> Libertarian Capitalist (block 66", output)

    def test_invalid_answers(self):
        with self.assertRaises(CommandError):
            call_command("scoring_guide", "--answers", "not json", stdout=StringIO())
