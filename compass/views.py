import json

from django.conf import settings
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .avatars import AVATARS
from .constants import normalize_language
from .figures import POLITICAL_FIGURES, find_matching_figure
from .grid import calculate_grid_position, describe_grid_position
from .questions import (
    DEFAULT_QUESTIONS_PER_PAGE,
    QUESTION_BANK_VERSION,
    QUESTIONS,
    get_questions_for_page,
    get_total_pages,
)
from .scoring import calculate_score, get_progress, is_quiz_complete
from .serializers import (
    FigureMatchQuerySerializer,
    ResultListQuerySerializer,
    SaveResultSerializer,
    ScoreRequestSerializer,
)
from .services import (
    RECENT_LIMIT,
    RESULTS_PAGE_SIZE,
    get_quadrant_distribution,
    get_recent_results,
    get_results_with_pagination,
    get_total_user_count,
    save_user_result,
)
from .utils import format_score, get_quadrant_label

MAX_PAGE_SIZE = getattr(settings, "COMPASS_MAX_PAGE_SIZE", 100)


def _load_json(request):
    try:
        return json.loads(request.body or "{}"), None
    except json.JSONDecodeError:
        return None, JsonResponse({"detail": "Invalid JSON payload"}, status=400)


def _invalid(serializer) -> JsonResponse:
    return JsonResponse(
        {"detail": "Invalid request", "errors": serializer.errors}, status=400
    )


@method_decorator(csrf_exempt, name="dispatch")
class ResultCollectionView(View):
    """List community results or publish a new one."""

    def get(self, request):
        query = ResultListQuerySerializer(
            data=request.GET, context={"max_limit": MAX_PAGE_SIZE}
        )
        if not query.is_valid():
            return _invalid(query)
        params = query.validated_data

        if params["mode"] == "paginated":
            page = get_results_with_pagination(
                page=params["page"],
                limit=params.get("limit") or RESULTS_PAGE_SIZE,
                search=params["search"],
            )
            return JsonResponse(page.to_dict())
        results = get_recent_results(limit=params.get("limit") or RECENT_LIMIT)
        return JsonResponse({"results": results})

    def post(self, request):
        payload, error = _load_json(request)
        if error:
            return error
        serializer = SaveResultSerializer(data=payload)
        if not serializer.is_valid():
            return _invalid(serializer)
        data = serializer.validated_data
        result = save_user_result(
            name=data["name"],
            economic_score=data["economicScore"],
            social_score=data["socialScore"],
            quadrant=data["quadrant"],
            avatar=data["avatar"],
        )
        return JsonResponse(
            {
                "success": True,
                "id": str(result.uuid),
                "message": "Result saved successfully",
            },
            status=201,
        )


class StatsView(View):
    """Headline numbers for the community page."""

    def get(self, request):
        return JsonResponse(
            {
                "totalUsers": get_total_user_count(),
                "distribution": get_quadrant_distribution(),
                "success": True,
            }
        )


class QuestionListView(View):
    """Serve the question bank in the requested language, optionally paged."""

    def get(self, request):
        language = normalize_language(request.GET.get("lang"))
        try:
            per_page = int(request.GET.get("per_page") or DEFAULT_QUESTIONS_PER_PAGE)
            page = int(request.GET["page"]) if request.GET.get("page") else None
        except ValueError:
            return JsonResponse({"detail": "page and per_page must be integers."}, status=400)
        if per_page < 1 or (page is not None and page < 1):
            return JsonResponse({"detail": "page and per_page must be positive."}, status=400)

        questions = QUESTIONS if page is None else get_questions_for_page(page, per_page)
        return JsonResponse(
            {
                "version": QUESTION_BANK_VERSION,
                "language": language,
                "page": page,
                "totalPages": get_total_pages(per_page),
                "total": len(QUESTIONS),
                "questions": [
                    {
                        "id": question.id,
                        "text": question.prompt(language),
                        "category": question.category,
                    }
                    for question in questions
                ],
            }
        )


@method_decorator(csrf_exempt, name="dispatch")
class ScoreView(View):
    """Score a set of answers and place the result on the grid."""

    def post(self, request):
        payload, error = _load_json(request)
        if error:
            return error
        serializer = ScoreRequestSerializer(data=payload)
        if not serializer.is_valid():
            return _invalid(serializer)

        language = serializer.validated_data["language"]
        answers = serializer.get_answers()
        result = calculate_score(answers)
        position = calculate_grid_position(result.economic, result.social)
        match = find_matching_figure(result.economic, result.social)
        return JsonResponse(
            {
                "result": result.to_dict(),
                "label": get_quadrant_label(result.quadrant, language),
                "formatted": {
                    "economic": format_score(result.economic),
                    "social": format_score(result.social),
                },
                "gridPosition": position.to_dict(),
                "gridDescription": describe_grid_position(position),
                "complete": is_quiz_complete(answers),
                "progress": get_progress(answers),
                "figureMatch": match.to_dict() if match else None,
            }
        )


class FigureListView(View):
    def get(self, request):
        return JsonResponse({"figures": [figure.to_dict() for figure in POLITICAL_FIGURES]})


class FigureMatchView(View):
    def get(self, request):
        query = FigureMatchQuerySerializer(data=request.GET)
        if not query.is_valid():
            return _invalid(query)
        match = find_matching_figure(query.validated_data["x"], query.validated_data["y"])
        return JsonResponse({"match": match.to_dict() if match else None})


class AvatarListView(View):
    def get(self, request):
        return JsonResponse({"avatars": [avatar.to_dict() for avatar in AVATARS]})
