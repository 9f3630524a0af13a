import json

from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .models import PoliticianSuggestion
from .serializers import SuggestionCreateSerializer
from .services import (
    DuplicateVoteError,
    cast_vote,
    create_suggestion,
    list_suggestions,
    serialize_suggestion,
)

USER_IDENTIFIER_HEADER = "X-User-Identifier"


class UserIdentifierRequiredMixin:
    """Voting endpoints need the anonymous browser identifier header."""

    def dispatch(self, request, *args, **kwargs):
        if request.method == "POST":
            identifier = (request.headers.get(USER_IDENTIFIER_HEADER) or "").strip()
            if not identifier:
                return JsonResponse({"detail": "User identifier is required"}, status=400)
            request.user_identifier = identifier
        return super().dispatch(request, *args, **kwargs)


@method_decorator(csrf_exempt, name="dispatch")
class SuggestionCollectionView(UserIdentifierRequiredMixin, View):
    """List suggestions by popularity or add a new one."""

    def get(self, request):
        return JsonResponse({"suggestions": list_suggestions()})

    def post(self, request):
        try:
            payload = json.loads(request.body or "{}")
        except json.JSONDecodeError:
            return JsonResponse({"detail": "Invalid JSON payload"}, status=400)

        serializer = SuggestionCreateSerializer(data=payload)
        if not serializer.is_valid():
            return JsonResponse(
                {"detail": "Invalid suggestion", "errors": serializer.errors}, status=400
            )
        data = serializer.validated_data
        suggestion = create_suggestion(
            name=data["name"],
            quadrant=data["quadrant"],
            x=data["x"],
            y=data["y"],
            grid_id=data["gridId"],
            user_identifier=request.user_identifier,
        )
        return JsonResponse(
            {
                "suggestion": serialize_suggestion(suggestion),
                "message": "Suggestion created successfully with your automatic vote!",
            },
            status=201,
        )


@method_decorator(csrf_exempt, name="dispatch")
class SuggestionVoteView(UserIdentifierRequiredMixin, View):
    def post(self, request, pk):
        suggestion = get_object_or_404(PoliticianSuggestion, pk=pk)
        try:
            suggestion = cast_vote(
                suggestion=suggestion, user_identifier=request.user_identifier
            )
        except DuplicateVoteError as exc:
            return JsonResponse({"detail": str(exc)}, status=400)
        return JsonResponse(
            {
                "suggestion": serialize_suggestion(suggestion),
                "message": "Vote recorded successfully",
            }
        )
