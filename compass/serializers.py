from rest_framework import serializers

from .avatars import AVATAR_FILENAMES, DEFAULT_AVATAR
from .constants import ANSWER_VALUES, DEFAULT_LANGUAGE, LANGUAGES, SCORE_MAX, SCORE_MIN, Quadrant
from .scoring import Answer


class SaveResultSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=50, trim_whitespace=True)
    economicScore = serializers.FloatField(min_value=SCORE_MIN, max_value=SCORE_MAX)
    socialScore = serializers.FloatField(min_value=SCORE_MIN, max_value=SCORE_MAX)
    quadrant = serializers.ChoiceField(choices=Quadrant.choices)
    avatar = serializers.CharField(max_length=120, required=False, default=DEFAULT_AVATAR)

    def validate_avatar(self, value):
        if value not in AVATAR_FILENAMES:
            raise serializers.ValidationError("Unknown avatar.")
        return value


class AnswerSerializer(serializers.Serializer):
    questionId = serializers.IntegerField()
    value = serializers.ChoiceField(choices=ANSWER_VALUES)


class ScoreRequestSerializer(serializers.Serializer):
    answers = AnswerSerializer(many=True, allow_empty=True)
    language = serializers.ChoiceField(choices=LANGUAGES, required=False, default=DEFAULT_LANGUAGE)

    def get_answers(self) -> list[Answer]:
        return [
            Answer(question_id=item["questionId"], value=item["value"])
            for item in self.validated_data["answers"]
        ]


class FigureMatchQuerySerializer(serializers.Serializer):
    x = serializers.FloatField(min_value=SCORE_MIN, max_value=SCORE_MAX)
    y = serializers.FloatField(min_value=SCORE_MIN, max_value=SCORE_MAX)


class ResultListQuerySerializer(serializers.Serializer):
    mode = serializers.ChoiceField(choices=["recent", "paginated"], required=False, default="recent")
    page = serializers.IntegerField(min_value=1, required=False, default=1)
    limit = serializers.IntegerField(min_value=1, required=False)
    search = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_limit(self, value):
        maximum = self.context.get("max_limit")
        if maximum and value > maximum:
            raise serializers.ValidationError(f"Ensure this value is less than or equal to {maximum}.")
        return value
