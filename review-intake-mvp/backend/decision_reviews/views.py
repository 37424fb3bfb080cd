from rest_framework.views import APIView
from django.http import JsonResponse

from .exceptions import IntakeApiError
from .intake import HigherLevelReviewProcessor
from .serializers import serialize_higher_level_review
from .services import get_higher_level_review, start_review_complete


class HigherLevelReviewCreateView(APIView):
    """
    POST /api/v3/decision_review/higher_level_reviews

    - 请求体结构缺失 → 400（MalformedRequestError）
    - 任一 issue 校验失败 → 422，{"errors": [...]}，一次返回全部问题
    - start / review / complete 失败 → 对应 status 的 {"errors": [...]}
    - 成功 → 202，返回创建的 review
    """

    authentication_classes = []
    permission_classes = []

    def post(self, request):
        processor = HigherLevelReviewProcessor(request.data)
        if processor.has_errors:
            raise IntakeApiError(processor.errors)

        review = start_review_complete(processor)
        return JsonResponse(serialize_higher_level_review(review), status=202)


class HigherLevelReviewDetailView(APIView):
    """GET /api/v3/decision_review/higher_level_reviews/<review_id>"""

    authentication_classes = []
    permission_classes = []

    def get(self, request, review_id):
        review = get_higher_level_review(review_id)
        return JsonResponse(serialize_higher_level_review(review))
