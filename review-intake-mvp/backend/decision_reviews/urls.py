from django.urls import path
from .views import HigherLevelReviewCreateView, HigherLevelReviewDetailView

urlpatterns = [
    path('higher_level_reviews', HigherLevelReviewCreateView.as_view(), name='higher-level-review-create'),
    path(
        'higher_level_reviews/<uuid:review_id>',
        HigherLevelReviewDetailView.as_view(),
        name='higher-level-review-detail',
    ),
]
