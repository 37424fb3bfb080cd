from django.apps import AppConfig


class DecisionReviewsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'decision_reviews'
