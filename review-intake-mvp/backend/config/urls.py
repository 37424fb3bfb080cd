from django.urls import include, path

urlpatterns = [
    path('api/v3/decision_review/', include('decision_reviews.urls')),
]
