from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'bottles'

router = DefaultRouter()
router.register(r'', views.BottleSubmissionViewSet, basename='bottle')

urlpatterns = [
    # GET    /api/bottles/?event={id}      - List visible submissions
    # POST   /api/bottles/                 - Submit a bottle
    # GET    /api/bottles/mine/?event={id} - My submission for an event
    # GET    /api/bottles/{id}/            - Get submission
    # PATCH  /api/bottles/{id}/            - Edit submission (owner or admin)
    # DELETE /api/bottles/{id}/            - Delete submission (admin)
    path('', include(router.urls)),
]
