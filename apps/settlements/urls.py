from django.urls import path
from . import views

app_name = 'settlements'

urlpatterns = [
    # GET  /api/settlements/events/{event_id}/         - Settle-up summary
    path('events/<uuid:event_id>/', views.settle_up_summary, name='settle-up'),
    # POST /api/settlements/events/{event_id}/toggle/  - Set settled flag (admin)
    path('events/<uuid:event_id>/toggle/', views.toggle_settlement_view, name='toggle'),
]
