from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Own profile
    path('me/', views.current_profile, name='current-profile'),

    # Member management (admin)
    path('users/', views.user_list, name='user-list'),
    path('users/<uuid:pk>/role/', views.update_role, name='user-role'),
]
