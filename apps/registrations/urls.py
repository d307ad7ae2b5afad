from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'registrations'

# Router for ViewSets
router = SimpleRouter()
router.register(r'', views.YouthRegistrationViewSet, basename='registration')

urlpatterns = [
    # Registration ViewSet routes
    # POST   /api/registrations/           - Register a youth (public)
    # GET    /api/registrations/           - List registrations (admin)
    # GET    /api/registrations/{id}/      - Get registration (admin)

    # Custom actions
    # GET    /api/registrations/groups/    - Group statistics (admin)
    # DELETE /api/registrations/clear/     - Delete all registrations (admin)

    # Additional endpoints
    path('groups/<str:group_name>/members/', views.group_members, name='group-members'),

    # Include router URLs
    path('', include(router.urls)),
]
