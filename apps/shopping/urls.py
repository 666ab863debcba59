from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'shopping'

router = DefaultRouter()
router.register(r'categories', views.CategoryViewSet, basename='category')
router.register(r'shopping', views.ShoppingItemViewSet, basename='shopping-item')

urlpatterns = [
    # GET    /api/categories/                                  - Categories with suggestions

    # GET    /api/shopping/?eventId=                           - Shopping list of an event
    # POST   /api/shopping/                                    - Add item
    # GET    /api/shopping/{id}/                               - Get item
    # PATCH  /api/shopping/{id}/                               - Edit / tick off item
    # DELETE /api/shopping/{id}/                               - Remove item
    # GET    /api/shopping/templates/                          - Built-in lists
    # POST   /api/shopping/templates/{templateId}/apply/       - Copy a list onto an event
    path('', include(router.urls)),
]
