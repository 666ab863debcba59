from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'expenses'

router = DefaultRouter()
router.register(r'expenses', views.ExpenseViewSet, basename='expense')

urlpatterns = [
    # POST /api/upload/ - Store a receipt photo, returns {url}
    path('upload/', views.upload_receipt, name='upload'),

    # GET    /api/expenses/?eventId=                    - List expenses of an event
    # POST   /api/expenses/                             - Record expense
    # GET    /api/expenses/{id}/                        - Get expense
    # PATCH  /api/expenses/{id}/                        - Update expense
    # DELETE /api/expenses/{id}/                        - Delete expense
    # POST   /api/expenses/{id}/receipts/               - Attach receipt photo
    # DELETE /api/expenses/{id}/receipts/{receiptId}/   - Detach receipt
    path('', include(router.urls)),
]
