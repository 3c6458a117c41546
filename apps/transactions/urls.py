from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'transactions'

router = SimpleRouter()
router.register(r'', views.TransactionViewSet, basename='transaction')

urlpatterns = [
    # GET    /api/transactions/                  - List (type, category, date range filters)
    # POST   /api/transactions/                  - Manual entry
    # GET    /api/transactions/{id}/             - Details
    # PUT    /api/transactions/{id}/             - Update
    # PATCH  /api/transactions/{id}/             - Partial update
    # DELETE /api/transactions/{id}/             - Delete
    # POST   /api/transactions/scan/             - Create from receipt/document upload
    # GET    /api/transactions/balance/          - Income, expense, balance
    # POST   /api/transactions/{id}/mark_safe/   - Dismiss an anomaly flag
    # POST   /api/transactions/{id}/flag_fraud/  - Confirm an anomaly flag
    path('', include(router.urls)),
]
