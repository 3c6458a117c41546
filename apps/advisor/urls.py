from django.urls import path
from . import views

app_name = 'advisor'

urlpatterns = [
    path('health/', views.financial_health, name='health'),
    path('insights/', views.smart_insights, name='insights'),
    path('anomalies/', views.anomalies, name='anomalies'),
    path('cashflow/', views.cash_flow_forecast, name='cashflow'),
    path('coach/messages/', views.coach_messages, name='coach-messages'),
]
