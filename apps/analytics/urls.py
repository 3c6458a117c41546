from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    path('summary/', views.summary, name='summary'),
    path('categories/', views.category_breakdown, name='categories'),
    path('cashflow/', views.cash_flow, name='cashflow'),
    path('dashboard/', views.dashboard, name='dashboard'),
]
