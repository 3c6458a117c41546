from django.urls import path
from . import views

app_name = 'budgets'

urlpatterns = [
    path('', views.budget_list, name='list'),
    path('statement/', views.statement, name='statement'),
    path('generate/', views.generate, name='generate'),
    # Category names may contain '/', e.g. 'Rent/Mortgage'
    path('categories/<path:category>/', views.budget_detail, name='detail'),
]
