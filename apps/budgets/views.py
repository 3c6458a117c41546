from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .serializers import (
    MonthQuerySerializer,
    BudgetSetSerializer,
    BudgetMapSerializer,
    GeneratedBudgetsSerializer,
    StatementSerializer,
)
from .services import get_budgets, set_budget, delete_budget, build_statement, generate_budgets


@extend_schema(
    methods=['GET'],
    responses={200: BudgetMapSerializer},
    description="Monthly limit per category. New users start with the default set.",
    tags=['budgets'],
)
@extend_schema(
    methods=['POST'],
    request=BudgetSetSerializer,
    responses={200: BudgetMapSerializer},
    description="Create or replace the limit for one category.",
    tags=['budgets'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def budget_list(request):
    if request.method == 'POST':
        serializer = BudgetSetSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        set_budget(owner=request.user, **serializer.validated_data)

    return Response(BudgetMapSerializer({'budgets': get_budgets(owner=request.user)}).data)


@extend_schema(
    responses={204: None},
    description="Remove the limit for one category.",
    tags=['budgets'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def budget_detail(request, category):
    delete_budget(owner=request.user, category=category)
    return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    parameters=[
        OpenApiParameter('month', OpenApiTypes.STR, description='Month (YYYY-MM), defaults to current month'),
    ],
    responses={200: StatementSerializer},
    description="Spent vs. budget per category for one month, with totals and month navigation.",
    tags=['budgets'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def statement(request):
    query_serializer = MonthQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    data = build_statement(
        owner=request.user,
        month=query_serializer.validated_data.get('month') or None,
    )
    return Response(StatementSerializer(data).data)


@extend_schema(
    request=None,
    responses={200: GeneratedBudgetsSerializer},
    description="Generate limits from spending history with the AI model and merge them into the stored budgets.",
    tags=['budgets'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def generate(request):
    result = generate_budgets(owner=request.user)
    return Response(GeneratedBudgetsSerializer(result).data)
