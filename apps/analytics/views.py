from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .analytics import FinanceAnalytics
from .serializers import (
    # Input serializers
    DateRangeQuerySerializer,
    CashFlowQuerySerializer,
    # Response serializers
    SummarySerializer,
    CategorySliceSerializer,
    CashFlowResponseSerializer,
    DashboardResponseSerializer,
)

DATE_RANGE_PARAMETERS = [
    OpenApiParameter('date_from', OpenApiTypes.DATE, description='Start date (YYYY-MM-DD)'),
    OpenApiParameter('date_to', OpenApiTypes.DATE, description='End date (YYYY-MM-DD)'),
]


@extend_schema(
    parameters=DATE_RANGE_PARAMETERS,
    responses={200: SummarySerializer},
    description="Total income, total expense and balance.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def summary(request):
    query_serializer = DateRangeQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    data = FinanceAnalytics.summary(request.user, **query_serializer.validated_data)
    return Response(SummarySerializer(data).data)


@extend_schema(
    parameters=DATE_RANGE_PARAMETERS,
    responses={200: CategorySliceSerializer(many=True)},
    description="Expense totals per category with chart colors.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def category_breakdown(request):
    query_serializer = DateRangeQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    data = FinanceAnalytics.category_breakdown(request.user, **query_serializer.validated_data)
    return Response(CategorySliceSerializer(data, many=True).data)


@extend_schema(
    parameters=[
        OpenApiParameter('granularity', OpenApiTypes.STR, description="'day' or 'month'", default='day'),
        *DATE_RANGE_PARAMETERS,
    ],
    responses={200: CashFlowResponseSerializer},
    description="Income and expense per day or month, oldest first.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def cash_flow(request):
    query_serializer = CashFlowQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    data = FinanceAnalytics.cash_flow(
        request.user,
        granularity=params['granularity'],
        date_from=params.get('date_from'),
        date_to=params.get('date_to'),
    )

    return Response(CashFlowResponseSerializer({
        'granularity': params['granularity'],
        'data': data,
    }).data)


@extend_schema(
    responses={200: DashboardResponseSerializer},
    description="Summary, category breakdown and daily cash flow for the dashboard.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard(request):
    data = FinanceAnalytics.dashboard(request.user)
    return Response(DashboardResponseSerializer(data).data)
