from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.transactions.models import Transaction, ReviewStatus
from apps.transactions.services import calculate_balance
from .models import ChatMessage
from .serializers import (
    HealthResponseSerializer,
    InsightListSerializer,
    AnomalySerializer,
    AnomalyListSerializer,
    CashFlowPointSerializer,
    CashFlowForecastSerializer,
    CashFlowQuerySerializer,
    ChatMessageSerializer,
    CoachMessageRequestSerializer,
    CoachReplySerializer,
    HealthReplySerializer,
    InsightSerializer,
    WELCOME_MESSAGE,
)
from .services import (
    analyze_financial_health,
    generate_smart_insights,
    detect_anomalies,
    predict_cash_flow,
    send_coach_message,
    clear_conversation,
)
from .exceptions import EmptyMessageError


def _history(user):
    return list(Transaction.objects.filter(owner=user).order_by('date', 'created_at'))


@extend_schema(
    responses={200: HealthResponseSerializer},
    description="AI financial health score with risks and recommendations.",
    tags=['advisor'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def financial_health(request):
    """Financial health analysis of all the user's transactions."""
    transactions = _history(request.user)
    currency = request.user.currency

    if not transactions:
        return Response({
            'currency': currency,
            'metric': None,
            'message': 'Add some transactions to get a health analysis.',
        })

    metric = analyze_financial_health(transactions=transactions, currency=currency)

    return Response({
        'currency': currency,
        'metric': HealthReplySerializer(metric).data,
    })


@extend_schema(
    responses={200: InsightListSerializer},
    description="Up to three AI insights: a savings opportunity, a spending pattern and an alert.",
    tags=['advisor'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def smart_insights(request):
    transactions = _history(request.user)
    insights = generate_smart_insights(transactions=transactions) if transactions else []
    return Response({'results': InsightSerializer(insights, many=True).data})


@extend_schema(
    responses={200: AnomalyListSerializer},
    description="Transactions the AI model considers suspicious. Transactions marked safe are excluded.",
    tags=['advisor'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def anomalies(request):
    """Suspicious transactions joined with their stored records."""
    transactions = _history(request.user)
    if not transactions:
        return Response({'results': []})

    by_id = {str(t.id): t for t in transactions}
    results = []
    for anomaly in detect_anomalies(transactions=transactions):
        tx = by_id.get(anomaly['transaction_id'].strip().lower())
        if tx is None or tx.review_status == ReviewStatus.SAFE:
            continue
        results.append({**anomaly, 'transaction_id': str(tx.id), 'transaction': tx})

    return Response({'results': AnomalySerializer(results, many=True).data})


@extend_schema(
    parameters=[
        OpenApiParameter('days', OpenApiTypes.INT, description='Forecast horizon in days (1-90)'),
    ],
    responses={200: CashFlowForecastSerializer},
    description="AI forecast of the daily balance starting today.",
    tags=['advisor'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def cash_flow_forecast(request):
    query_serializer = CashFlowQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    days = query_serializer.validated_data.get('days', settings.CASHFLOW_FORECAST_DAYS)

    current_balance = calculate_balance(owner=request.user)['balance']
    transactions = _history(request.user)

    points = []
    if transactions:
        points = predict_cash_flow(
            transactions=transactions,
            current_balance=current_balance,
            days=days,
        )

    return Response({
        'current_balance': f'{current_balance:.2f}',
        'days': days,
        'results': CashFlowPointSerializer(points, many=True).data,
    })


@extend_schema(
    methods=['GET'],
    responses={200: ChatMessageSerializer(many=True)},
    description="Coach conversation, starting with the welcome message.",
    tags=['advisor'],
)
@extend_schema(
    methods=['POST'],
    request=CoachMessageRequestSerializer,
    responses={201: CoachReplySerializer},
    description="Send a message to the coach and receive its reply.",
    tags=['advisor'],
)
@extend_schema(
    methods=['DELETE'],
    responses={204: None},
    description="Clear the coach conversation.",
    tags=['advisor'],
)
@api_view(['GET', 'POST', 'DELETE'])
@permission_classes([IsAuthenticated])
def coach_messages(request):
    """
    GET    /api/advisor/coach/messages/
    POST   /api/advisor/coach/messages/
    DELETE /api/advisor/coach/messages/
    """
    if request.method == 'DELETE':
        clear_conversation(owner=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    if request.method == 'GET':
        stored = ChatMessage.objects.filter(owner=request.user).order_by('created_at', 'id')
        return Response([WELCOME_MESSAGE, *ChatMessageSerializer(stored, many=True).data])

    serializer = CoachMessageRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user_message, reply = send_coach_message(
            owner=request.user,
            message=serializer.validated_data['message'],
        )
    except EmptyMessageError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'message': ChatMessageSerializer(user_message).data,
        'reply': ChatMessageSerializer(reply).data,
    }, status=status.HTTP_201_CREATED)
