import logging

from django.conf import settings
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.parsers import MultiPartParser, FormParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Transaction, ReviewStatus
from .serializers import (
    TransactionSerializer,
    TransactionCreateSerializer,
    TransactionFilterSerializer,
    ReceiptUploadSerializer,
    BalanceSerializer,
)
from .services import create_transaction, calculate_balance, set_review_status, scan_receipt
from .permissions import IsTransactionOwner
from .exceptions import ReceiptScanError, UnsupportedDocumentError, DocumentTooLargeError

logger = logging.getLogger(__name__)


class TransactionPagination(PageNumberPagination):
    """Custom pagination for transactions."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 500


class TransactionViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the current user's transactions.

    list: Transactions newest first, filterable by type, category and date
    create: Manual entry
    retrieve / update / destroy: Owner only
    """

    serializer_class = TransactionSerializer
    permission_classes = [IsAuthenticated, IsTransactionOwner]
    pagination_class = TransactionPagination
    lookup_value_regex = r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'

    def get_queryset(self):
        """Scope to the owner and apply validated filters."""
        queryset = Transaction.objects.filter(owner=self.request.user)

        if self.action != 'list':
            return queryset

        filter_serializer = TransactionFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if params.get('type', 'ALL') != 'ALL':
            queryset = queryset.filter(type=params['type'])
        if params.get('category'):
            queryset = queryset.filter(category=params['category'])
        if 'date_from' in params:
            queryset = queryset.filter(date__gte=params['date_from'])
        if 'date_to' in params:
            queryset = queryset.filter(date__lte=params['date_to'])

        return queryset.order_by('-date', '-created_at')

    def get_serializer_class(self):
        if self.action == 'create':
            return TransactionCreateSerializer
        return TransactionSerializer

    @extend_schema(
        parameters=[
            OpenApiParameter('type', OpenApiTypes.STR, description="ALL, INCOME or EXPENSE", default='ALL'),
            OpenApiParameter('category', OpenApiTypes.STR, description='Exact category name'),
            OpenApiParameter('date_from', OpenApiTypes.DATE, description='Start date (YYYY-MM-DD)'),
            OpenApiParameter('date_to', OpenApiTypes.DATE, description='End date (YYYY-MM-DD)'),
        ],
        tags=['transactions'],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(
        request=TransactionCreateSerializer,
        responses={201: TransactionSerializer},
        tags=['transactions'],
    )
    def create(self, request, *args, **kwargs):
        serializer = TransactionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        tx = create_transaction(owner=request.user, **serializer.validated_data)

        return Response(TransactionSerializer(tx).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request={'multipart/form-data': ReceiptUploadSerializer},
        responses={201: TransactionSerializer},
        description="Upload a receipt photo, invoice or bank statement. The AI model extracts the transaction.",
        tags=['transactions'],
    )
    @action(detail=False, methods=['post'], parser_classes=[MultiPartParser, FormParser])
    def scan(self, request):
        """
        Create a transaction from an uploaded document.

        POST /api/transactions/scan/
        """
        upload_serializer = ReceiptUploadSerializer(data=request.data)
        upload_serializer.is_valid(raise_exception=True)
        upload = upload_serializer.validated_data['file']

        mime_type = upload.content_type or 'application/octet-stream'
        if not (mime_type.startswith('image/') or mime_type == 'application/pdf'):
            raise UnsupportedDocumentError()

        max_bytes = settings.RECEIPT_MAX_UPLOAD_MB * 1024 * 1024
        if upload.size > max_bytes:
            raise DocumentTooLargeError(
                f'Document is larger than {settings.RECEIPT_MAX_UPLOAD_MB} MB.'
            )

        try:
            tx = scan_receipt(owner=request.user, data=upload.read(), mime_type=mime_type)
        except ReceiptScanError as e:
            return Response({'error': str(e)}, status=status.HTTP_502_BAD_GATEWAY)

        return Response(TransactionSerializer(tx).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        responses={200: BalanceSerializer},
        description="Total income, total expense and current balance.",
        tags=['transactions'],
    )
    @action(detail=False, methods=['get'])
    def balance(self, request):
        """
        GET /api/transactions/balance/
        """
        data = calculate_balance(owner=request.user)
        return Response(BalanceSerializer(data).data)

    @extend_schema(request=None, responses={200: TransactionSerializer}, tags=['transactions'])
    @action(detail=True, methods=['post'])
    def mark_safe(self, request, pk=None):
        """
        Dismiss an anomaly flag on this transaction.

        POST /api/transactions/{id}/mark_safe/
        """
        tx = set_review_status(owner=request.user, transaction_id=pk, status=ReviewStatus.SAFE)
        return Response(TransactionSerializer(tx).data)

    @extend_schema(request=None, responses={200: TransactionSerializer}, tags=['transactions'])
    @action(detail=True, methods=['post'])
    def flag_fraud(self, request, pk=None):
        """
        Confirm an anomaly flag on this transaction.

        POST /api/transactions/{id}/flag_fraud/
        """
        tx = set_review_status(owner=request.user, transaction_id=pk, status=ReviewStatus.FLAGGED)
        logger.info("Transaction %s flagged as fraud by user %s", tx.id, request.user.id)
        return Response(TransactionSerializer(tx).data)
