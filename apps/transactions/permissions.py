"""
Custom permission classes for transactions app.
"""
from rest_framework.permissions import BasePermission


class IsTransactionOwner(BasePermission):
    """
    Allows access only to the user who owns the transaction.

    Usage:
        class TransactionViewSet(viewsets.ModelViewSet):
            permission_classes = [IsAuthenticated, IsTransactionOwner]
    """

    message = 'You do not have permission to access this transaction.'

    def has_object_permission(self, request, view, obj):
        return obj.owner_id == request.user.id
