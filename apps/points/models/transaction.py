from django.conf import settings
from django.db import models


class TransactionType(models.TextChoices):
    EARNING = 'earning', 'Points Earned'
    REDEMPTION = 'redemption', 'Points Redeemed'
    ADJUSTMENT = 'adjustment', 'Manual Adjustment'


class PointsTransaction(models.Model):
    """Append-only audit row written with every balance change"""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='points_transactions')
    transaction_type = models.CharField(max_length=20, choices=TransactionType.choices)
    amount = models.IntegerField()  # Positive for earning, negative for spending
    balance_after = models.PositiveIntegerField()
    reason = models.CharField(max_length=200, blank=True)
    reference_id = models.CharField(max_length=100, blank=True, null=True)  # Redemption, referral, etc.
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'points_transactions'
        ordering = ['-created_at', '-id']
        verbose_name = 'Points Transaction'
        verbose_name_plural = 'Points Transactions'

    def __str__(self):
        return f"{self.user} - {self.amount} points ({self.get_transaction_type_display()})"
