from django.conf import settings
from django.db import models


class RedemptionStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    APPROVED = 'APPROVED', 'Approved'
    COMPLETED = 'COMPLETED', 'Completed'
    REJECTED = 'REJECTED', 'Rejected'


class Redemption(models.Model):
    """
    A user's claim against a reward.

    Created by the ledger together with the point debit; only the admin
    workflow moves it out of PENDING.
    """
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='redemptions')
    reward = models.ForeignKey('Reward', on_delete=models.PROTECT, related_name='redemptions')
    status = models.CharField(max_length=20, choices=RedemptionStatus.choices, default=RedemptionStatus.PENDING)
    points_spent = models.PositiveIntegerField()
    service_label = models.CharField(max_length=100, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'redemptions'
        ordering = ['-created_at', '-id']
        verbose_name = 'Redemption'
        verbose_name_plural = 'Redemptions'

    def __str__(self):
        return f"{self.user} - {self.reward.title} ({self.get_status_display()})"
