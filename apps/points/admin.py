from django.contrib import admin
from .models import PointsTransaction, Redemption, Reward


@admin.register(Reward)
class RewardAdmin(admin.ModelAdmin):
    list_display = ['title', 'cost', 'is_active', 'created_at']
    list_filter = ['is_active', 'created_at']
    search_fields = ['title', 'description']
    list_editable = ['is_active']


@admin.register(Redemption)
class RedemptionAdmin(admin.ModelAdmin):
    list_display = ['user', 'reward', 'points_spent', 'service_label', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['user__phone', 'user__name', 'reward__title']
    readonly_fields = ['user', 'reward', 'points_spent', 'service_label', 'created_at', 'updated_at']
    list_editable = ['status']

    def has_add_permission(self, request):
        return False  # Redemptions are created by the points ledger


@admin.register(PointsTransaction)
class PointsTransactionAdmin(admin.ModelAdmin):
    list_display = ['user', 'transaction_type', 'amount', 'balance_after', 'reason', 'created_at']
    list_filter = ['transaction_type', 'created_at']
    search_fields = ['user__phone', 'reason', 'reference_id']
    readonly_fields = ['created_at']

    def has_add_permission(self, request):
        return False  # Transactions are created programmatically

    def has_change_permission(self, request, obj=None):
        return False  # Transactions should not be modified

    def has_delete_permission(self, request, obj=None):
        return False
