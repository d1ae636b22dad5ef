from django.urls import path
from . import views

app_name = 'points'

urlpatterns = [
    # User-facing endpoints
    path('', views.points_balance, name='balance'),
    path('redeem/', views.redeem_points, name='redeem'),
    path('rewards/', views.get_rewards, name='rewards'),
    path('rewards/<int:reward_id>/redeem/', views.redeem_reward, name='redeem_reward'),
    path('redemptions/', views.get_redemptions, name='redemptions'),
    path('transactions/', views.get_points_transactions, name='transactions'),

    # Internal endpoints (for integration with other services)
    path('internal/award/', views.internal_award_points, name='internal_award'),
]
