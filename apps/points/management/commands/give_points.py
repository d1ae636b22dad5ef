from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from apps.common.validators import normalize_phone
from apps.points.exceptions import InvalidPointsAmountError
from apps.points.models import TransactionType
from apps.points.services import PointsService


class Command(BaseCommand):
    help = 'Credit points to a user by phone number (manual adjustment)'

    def add_arguments(self, parser):
        parser.add_argument('--phone', required=True, help='Phone number of the user')
        parser.add_argument('--points', type=int, required=True, help='Points to add')
        parser.add_argument(
            '--reason',
            default='Manual adjustment',
            help='Reason recorded on the points transaction',
        )

    def handle(self, *args, **options):
        User = get_user_model()
        phone = normalize_phone(options['phone'])

        try:
            user = User.objects.get(phone=phone)
        except User.DoesNotExist:
            raise CommandError(f'User with phone {phone} not found')

        try:
            result = PointsService().add_points(
                user.pk,
                options['points'],
                reason=options['reason'],
                transaction_type=TransactionType.ADJUSTMENT,
                reference_id='manual_adjustment',
            )
        except InvalidPointsAmountError as e:
            raise CommandError(f'Invalid points amount: {e}')

        self.stdout.write(
            self.style.SUCCESS(
                f"Added {result['added']:,} points to {user.name}. New balance: {result['new_balance']:,}"
            )
        )
