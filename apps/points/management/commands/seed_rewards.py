from django.core.management.base import BaseCommand
from apps.points.models import Reward


class Command(BaseCommand):
    help = 'Create the default reward catalog'

    def handle(self, *args, **options):
        rewards_data = [
            {
                'title': '₹5,000 Home Service',
                'description': (
                    'Get ₹5,000 worth of free home services including Cleaning, Repairs, or Painting.'
                ),
                'cost': 20000,
                'is_active': True,
            },
        ]

        created_count = 0
        for reward_data in rewards_data:
            reward, created = Reward.objects.get_or_create(
                title=reward_data['title'],
                defaults=reward_data
            )

            if created:
                created_count += 1
                self.stdout.write(self.style.SUCCESS(f'Created reward: {reward.title}'))
            else:
                self.stdout.write(self.style.WARNING(f'Reward already exists: {reward.title}'))

        self.stdout.write(
            self.style.SUCCESS(f'Reward catalog ready. Created: {created_count}')
        )
