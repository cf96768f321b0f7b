from decimal import Decimal

from django.core.management.base import BaseCommand

from turfs.models import Turf


class Command(BaseCommand):
    help = 'Creates sample turfs for local development'

    def handle(self, *args, **kwargs):
        turfs = [
            {
                'name': 'Green Field Arena',
                'location': 'Gachibowli, Hyderabad',
                'description': '5-a-side artificial grass turf with floodlights for night games.',
                'price': Decimal('1200.00'),
                'capacity': 10,
                'features': ['Floodlights', 'Parking', 'Changing room'],
            },
            {
                'name': 'Kickoff Sports Hub',
                'location': 'Madhapur, Hyderabad',
                'description': '7-a-side turf with spectator seating and a cafe.',
                'price': Decimal('1500.00'),
                'capacity': 14,
                'features': ['Floodlights', 'Seating', 'Cafe'],
            },
            {
                'name': 'Striker Box Cricket',
                'location': 'Kondapur, Hyderabad',
                'description': 'Netted box cricket turf, equipment available on request.',
                'price': Decimal('1000.00'),
                'capacity': 12,
                'features': ['Equipment rental', 'Showers'],
            },
            {
                'name': 'Rooftop Turf 360',
                'location': 'Banjara Hills, Hyderabad',
                'description': 'Rooftop turf with a city view, best booked for evening slots.',
                'price': Decimal('1800.00'),
                'capacity': 10,
                'features': ['Floodlights', 'Drinking water', 'First aid'],
            },
        ]

        created_count = 0
        for turf_data in turfs:
            turf, created = Turf.objects.get_or_create(
                name=turf_data.pop('name'),
                defaults=turf_data,
            )

            if created:
                created_count += 1
                self.stdout.write(self.style.SUCCESS(f'Created turf: {turf.name}'))
            else:
                self.stdout.write(self.style.WARNING(f'Turf already exists: {turf.name}'))

        self.stdout.write(self.style.SUCCESS(f'Created {created_count} new turfs'))
