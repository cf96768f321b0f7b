from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('booking', '0001_initial'),
    ]

    operations = [
        migrations.AddConstraint(
            model_name='booking',
            constraint=models.UniqueConstraint(
                condition=models.Q(('status', 'cancelled'), _negated=True),
                fields=('turf', 'booking_date', 'start_time'),
                name='booking_unique_active_slot',
            ),
        ),
    ]
