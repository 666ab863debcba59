# Generated manually for the settlements app

import uuid
from decimal import Decimal
import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('events', '0001_initial'),
        ('attendees', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Payment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('completed', 'Completed')], default='completed', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='payments', to='events.event')),
                ('from_attendee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='payments_sent', to='attendees.attendee')),
                ('to_attendee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='payments_received', to='attendees.attendee')),
            ],
            options={
                'db_table': 'payments',
                'ordering': ['created_at'],
                'constraints': [
                    models.UniqueConstraint(fields=('event', 'from_attendee', 'to_attendee'), name='unique_payment_per_pair'),
                    models.CheckConstraint(condition=models.Q(('from_attendee', models.F('to_attendee')), _negated=True), name='payment_not_to_self'),
                ],
            },
        ),
    ]
