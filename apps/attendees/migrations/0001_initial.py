# Generated manually for the attendees app

import uuid
import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('events', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Attendee',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100)),
                ('exclude_from_split', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attendees', to='events.event')),
            ],
            options={
                'db_table': 'attendees',
                'ordering': ['created_at'],
                'indexes': [
                    models.Index(fields=['event', 'created_at'], name='attendees_event_i_3a9d41_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='BankInfo',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('holder_name', models.CharField(max_length=100)),
                ('bank_name', models.CharField(max_length=100)),
                ('clabe', models.CharField(max_length=18, validators=[django.core.validators.RegexValidator(message='CLABE must be exactly 18 digits', regex='^\\d{18}$')])),
                ('account_number', models.CharField(blank=True, max_length=20, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('attendee', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='bank_info', to='attendees.attendee')),
            ],
            options={
                'db_table': 'bank_info',
                'verbose_name_plural': 'bank info',
            },
        ),
    ]
