# Generated manually for the events app

import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Event',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('nano_id', models.CharField(db_index=True, editable=False, max_length=10, unique=True)),
                ('title', models.CharField(max_length=255)),
                ('event_date', models.DateTimeField()),
                ('location', models.CharField(blank=True, max_length=255, null=True)),
                ('maps_url', models.URLField(blank=True, max_length=500, null=True)),
                ('description', models.TextField(blank=True)),
                ('people_count', models.PositiveIntegerField(default=0)),
                ('cancelled_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'events',
                'ordering': ['-event_date'],
                'indexes': [
                    models.Index(fields=['event_date'], name='events_event_d_5c1f3a_idx'),
                    models.Index(fields=['cancelled_at'], name='events_cancell_8e2b7d_idx'),
                ],
            },
        ),
    ]
