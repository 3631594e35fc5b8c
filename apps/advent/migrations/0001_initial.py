# Generated manually for the calendar tables

import uuid
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('events', '0001_initial'),
        ('bottles', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='CalendarDay',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('day_number', models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(24)])),
                ('reveal_date', models.DateField(blank=True, null=True)),
                ('is_revealed', models.BooleanField(default=False)),
                ('bottle_submission', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='calendar_days', to='bottles.bottlesubmission')),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='calendar_days', to='events.event')),
            ],
            options={
                'db_table': 'calendar_days',
                'ordering': ['event', 'day_number'],
            },
        ),
        migrations.AddConstraint(
            model_name='calendarday',
            constraint=models.UniqueConstraint(fields=('event', 'day_number'), name='unique_day_per_event'),
        ),
        migrations.AddConstraint(
            model_name='calendarday',
            constraint=models.CheckConstraint(condition=models.Q(('day_number__gte', 1), ('day_number__lte', 24)), name='calendar_day_number_range'),
        ),
        migrations.CreateModel(
            name='TastingEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('rating', models.PositiveSmallIntegerField(blank=True, null=True, validators=[MinValueValidator(1), MaxValueValidator(10)])),
                ('tasting_notes', models.TextField(blank=True)),
                ('would_buy_again', models.BooleanField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('calendar_day', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tastings', to='advent.calendarday')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tastings', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'tasting_entries',
                'ordering': ['-updated_at'],
                'indexes': [models.Index(fields=['calendar_day', 'rating'], name='tastings_day_rating_idx')],
                'unique_together': {('calendar_day', 'user')},
            },
        ),
        migrations.CreateModel(
            name='Comment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('content', models.TextField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('calendar_day', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='advent.calendarday')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='comments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'comments',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['calendar_day', 'created_at'], name='comments_day_created_idx')],
            },
        ),
    ]
