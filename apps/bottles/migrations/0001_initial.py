# Generated manually for the bottle submissions table

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('events', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='BottleSubmission',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('whiskey_name', models.CharField(max_length=200)),
                ('distillery', models.CharField(blank=True, max_length=200)),
                ('country', models.CharField(blank=True, max_length=100)),
                ('style', models.CharField(blank=True, max_length=100)),
                ('abv', models.DecimalField(blank=True, decimal_places=1, max_digits=4, null=True, validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))])),
                ('volume', models.CharField(blank=True, max_length=50)),
                ('price', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, validators=[MinValueValidator(Decimal('0'))])),
                ('purchase_url', models.URLField(blank=True, max_length=500)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='bottle_submissions', to='events.event')),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='bottle_submissions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'bottle_submissions',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['event', 'created_at'], name='bottles_event_created_idx')],
            },
        ),
        migrations.AddConstraint(
            model_name='bottlesubmission',
            constraint=models.UniqueConstraint(condition=models.Q(('user__isnull', False)), fields=('event', 'user'), name='unique_submission_per_event_user'),
        ),
    ]
