import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Transaction',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField()),
                ('merchant', models.CharField(max_length=200)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[MinValueValidator(Decimal('0.00'))])),
                ('category', models.CharField(default='General', max_length=100)),
                ('type', models.CharField(choices=[('INCOME', 'Income'), ('EXPENSE', 'Expense')], default='EXPENSE', max_length=10)),
                ('description', models.TextField(blank=True)),
                ('source', models.CharField(choices=[('MANUAL', 'Manual entry'), ('SCAN', 'Scanned document'), ('DEMO', 'Demo data')], default='MANUAL', max_length=10)),
                ('review_status', models.CharField(choices=[('UNREVIEWED', 'Unreviewed'), ('SAFE', 'Marked safe'), ('FLAGGED', 'Flagged as fraud')], default='UNREVIEWED', max_length=12)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='transactions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'transactions',
                'ordering': ['-date', '-created_at'],
                'indexes': [
                    models.Index(fields=['owner', 'date'], name='tx_owner_date_idx'),
                    models.Index(fields=['owner', 'type'], name='tx_owner_type_idx'),
                    models.Index(fields=['owner', 'category'], name='tx_owner_category_idx'),
                ],
            },
        ),
    ]
