from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Coupon',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(max_length=64, unique=True)),
                ('description', models.CharField(blank=True, max_length=255)),
                ('discountType', models.CharField(choices=[('PERCENTAGE', 'Percentage'), ('FIXED', 'Fixed Amount')], max_length=10)),
                ('discountValue', models.DecimalField(decimal_places=2, max_digits=12)),
                ('minOrderAmount', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('maxDiscountAmount', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('usageLimit', models.PositiveIntegerField(blank=True, null=True)),
                ('usedCount', models.PositiveIntegerField(default=0)),
                ('validFrom', models.DateTimeField(blank=True, null=True)),
                ('validUntil', models.DateTimeField()),
                ('active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
        ),
    ]
