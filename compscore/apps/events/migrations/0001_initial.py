import uuid

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Competition',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('award_first', models.PositiveSmallIntegerField(default=15, help_text='% del grupo con primer premio.', validators=[django.core.validators.MaxValueValidator(100)])),
                ('award_second', models.PositiveSmallIntegerField(default=25, help_text='% del grupo con segundo premio.', validators=[django.core.validators.MaxValueValidator(100)])),
                ('award_third', models.PositiveSmallIntegerField(default=30, help_text='% del grupo con tercer premio.', validators=[django.core.validators.MaxValueValidator(100)])),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Competencia',
                'verbose_name_plural': 'Competencia',
            },
        ),
        migrations.CreateModel(
            name='SubEvent',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=160)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ('created_at', 'name'),
            },
        ),
    ]
