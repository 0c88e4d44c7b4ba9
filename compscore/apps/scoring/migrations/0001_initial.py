import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('events', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Entry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('participant_id', models.CharField(max_length=64)),
                ('participant_name', models.CharField(blank=True, default='', max_length=160)),
                ('group', models.CharField(choices=[('junior', 'Junior'), ('senior', 'Senior')], default='junior', max_length=8)),
                ('round', models.PositiveSmallIntegerField(choices=[(1, 'Ronda 1'), (2, 'Ronda 2')])),
                ('score', models.FloatField(help_text='Puntaje (>= 0).')),
                ('time', models.FloatField(help_text='Tiempo en segundos (> 0).')),
                ('timestamp', models.DateTimeField(default=django.utils.timezone.now)),
                ('sub_event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='entries', to='events.subevent')),
            ],
            options={
                'verbose_name_plural': 'entries',
                'ordering': ('-timestamp',),
                'indexes': [models.Index(fields=['sub_event', 'participant_id', 'round'], name='entry_composite_idx')],
            },
        ),
    ]
