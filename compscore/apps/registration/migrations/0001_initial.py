import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('events', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='RosterItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('participant_id', models.CharField(max_length=64)),
                ('name', models.CharField(blank=True, default='', max_length=160)),
                ('group', models.CharField(choices=[('junior', 'Junior'), ('senior', 'Senior')], default='junior', max_length=8)),
                ('sub_event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='roster', to='events.subevent')),
            ],
            options={
                'ordering': ('sub_event', 'participant_id'),
                'unique_together': {('sub_event', 'participant_id')},
            },
        ),
    ]
