from django.db import migrations, models
from django.db.models import Q

PLACEHOLDER_DESCRIPTION = 'Event description to be updated.'


def fill_blank_descriptions(apps, schema_editor):
    """
    Events created before the description became required get a placeholder.
    """
    Event = apps.get_model('events', 'Event')
    updated = Event.objects.filter(Q(description='') | Q(description__isnull=True)).update(
        description=PLACEHOLDER_DESCRIPTION
    )
    if updated:
        print(f"\n[INFO] Filled in {updated} blank event description(s).")


class Migration(migrations.Migration):

    dependencies = [
        ('events', '0001_initial'),
    ]

    operations = [
        # Backfill is one-way, the original blank state is unknown
        migrations.RunPython(fill_blank_descriptions, migrations.RunPython.noop),
        migrations.AlterField(
            model_name='event',
            name='description',
            field=models.TextField(),
        ),
    ]
