from django.db import migrations


def crear_configuracion(apps, schema_editor):
    ConfiguracionGone = apps.get_model('gone', 'ConfiguracionGone')
    ConfiguracionGone.objects.get_or_create(pk=1, defaults={'pagina_410': ''})


def borrar_configuracion(apps, schema_editor):
    ConfiguracionGone = apps.get_model('gone', 'ConfiguracionGone')
    ConfiguracionGone.objects.filter(pk=1).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('gone', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(crear_configuracion, borrar_configuracion),
    ]
