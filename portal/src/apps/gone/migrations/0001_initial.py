from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ConfiguracionGone',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('pagina_410', models.CharField(blank=True, default='', help_text='Esta página se muestra cuando el documento solicitado ya no existe para el usuario actual. Dejar en blanco para mostrar una página genérica.', max_length=255, verbose_name='página 410 (gone) por defecto')),
            ],
            options={
                'verbose_name': 'configuración de página 410',
                'verbose_name_plural': 'configuración de página 410',
            },
        ),
    ]
