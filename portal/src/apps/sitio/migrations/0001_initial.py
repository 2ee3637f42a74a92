from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ConfiguracionSitio',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nombre', models.CharField(default='Portal', max_length=200, verbose_name='nombre del sitio')),
                ('correo', models.EmailField(blank=True, default='', max_length=254, verbose_name='correo del sitio')),
                ('pagina_403', models.CharField(blank=True, default='', max_length=255, verbose_name='página 403 (acceso denegado)')),
                ('pagina_404', models.CharField(blank=True, default='', max_length=255, verbose_name='página 404 (no encontrada)')),
            ],
            options={
                'verbose_name': 'configuración del sitio',
                'verbose_name_plural': 'configuración del sitio',
            },
        ),
        migrations.CreateModel(
            name='AliasRuta',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('alias', models.CharField(max_length=255, unique=True)),
                ('ruta', models.CharField(max_length=255)),
            ],
            options={
                'verbose_name': 'alias de ruta',
                'verbose_name_plural': 'alias de rutas',
            },
        ),
    ]
