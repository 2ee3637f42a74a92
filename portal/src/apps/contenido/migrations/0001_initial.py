from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Nodo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('titulo', models.CharField(max_length=200)),
                ('cuerpo', models.TextField(blank=True, default='')),
                ('tipo', models.CharField(default='pagina', max_length=50)),
                ('publicado', models.BooleanField(default=True)),
                ('retirado', models.BooleanField(default=False)),
                ('fecha', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'permissions': [('ver_no_publicado', 'Puede ver contenido no publicado')],
            },
        ),
    ]
