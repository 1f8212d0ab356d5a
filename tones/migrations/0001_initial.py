from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Option',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=191, unique=True)),
                ('value', models.TextField(blank=True, default='')),
            ],
        ),
        migrations.CreateModel(
            name='Tone',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200, verbose_name='title')),
                ('status', models.CharField(choices=[('publish', 'Published'), ('draft', 'Draft')], default='publish', max_length=20, verbose_name='status')),
                ('date', models.DateTimeField(default=django.utils.timezone.now, verbose_name='date')),
                ('modified', models.DateTimeField(auto_now=True, verbose_name='modified')),
            ],
            options={
                'verbose_name': 'Tone',
                'verbose_name_plural': 'Tones',
                'ordering': ['-date', '-id'],
            },
        ),
        migrations.CreateModel(
            name='ToneMeta',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('meta_key', models.CharField(max_length=255)),
                ('meta_value', models.TextField(blank=True, default='')),
                ('tone', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='meta', to='tones.tone')),
            ],
        ),
        migrations.AddConstraint(
            model_name='tonemeta',
            constraint=models.UniqueConstraint(fields=('tone', 'meta_key'), name='tones_unique_meta_key'),
        ),
    ]
