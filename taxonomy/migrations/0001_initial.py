# Generated manually for the taxonomy app
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Vocabulary',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('vid', models.SlugField(help_text="Machine name (e.g., 'contact_subjects')", max_length=32, unique=True)),
                ('name', models.CharField(help_text='Human readable vocabulary name', max_length=255)),
                ('description', models.TextField(blank=True, default='')),
                ('has_mail_field', models.BooleanField(default=False, help_text='Whether terms of this vocabulary expose an email address')),
            ],
            options={
                'verbose_name': 'Vocabulary',
                'verbose_name_plural': 'Vocabularies',
                'db_table': 'taxonomy_vocabulary',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Term',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, default='')),
                ('weight', models.IntegerField(default=0, help_text='Terms with lower weights are listed first')),
                ('mail', models.EmailField(blank=True, default='', help_text='Routing email address', max_length=254)),
                ('status', models.BooleanField(db_index=True, default=True, help_text='Published')),
                ('language', models.CharField(default='en', help_text='Language code of the source values', max_length=12)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('vocabulary', models.ForeignKey(help_text='Vocabulary this term belongs to', on_delete=django.db.models.deletion.CASCADE, related_name='terms', to='taxonomy.vocabulary')),
            ],
            options={
                'verbose_name': 'Term',
                'verbose_name_plural': 'Terms',
                'db_table': 'taxonomy_term',
                'ordering': ['weight', 'name'],
                'indexes': [models.Index(fields=['vocabulary', 'status'], name='taxonomy_term_vocab_status_idx')],
            },
        ),
        migrations.CreateModel(
            name='TermTranslation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('language', models.CharField(max_length=12)),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, default='')),
                ('term', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='translations', to='taxonomy.term')),
            ],
            options={
                'verbose_name': 'Term Translation',
                'verbose_name_plural': 'Term Translations',
                'db_table': 'taxonomy_term_translation',
                'unique_together': {('term', 'language')},
            },
        ),
    ]
