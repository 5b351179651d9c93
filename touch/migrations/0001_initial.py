# Generated manually for the touch app
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Submission',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('name', models.CharField(help_text='Name of the person contacting us', max_length=255)),
                ('mail', models.EmailField(help_text='Email address for follow-up', max_length=254)),
                ('subject_id', models.PositiveBigIntegerField(db_index=True, default=0, help_text='Taxonomy term id of the subject at submission time')),
                ('subject_name', models.CharField(help_text='Subject name at submission time', max_length=255)),
                ('message', models.TextField()),
                ('newsletter', models.BooleanField(default=False, help_text='Newsletter opt-in')),
                ('language', models.CharField(help_text="Submitter's language code", max_length=12)),
                ('timestamp', models.PositiveBigIntegerField(db_index=True, help_text='Submission time (epoch seconds)')),
                ('ip_address', models.CharField(blank=True, default='', max_length=45)),
                ('ip_address_proxy', models.CharField(blank=True, default='', help_text='X-Forwarded-For header', max_length=255)),
                ('user_agent', models.TextField(blank=True, default='')),
            ],
            options={
                'verbose_name': 'Submission',
                'verbose_name_plural': 'Submissions',
                'db_table': 'submissions',
                'ordering': ['-timestamp'],
            },
        ),
    ]
