import django.db.models.deletion
from django.db import migrations, models

import hiretrack.users.managers


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('organization', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('modified_at', models.DateTimeField(auto_now=True)),
                ('email', models.EmailField(max_length=255, unique=True, verbose_name='user email')),
                ('first_name', models.CharField(max_length=150, verbose_name='First Name')),
                ('last_name', models.CharField(blank=True, max_length=150, verbose_name='Last Name')),
                ('role', models.CharField(choices=[('admin', 'Admin'), ('hiring_manager', 'Hiring Manager'), ('recruiter', 'Recruiter'), ('interviewer', 'Interviewer'), ('coordinator', 'Coordinator')], db_index=True, default='recruiter', max_length=20)),
                ('is_active', models.BooleanField(default=True)),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='users', to='organization.company')),
            ],
            options={
                'abstract': False,
            },
            managers=[
                ('objects', hiretrack.users.managers.UserManager()),
            ],
        ),
    ]
