# Generated manually for staff accounts

import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('email', models.EmailField(db_index=True, max_length=255, unique=True)),
                ('display_name', models.CharField(blank=True, max_length=100)),
                ('role', models.CharField(choices=[('admin', 'Admin'), ('group_leader', 'Group leader')], default='group_leader', max_length=20)),
                ('group_name', models.CharField(blank=True, choices=[('Disciples', 'Disciples'), ('Les Élus', 'Les Élus'), ('Sel et Lumière', 'Sel et Lumière'), ("Porteurs de l'Alliance", "Porteurs de l'Alliance"), ('Bergerie du Maître', 'Bergerie du Maître'), ("Vases d'Honneur", "Vases d'Honneur"), ('Sacerdoce Royal', 'Sacerdoce Royal'), ('Flambeaux', 'Flambeaux'), ('Serviteurs Fidèles', 'Serviteurs Fidèles'), ('Héritiers du Royaume', 'Héritiers du Royaume')], max_length=50)),
                ('is_active', models.BooleanField(default=True)),
                ('is_staff', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('last_login', models.DateTimeField(blank=True, null=True)),
                ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
                ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
            ],
            options={
                'db_table': 'users',
                'indexes': [models.Index(fields=['role', 'group_name'], name='users_role_group_idx')],
            },
        ),
    ]
