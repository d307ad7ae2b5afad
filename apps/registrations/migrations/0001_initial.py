# Generated manually for youth registrations

import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='YouthRegistration',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('full_name', models.CharField(max_length=200)),
                ('gender', models.CharField(choices=[('male', 'Homme'), ('female', 'Femme')], max_length=10)),
                ('age_range', models.CharField(choices=[('13-17', '13-17'), ('18-24', '18-24'), ('25-30', '25-30'), ('31-40', '31-40'), ('41+', '41+')], max_length=10)),
                ('photo_url', models.URLField(blank=True)),
                ('neighborhood', models.CharField(max_length=200)),
                ('contact1', models.CharField(max_length=30)),
                ('contact2', models.CharField(blank=True, max_length=30)),
                ('marital_status', models.CharField(choices=[('married', 'Marié(e)'), ('single', 'Célibataire'), ('widowed', 'Veuf(ve)'), ('engaged', 'Fiancé(e)'), ('cohabiting', 'Concubinage')], max_length=20)),
                ('employment_status', models.CharField(choices=[('student', 'Étudiant(e)'), ('worker', 'Travailleur'), ('unemployed', 'Sans emploi')], max_length=20)),
                ('work_type', models.CharField(blank=True, choices=[('public', 'Public'), ('private', 'Privé'), ('entrepreneur', 'Entrepreneur'), ('in_training', 'Je vais au cours')], max_length=20)),
                ('education_level', models.CharField(choices=[('none', 'Aucun'), ('primary', 'Primaire'), ('secondary', 'Secondaire'), ('qualifying_training', 'Formation qualifiante'), ('bac', 'Bac'), ('bts', 'BTS'), ('dut', 'DUT'), ('licence', 'Licence'), ('master', 'Master'), ('doctorate', 'Doctorat'), ('professional_training', 'Formation professionnelle')], max_length=30)),
                ('conversion_years', models.CharField(choices=[('0-3', '0-3'), ('4-7', '4-7'), ('7-10', '7-10'), ('10-20', '10-20'), ('20-40', '20-40'), ('40+', '40+')], max_length=10)),
                ('water_baptism', models.BooleanField(default=False)),
                ('holy_spirit_baptism', models.BooleanField(default=False)),
                ('message', models.TextField(blank=True)),
                ('assigned_group', models.CharField(choices=[('Disciples', 'Disciples'), ('Les Élus', 'Les Élus'), ('Sel et Lumière', 'Sel et Lumière'), ("Porteurs de l'Alliance", "Porteurs de l'Alliance"), ('Bergerie du Maître', 'Bergerie du Maître'), ("Vases d'Honneur", "Vases d'Honneur"), ('Sacerdoce Royal', 'Sacerdoce Royal'), ('Flambeaux', 'Flambeaux'), ('Serviteurs Fidèles', 'Serviteurs Fidèles'), ('Héritiers du Royaume', 'Héritiers du Royaume')], db_index=True, max_length=50)),
                ('registered_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'youth_registrations',
                'ordering': ['-registered_at'],
                'indexes': [
                    models.Index(fields=['assigned_group', 'full_name'], name='youth_reg_group_name_idx'),
                    models.Index(fields=['full_name', 'neighborhood'], name='youth_reg_name_hood_idx'),
                ],
            },
        ),
    ]
