# ==========================================
# apps/registrations/models.py
# ==========================================

from django.db import models
import uuid


class YouthGroup(models.TextChoices):
    """Fixed roster of youth groups, in declaration order."""
    DISCIPLES = 'Disciples', 'Disciples'
    LES_ELUS = 'Les Élus', 'Les Élus'
    SEL_ET_LUMIERE = 'Sel et Lumière', 'Sel et Lumière'
    PORTEURS_DE_L_ALLIANCE = "Porteurs de l'Alliance", "Porteurs de l'Alliance"
    BERGERIE_DU_MAITRE = 'Bergerie du Maître', 'Bergerie du Maître'
    VASES_D_HONNEUR = "Vases d'Honneur", "Vases d'Honneur"
    SACERDOCE_ROYAL = 'Sacerdoce Royal', 'Sacerdoce Royal'
    FLAMBEAUX = 'Flambeaux', 'Flambeaux'
    SERVITEURS_FIDELES = 'Serviteurs Fidèles', 'Serviteurs Fidèles'
    HERITIERS_DU_ROYAUME = 'Héritiers du Royaume', 'Héritiers du Royaume'


class Gender(models.TextChoices):
    MALE = 'male', 'Homme'
    FEMALE = 'female', 'Femme'


class AgeRange(models.TextChoices):
    AGE_13_17 = '13-17', '13-17'
    AGE_18_24 = '18-24', '18-24'
    AGE_25_30 = '25-30', '25-30'
    AGE_31_40 = '31-40', '31-40'
    AGE_41_PLUS = '41+', '41+'


class MaritalStatus(models.TextChoices):
    MARRIED = 'married', 'Marié(e)'
    SINGLE = 'single', 'Célibataire'
    WIDOWED = 'widowed', 'Veuf(ve)'
    ENGAGED = 'engaged', 'Fiancé(e)'
    COHABITING = 'cohabiting', 'Concubinage'


class EmploymentStatus(models.TextChoices):
    STUDENT = 'student', 'Étudiant(e)'
    WORKER = 'worker', 'Travailleur'
    UNEMPLOYED = 'unemployed', 'Sans emploi'


class WorkType(models.TextChoices):
    PUBLIC = 'public', 'Public'
    PRIVATE = 'private', 'Privé'
    ENTREPRENEUR = 'entrepreneur', 'Entrepreneur'
    IN_TRAINING = 'in_training', 'Je vais au cours'


class EducationLevel(models.TextChoices):
    NONE = 'none', 'Aucun'
    PRIMARY = 'primary', 'Primaire'
    SECONDARY = 'secondary', 'Secondaire'
    QUALIFYING_TRAINING = 'qualifying_training', 'Formation qualifiante'
    BAC = 'bac', 'Bac'
    BTS = 'bts', 'BTS'
    DUT = 'dut', 'DUT'
    LICENCE = 'licence', 'Licence'
    MASTER = 'master', 'Master'
    DOCTORATE = 'doctorate', 'Doctorat'
    PROFESSIONAL_TRAINING = 'professional_training', 'Formation professionnelle'


class ConversionYears(models.TextChoices):
    YEARS_0_3 = '0-3', '0-3'
    YEARS_4_7 = '4-7', '4-7'
    YEARS_7_10 = '7-10', '7-10'
    YEARS_10_20 = '10-20', '10-20'
    YEARS_20_40 = '20-40', '20-40'
    YEARS_40_PLUS = '40+', '40+'


class YouthRegistration(models.Model):
    """A registered youth and the group they were assigned to."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Personal information
    full_name = models.CharField(max_length=200)
    gender = models.CharField(max_length=10, choices=Gender.choices)
    age_range = models.CharField(max_length=10, choices=AgeRange.choices)
    photo_url = models.URLField(blank=True)
    neighborhood = models.CharField(max_length=200)
    contact1 = models.CharField(max_length=30)
    contact2 = models.CharField(max_length=30, blank=True)

    # Situation
    marital_status = models.CharField(max_length=20, choices=MaritalStatus.choices)
    employment_status = models.CharField(max_length=20, choices=EmploymentStatus.choices)
    work_type = models.CharField(max_length=20, choices=WorkType.choices, blank=True)
    education_level = models.CharField(max_length=30, choices=EducationLevel.choices)

    # Spiritual situation
    conversion_years = models.CharField(max_length=10, choices=ConversionYears.choices)
    water_baptism = models.BooleanField(default=False)
    holy_spirit_baptism = models.BooleanField(default=False)

    message = models.TextField(blank=True)

    assigned_group = models.CharField(max_length=50, choices=YouthGroup.choices, db_index=True)
    registered_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'youth_registrations'
        indexes = [
            models.Index(fields=['assigned_group', 'full_name'], name='youth_reg_group_name_idx'),
            models.Index(fields=['full_name', 'neighborhood'], name='youth_reg_name_hood_idx'),
        ]
        ordering = ['-registered_at']

    def __str__(self):
        return f"{self.full_name} ({self.assigned_group})"
