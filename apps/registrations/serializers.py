from rest_framework import serializers
from .models import YouthRegistration, EmploymentStatus


class YouthRegistrationSerializer(serializers.ModelSerializer):
    """Full registration record, as seen by staff."""

    class Meta:
        model = YouthRegistration
        fields = [
            'id',
            'full_name',
            'gender',
            'age_range',
            'photo_url',
            'neighborhood',
            'contact1',
            'contact2',
            'marital_status',
            'employment_status',
            'work_type',
            'education_level',
            'conversion_years',
            'water_baptism',
            'holy_spirit_baptism',
            'message',
            'assigned_group',
            'registered_at',
        ]
        read_only_fields = fields


class YouthRegistrationCreateSerializer(serializers.ModelSerializer):
    """Input serializer for the public registration form."""

    class Meta:
        model = YouthRegistration
        fields = [
            'full_name',
            'gender',
            'age_range',
            'photo_url',
            'neighborhood',
            'contact1',
            'contact2',
            'marital_status',
            'employment_status',
            'work_type',
            'education_level',
            'conversion_years',
            'water_baptism',
            'holy_spirit_baptism',
            'message',
        ]
        extra_kwargs = {
            'water_baptism': {'required': True},
            'holy_spirit_baptism': {'required': True},
        }

    def validate_full_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Full name is required')
        return value

    def validate_neighborhood(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Neighborhood is required')
        return value

    def validate_contact1(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Contact is required')
        return value

    def validate(self, attrs):
        """Workers must tell what kind of work they do."""
        if attrs['employment_status'] == EmploymentStatus.WORKER and not attrs.get('work_type'):
            raise serializers.ValidationError({
                'work_type': 'Work type is required for workers'
            })
        return attrs


class RegistrationResultSerializer(serializers.Serializer):
    """Response returned after a successful registration."""

    message = serializers.CharField()
    group = serializers.CharField()
    registration = YouthRegistrationSerializer()


class GroupStatisticsSerializer(serializers.Serializer):
    """Headcounts of one group."""

    name = serializers.CharField()
    total = serializers.IntegerField()
    married_count = serializers.IntegerField()
    other_marital_count = serializers.IntegerField()
    worker_count = serializers.IntegerField()
    student_count = serializers.IntegerField()
    unemployed_count = serializers.IntegerField()
    male_count = serializers.IntegerField()
    female_count = serializers.IntegerField()


class GroupStatisticsOverviewSerializer(serializers.Serializer):
    """Dashboard overview across the whole roster."""

    total_registrations = serializers.IntegerField()
    groups = GroupStatisticsSerializer(many=True)


class GroupMemberSerializer(serializers.ModelSerializer):
    """Member listing for a group leader."""

    class Meta:
        model = YouthRegistration
        fields = [
            'id',
            'full_name',
            'gender',
            'age_range',
            'neighborhood',
            'contact1',
            'contact2',
            'marital_status',
            'employment_status',
            'registered_at',
        ]
        read_only_fields = fields
