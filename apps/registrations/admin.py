# ==========================================
# apps/registrations/admin.py
# ==========================================

from django.contrib import admin
from apps.registrations.models import YouthRegistration


@admin.register(YouthRegistration)
class YouthRegistrationAdmin(admin.ModelAdmin):
    """Admin interface for youth registrations."""

    list_display = [
        'full_name',
        'assigned_group',
        'gender',
        'marital_status',
        'employment_status',
        'neighborhood',
        'registered_at',
    ]
    list_filter = ['assigned_group', 'gender', 'marital_status', 'employment_status', 'registered_at']
    search_fields = ['full_name', 'neighborhood', 'contact1', 'contact2']
    readonly_fields = ['assigned_group', 'registered_at']
    date_hierarchy = 'registered_at'
    ordering = ['-registered_at']

    fieldsets = (
        ('Personal Information', {
            'fields': ('full_name', 'gender', 'age_range', 'photo_url', 'neighborhood', 'contact1', 'contact2')
        }),
        ('Situation', {
            'fields': ('marital_status', 'employment_status', 'work_type', 'education_level')
        }),
        ('Spiritual Situation', {
            'fields': ('conversion_years', 'water_baptism', 'holy_spirit_baptism')
        }),
        ('Message', {
            'fields': ('message',),
            'classes': ('collapse',)
        }),
        ('Assignment', {
            'fields': ('assigned_group', 'registered_at'),
        }),
    )

    def has_add_permission(self, request):
        """Registrations go through the balancer, not the admin form."""
        return False
