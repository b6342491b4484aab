from django.contrib import admin

from .models import Visit


@admin.register(Visit)
class VisitAdmin(admin.ModelAdmin):
    list_display = ('visit_number', 'pet', 'type', 'visit_start', 'visit_end', 'assigned_nurse', 'treatment_status')
    list_filter = ('type', 'treatment_status', 'assigned_nurse')
    search_fields = ('visit_number', 'pet__name', 'description')
    readonly_fields = ('visit_number', 'created_at', 'updated_at')
    date_hierarchy = 'visit_start'
    list_select_related = ('pet', 'assigned_nurse')
