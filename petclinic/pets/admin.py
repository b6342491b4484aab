from django.contrib import admin

from .models import Owner, Pet, PetType


@admin.register(Owner)
class OwnerAdmin(admin.ModelAdmin):
    list_display = ('last_name', 'first_name', 'city', 'telephone')
    search_fields = ('last_name', 'first_name', 'email')


@admin.register(PetType)
class PetTypeAdmin(admin.ModelAdmin):
    list_display = ('name',)


@admin.register(Pet)
class PetAdmin(admin.ModelAdmin):
    list_display = ('name', 'identification_number', 'type', 'owner', 'health_status')
    list_filter = ('health_status', 'type')
    search_fields = ('name', 'identification_number')
