"""
users/admin.py — Django Admin configuration for users

Stock UserAdmin plus the subscription column/field, so staff can check which
targeted announcements a given user qualifies for.
"""
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ("username", "email", "subscription", "is_staff", "date_joined")
    list_filter = BaseUserAdmin.list_filter + ("subscription",)
    fieldsets = BaseUserAdmin.fieldsets + (
        ("Targeting", {"fields": ("subscription",)}),
    )
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ("Targeting", {"fields": ("subscription",)}),
    )
