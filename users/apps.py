"""
users/apps.py — App configuration for the "users" app

Key Points
- default_auto_field: Use BigAutoField for primary keys across models in this app.
- name: Must match the dotted path used in INSTALLED_APPS ("users").
"""

from django.apps import AppConfig


class UsersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'users'
