import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Announcement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(blank=True, help_text='Short heading shown to users.', max_length=255)),
                ('body', models.TextField(help_text='Announcement text. Required.')),
                ('category', models.CharField(blank=True, db_index=True, help_text='Optional tag used by ?category= filters (exact match).', max_length=80, null=True)),
                ('start_delivering_at', models.DateTimeField(blank=True, db_index=True, help_text='Delivery starts after this moment. Empty = always open.', null=True)),
                ('stop_delivering_at', models.DateTimeField(blank=True, db_index=True, help_text='Delivery stops at this moment. Empty = never expires.', null=True)),
                ('limit_to_users', models.JSONField(blank=True, default=list, help_text='Conditions every targeted user must meet, e.g. [{"field": "subscription", "value": "weekly"}]', null=True)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
            ],
            options={
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='AnnouncementView',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('announcement', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='views', to='announcements.announcement')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='announcement_views', to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.AddConstraint(
            model_name='announcementview',
            constraint=models.UniqueConstraint(fields=('user', 'announcement'), name='uniq_announcement_view'),
        ),
    ]
