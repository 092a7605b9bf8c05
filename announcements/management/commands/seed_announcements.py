import json
from pathlib import Path

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.utils.dateparse import parse_datetime

from announcements.models import Announcement


def _when(raw, label):
    if not raw:
        return None
    value = parse_datetime(raw)
    if value is None:
        raise CommandError(f"Invalid {label}: {raw!r}")
    return value


class Command(BaseCommand):
    help = "Seed Announcement rows from a JSON file."

    def add_arguments(self, parser):
        parser.add_argument("json_path", type=str, help="Path to announcements JSON")

    def handle(self, *args, **opts):
        path = Path(opts["json_path"])
        if not path.exists():
            raise CommandError(f"File not found: {path}")
        data = json.loads(path.read_text(encoding="utf-8"))
        items = data if isinstance(data, list) else data.get("results", [])
        created = 0
        for x in items:
            title = x.get("title", "")
            body = x.get("body") or ""
            if Announcement.objects.filter(title=title, body=body).exists():
                continue
            obj = Announcement(
                title=title,
                body=body,
                category=x.get("category") or None,
                start_delivering_at=_when(x.get("start_delivering_at"), "start_delivering_at"),
                stop_delivering_at=_when(x.get("stop_delivering_at"), "stop_delivering_at"),
                limit_to_users=x.get("limit_to_users") or [],
            )
            try:
                obj.full_clean()
            except ValidationError as exc:
                raise CommandError(f"Invalid announcement {title!r}: {exc.message_dict}")
            obj.save()
            created += 1
        self.stdout.write(self.style.SUCCESS(f"Seeded {created} announcement(s)."))
