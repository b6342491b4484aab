import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

	initial = True

	dependencies = [
		("pets", "0001_initial"),
		migrations.swappable_dependency(settings.AUTH_USER_MODEL),
	]

	operations = [
		migrations.CreateModel(
			name="Visit",
			fields=[
				("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
				("visit_number", models.CharField(editable=False, max_length=32, unique=True)),
				("type", models.CharField(choices=[("REGULAR_CHECKUP", "REGULAR_CHECKUP"), ("RECHARGE", "RECHARGE"), ("STATUS_CONDITION_HEALING", "STATUS_CONDITION_HEALING"), ("DISEASE_TREATMENT", "DISEASE_TREATMENT"), ("OTHER", "OTHER")], default="REGULAR_CHECKUP", max_length=32)),
				("description", models.TextField(blank=True, default="")),
				("treatment_status", models.CharField(choices=[("UPCOMING", "UPCOMING"), ("IN_PROGRESS", "IN_PROGRESS"), ("DONE", "DONE")], default="UPCOMING", max_length=20)),
				("visit_start", models.DateTimeField()),
				("visit_end", models.DateTimeField()),
				("created_at", models.DateTimeField(auto_now_add=True)),
				("updated_at", models.DateTimeField(auto_now=True)),
				("assigned_nurse", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="assigned_visits", to=settings.AUTH_USER_MODEL)),
				("pet", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="visits", to="pets.pet")),
			],
			options={
				"ordering": ["-visit_start", "visit_number"],
				"indexes": [models.Index(fields=["visit_start", "visit_end"], name="visit_interval_idx")],
			},
		),
	]
