import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

	initial = True

	dependencies = []

	operations = [
		migrations.CreateModel(
			name="Owner",
			fields=[
				("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
				("first_name", models.CharField(max_length=100)),
				("last_name", models.CharField(max_length=100)),
				("address", models.CharField(blank=True, max_length=255)),
				("city", models.CharField(blank=True, max_length=100)),
				("email", models.EmailField(blank=True, max_length=254)),
				("telephone", models.CharField(blank=True, max_length=30)),
				("created_at", models.DateTimeField(auto_now_add=True)),
				("updated_at", models.DateTimeField(auto_now=True)),
			],
			options={
				"ordering": ["last_name", "first_name", "id"],
			},
		),
		migrations.CreateModel(
			name="PetType",
			fields=[
				("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
				("name", models.CharField(max_length=100, unique=True)),
			],
			options={
				"ordering": ["name", "id"],
			},
		),
		migrations.CreateModel(
			name="Pet",
			fields=[
				("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
				("name", models.CharField(max_length=100)),
				("identification_number", models.CharField(max_length=50)),
				("health_status", models.CharField(choices=[("HEALTHY", "HEALTHY"), ("SICK", "SICK"), ("IN_RECOVERY", "IN_RECOVERY"), ("UNKNOWN", "UNKNOWN")], default="UNKNOWN", max_length=20)),
				("birthdate", models.DateField(blank=True, null=True)),
				("created_at", models.DateTimeField(auto_now_add=True)),
				("updated_at", models.DateTimeField(auto_now=True)),
				("owner", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="pets", to="pets.owner")),
				("type", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="pets", to="pets.pettype")),
			],
			options={
				"ordering": ["name", "id"],
			},
		),
	]
