"""Default visit descriptions.

Visits saved without a description get a checklist matching the visit type,
filled with the pet's and owner's names.
"""

from __future__ import annotations

from .models import Visit


_TEMPLATES = {
    Visit.TYPE_REGULAR_CHECKUP: (
        "Regular Check-up Notes:\n"
        "- Temperature and heart rate measured from {pet}: Y/N\n"
        "- Vaccination status reviewed with {owner}: Y/N\n"
        "- Teeth and gums inspected from {pet}: Y/N\n"
        "- Overall condition recorded: Y/N\n"
        "- Follow-up discussion held with {owner}: Y/N\n"
    ),
    Visit.TYPE_RECHARGE: (
        "Recharge Visit Notes:\n"
        "- Fluids and electrolytes replenished for {pet}: Y/N\n"
        "- Supplements provided as needed: Y/N\n"
        "- Post-recharge behavior observed in {pet}: Y/N\n"
        "- Recovery instructions shared with {owner}: Y/N\n"
    ),
    Visit.TYPE_STATUS_CONDITION_HEALING: (
        "Healing Progress Notes:\n"
        "- Healing progress assessed for {pet}: Y/N\n"
        "- Signs of infection or inflammation checked: Y/N\n"
        "- Treatment plan adjusted if necessary: Y/N\n"
        "- Condition progress discussed with {owner}: Y/N\n"
    ),
    Visit.TYPE_DISEASE_TREATMENT: (
        "Disease Treatment Notes:\n"
        "- Prescribed medications administered to {pet}: Y/N\n"
        "- Vital signs monitored for {pet}: Y/N\n"
        "- Side effects and patient response recorded: Y/N\n"
        "- Treatment outcomes reviewed with {owner}: Y/N\n"
    ),
    Visit.TYPE_OTHER: (
        "General Visit Notes:\n"
        "- Concerns discussed with {owner}: Y/N\n"
        "- Unusual observations about {pet} recorded: Y/N\n"
        "- Follow-up recommendations provided: Y/N\n"
    ),
}


def default_description(visit_type: str, pet=None) -> str:
    pet_name = getattr(pet, 'name', None) or 'the pet'
    owner = getattr(pet, 'owner', None)
    owner_name = getattr(owner, 'full_name', None) or 'the pet owner'

    template = _TEMPLATES.get(visit_type, _TEMPLATES[Visit.TYPE_OTHER])
    return template.format(pet=pet_name, owner=owner_name)
