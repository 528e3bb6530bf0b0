"""Seed roles, demo users, and sample reference data."""

from datetime import datetime, timezone

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from access_control.models import Role
from articles.models import UCSBArticles
from dining.models import UCSBDiningCommonsMenuItem
from organizations.models import UCSBOrganizations

DEMO_USERS = {
    "admin@example.com": (Role.ADMIN, Role.USER),
    "user@example.com": (Role.USER,),
}

SAMPLE_MENU_ITEMS = [
    {"dining_commons_code": "ortega", "name": "Baked Penne Pasta with Cheese", "station": "Entree Specials"},
    {"dining_commons_code": "portola", "name": "Tofu Banh Mi Sandwich", "station": "Entree Specials"},
]

SAMPLE_ORGANIZATIONS = [
    {"org_code": "zpr", "org_translation": "ZETA PHI RHO", "org_translation_short": "ZETA PHI RHO", "inactive": False},
    {
        "org_code": "sky",
        "org_translation": "SKYDIVING CLUB AT UCSB",
        "org_translation_short": "SKYDIVING CLUB",
        "inactive": False,
    },
]

SAMPLE_ARTICLES = [
    {
        "title": "UCSB",
        "url": "https://www.ucsb.edu/",
        "explanation": "UCSB Website",
        "email": "omar@ucsb.edu",
        "date_added": datetime(2022, 1, 3, tzinfo=timezone.utc),
    },
]


def create_seed_roles() -> dict[str, Role]:
    """Create the USER and ADMIN roles if missing and return a name->Role map."""
    roles = {}
    for name in (Role.USER, Role.ADMIN):
        role, _ = Role.objects.get_or_create(name=name)
        roles[name] = role
    return roles


class Command(BaseCommand):
    """Management command to seed roles, users, and sample data."""

    help = (
        "Seed USER/ADMIN roles, demo users, and sample menu items, organizations, "
        "and articles. Use --reset to clear previously seeded data first."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Remove the demo users and sample rows before seeding.",
        )

    def handle(self, *args, **options):
        """Entrypoint for the management command."""
        if options.get("reset"):
            self._reset_seeded_data()

        self.stdout.write("Seeding reference data...")
        roles = create_seed_roles()
        self._create_demo_users(roles)
        self._create_sample_rows()
        self.stdout.write(self.style.SUCCESS("Reference data seed completed."))

    def _reset_seeded_data(self) -> None:
        """Remove only what this command creates."""
        self.stdout.write("Resetting previously seeded data...")

        get_user_model().objects.filter(email__in=list(DEMO_USERS)).delete()
        UCSBOrganizations.objects.filter(org_code__in=[o["org_code"] for o in SAMPLE_ORGANIZATIONS]).delete()
        for item in SAMPLE_MENU_ITEMS:
            UCSBDiningCommonsMenuItem.objects.filter(**item).delete()
        for article in SAMPLE_ARTICLES:
            UCSBArticles.objects.filter(title=article["title"], url=article["url"]).delete()

        self.stdout.write(self.style.WARNING("Seeded data cleared."))

    @staticmethod
    def _create_demo_users(roles: dict[str, Role]) -> None:
        User = get_user_model()
        for email, role_names in DEMO_USERS.items():
            user, created = User.objects.get_or_create(
                email=email,
                defaults={"first_name": email.split("@")[0].capitalize()},
            )
            if created:
                user.set_unusable_password()
                user.save(update_fields=["password"])
            user.roles.add(*(roles[name] for name in role_names))

    @staticmethod
    def _create_sample_rows() -> None:
        for item in SAMPLE_MENU_ITEMS:
            UCSBDiningCommonsMenuItem.objects.get_or_create(**item)
        for org in SAMPLE_ORGANIZATIONS:
            UCSBOrganizations.objects.update_or_create(
                org_code=org["org_code"],
                defaults={k: v for k, v in org.items() if k != "org_code"},
            )
        for article in SAMPLE_ARTICLES:
            UCSBArticles.objects.get_or_create(
                title=article["title"],
                url=article["url"],
                defaults={k: v for k, v in article.items() if k not in ("title", "url")},
            )
