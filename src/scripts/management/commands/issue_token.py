"""Print a bearer access token for an existing user (development aid)."""

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from authentication.services import TokenService


class Command(BaseCommand):
    help = "Issue an access token for the active user with the given email."

    def add_arguments(self, parser):
        parser.add_argument("email")

    def handle(self, *args, **options):
        User = get_user_model()
        try:
            user = User.objects.prefetch_related("roles").get(email=options["email"])
        except User.DoesNotExist as exc:
            raise CommandError(f"No user with email {options['email']}") from exc

        if not user.is_active:
            raise CommandError(f"User {user.email} is inactive")

        self.stdout.write(TokenService.generate_access_token(user))
