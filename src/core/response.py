"""Response helpers shared by the entity endpoints."""

from rest_framework.response import Response


def generic_message(message: str, status: int = 200) -> Response:
    """Return the `{ "message": ... }` confirmation used when no entity is returned."""

    return Response({"message": message}, status=status)


__all__ = ["generic_message"]
