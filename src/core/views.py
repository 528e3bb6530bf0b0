"""Base ViewSet that turns entity metadata into a role-gated CRUD endpoint.

Concrete viewsets pick their operations by mixing in the classes from
``core.mixins`` and describe the entity through class attributes. The store
is injected when the view is built, e.g.
``OrganizationViewSet.as_view({"get": "retrieve"}, store=store)``; the
routers in ``core.routers`` do this for every registered entity.
"""

from typing import Any, Optional

from django.core.exceptions import ImproperlyConfigured
from django.http import QueryDict
from rest_framework import serializers, viewsets
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from access_control.permissions import CapabilityPermission

from .exceptions import not_found_response
from .resources import CrudResource, NotFound
from .stores import EntityStore


class RecordViewSet(viewsets.ViewSet):
    """Shared plumbing for the entity endpoints."""

    entity_name: str = ""
    record_type: Optional[type] = None
    key_param = "id"
    key_field_class: type[serializers.Field] = serializers.IntegerField
    key_field_kwargs: dict[str, Any] = {}
    serializer_class: Optional[type[serializers.Serializer]] = None
    create_serializer_class: Optional[type[serializers.Serializer]] = None
    mutable_fields: tuple[str, ...] = ()
    capabilities = {
        "list": "user",
        "retrieve": "user",
        "create": "admin",
        "update": "admin",
        "destroy": "admin",
    }
    permission_classes = [CapabilityPermission]
    store: Optional[EntityStore] = None

    def required_capability(self) -> Optional[str]:
        return self.capabilities.get(getattr(self, "action", None))

    def get_resource(self) -> CrudResource:
        if self.store is None:
            raise ImproperlyConfigured(
                f"{type(self).__name__} was built without a store; pass store=... to as_view()."
            )
        return CrudResource(self.store, self.entity_name, self.mutable_fields)

    def get_serializer_class(self) -> type[serializers.Serializer]:
        return self.serializer_class

    def get_serializer_context(self) -> dict[str, Any]:
        return {"request": getattr(self, "request", None), "view": self}

    def get_serializer(self, *args, **kwargs) -> serializers.Serializer:
        kwargs.setdefault("context", self.get_serializer_context())
        return self.get_serializer_class()(*args, **kwargs)

    def get_create_serializer(self, *args, **kwargs) -> serializers.Serializer:
        serializer_class = self.create_serializer_class or self.get_serializer_class()
        kwargs.setdefault("context", self.get_serializer_context())
        return serializer_class(*args, **kwargs)

    def get_key(self) -> Any:
        """Read and type-check the key from the query string."""
        raw = self.request.query_params.get(self.key_param)
        if raw is None:
            raise ValidationError({self.key_param: ["This field is required."]})
        try:
            return self.key_field_class(**self.key_field_kwargs).run_validation(raw)
        except ValidationError as exc:
            raise ValidationError({self.key_param: exc.detail}) from exc

    def get_scalar_params(self) -> QueryDict:
        """Collect create fields from the query string and any form body."""
        params = self.request.query_params.copy()
        if isinstance(self.request.data, QueryDict):
            params.update(self.request.data)
        return params

    def respond(self, outcome: Any) -> Response:
        if isinstance(outcome, NotFound):
            return not_found_response(outcome)
        return Response(self.get_serializer(outcome).data)


__all__ = ["RecordViewSet"]
