"""Per-operation mixins for ``RecordViewSet``.

An entity exposes exactly the operations it mixes in; the router only wires
HTTP methods whose action exists on the viewset.
"""

import logging

from rest_framework.response import Response

from .exceptions import not_found_response
from .resources import NotFound
from .response import generic_message

logger = logging.getLogger(__name__)


class ListRecordsMixin:
    def list(self, request):
        records = self.get_resource().list()
        return Response(self.get_serializer(records, many=True).data)


class RetrieveRecordMixin:
    def retrieve(self, request):
        outcome = self.get_resource().get(self.get_key())
        return self.respond(outcome)


class CreateRecordMixin:
    def create(self, request):
        """Build a record from scalar parameters and persist it."""
        serializer = self.get_create_serializer(data=self.get_scalar_params())
        serializer.is_valid(raise_exception=True)
        logger.info("Creating %s from %s", self.entity_name, dict(serializer.validated_data))

        saved = self.get_resource().create(self.record_type(**serializer.validated_data))
        return Response(self.get_serializer(saved).data)


class UpdateRecordMixin:
    def update(self, request):
        """Overwrite the allow-listed fields of the record named in the query string."""
        key = self.get_key()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        outcome = self.get_resource().update(key, serializer.validated_data)
        return self.respond(outcome)


class DestroyRecordMixin:
    def destroy(self, request):
        outcome = self.get_resource().delete(self.get_key())
        if isinstance(outcome, NotFound):
            return not_found_response(outcome)
        logger.info(outcome)
        return generic_message(outcome)


__all__ = [
    "CreateRecordMixin",
    "DestroyRecordMixin",
    "ListRecordsMixin",
    "RetrieveRecordMixin",
    "UpdateRecordMixin",
]
