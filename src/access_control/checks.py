"""System checks for capability declarations on entity endpoints."""

from django.core.checks import Error, register

from access_control.permissions import CAPABILITY_ROLES, CapabilityPermission

OPERATIONS = ("list", "retrieve", "create", "update", "destroy")


def check_viewset(view_cls) -> list[Error]:
    """Validate one RecordViewSet subclass."""
    errors: list[Error] = []
    if CapabilityPermission not in getattr(view_cls, "permission_classes", []):
        return errors

    if not getattr(view_cls, "entity_name", ""):
        errors.append(
            Error(
                f"{view_cls.__name__} uses CapabilityPermission but does not define entity_name.",
                obj=view_cls,
                id="access_control.E001",
            )
        )

    capabilities = getattr(view_cls, "capabilities", {})
    for action in OPERATIONS:
        if hasattr(view_cls, action) and capabilities.get(action) not in CAPABILITY_ROLES:
            errors.append(
                Error(
                    f"{view_cls.__name__}.{action} has no known capability "
                    f"(expected one of {sorted(CAPABILITY_ROLES)}).",
                    obj=view_cls,
                    id="access_control.E002",
                )
            )
    return errors


@register()
def entity_views_declare_capabilities(app_configs, **kwargs):
    """Ensure every exposed entity viewset names its entity and capabilities.

    New entity viewsets must be added to the list below.
    """
    # Import here to avoid circular imports at module load time.
    from articles.views import ArticleViewSet
    from dining.views import MenuItemViewSet
    from organizations.views import OrganizationViewSet

    errors: list[Error] = []
    for view_cls in (MenuItemViewSet, OrganizationViewSet, ArticleViewSet):
        errors.extend(check_viewset(view_cls))
    return errors
