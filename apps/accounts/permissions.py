from rest_framework import permissions


class IsBureauAdmin(permissions.BasePermission):
    """
    Permission: User must be a bureau admin.
    """

    message = 'Only bureau admins can perform this action.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)


class CanViewGroup(permissions.BasePermission):
    """
    Permission: Admins see every group, group leaders only their own.

    The group name is read from the ``group_name`` URL kwarg.
    """

    message = 'You can only view the members of your own group.'

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        return user.can_view_group(view.kwargs.get('group_name'))
