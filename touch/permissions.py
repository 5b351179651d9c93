"""
Touch Permissions

Model permission checks for the submission admin endpoints.
"""
from rest_framework import permissions


class CanViewSubmissions(permissions.BasePermission):
    """
    Permission to list and view submissions.
    """

    def has_permission(self, request, view):
        return (
            request.user and
            request.user.is_authenticated and
            request.user.has_perm('touch.view_submission')
        )


class CanChangeSubmissions(permissions.BasePermission):
    """
    Permission to edit submissions (reading the edit form included).
    """

    def has_permission(self, request, view):
        return (
            request.user and
            request.user.is_authenticated and
            request.user.has_perm('touch.change_submission')
        )


class CanDeleteSubmissions(permissions.BasePermission):
    """
    Permission to delete submissions (reading the confirmation included).
    """

    def has_permission(self, request, view):
        return (
            request.user and
            request.user.is_authenticated and
            request.user.has_perm('touch.delete_submission')
        )
