# app/core/permissions.py
import enum

from fastapi import Depends

from app.api.auth import get_current_user
from app.core.exceptions import Forbidden
from app.core.roles import Role


class Action(str, enum.Enum):
    view_any_line = "view_any_line"
    edit_any_line = "edit_any_line"
    review_lines = "review_lines"


# role x action -> allowed
PERMISSIONS = {
    Role.user: set(),
    Role.chef_dept: {Action.view_any_line, Action.edit_any_line, Action.review_lines},
    Role.direction: {Action.view_any_line, Action.edit_any_line, Action.review_lines},
    Role.comptable: {Action.view_any_line, Action.edit_any_line, Action.review_lines},
}


def has_permission(role, action: Action) -> bool:
    try:
        role = Role(role)
    except ValueError:
        return False
    return action in PERMISSIONS[role]


def require_permission(action: Action):
    def checker(user=Depends(get_current_user)):
        if not has_permission(user.role, action):
            raise Forbidden("Insufficient permissions")
        return user
    return checker
