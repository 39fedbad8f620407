# app/core/roles.py
import enum


class Role(str, enum.Enum):
    user = "user"
    chef_dept = "chef_dept"
    direction = "direction"
    comptable = "comptable"
