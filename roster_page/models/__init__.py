"""Roster Page models"""

from roster_page.models.roster import MEMBER_NAMES, Person, ViewContext, build_members

__all__ = [
    "MEMBER_NAMES",
    "Person",
    "ViewContext",
    "build_members",
]
