"""View models bound as the root of template execution."""

from pydantic import BaseModel, ConfigDict, Field

MEMBER_NAMES = ("Chris McCord", "Matt Sears", "David Stump", "Ricardo Thompson")


class Person(BaseModel):
    """One roster member."""

    model_config = ConfigDict(frozen=True)

    name: str


class ViewContext(BaseModel):
    """Per-request data handed to the layout fragment.

    `title` is the raw path segment, never transformed. `members` keeps
    display order.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Page title, taken verbatim from the request path")
    members: tuple[Person, ...] = Field(..., description="Roster in display order")

    def template_vars(self) -> dict[str, object]:
        """Expose each field as a top-level template variable."""
        return {"title": self.title, "members": self.members}


def build_members() -> tuple[Person, ...]:
    """Build a fresh copy of the fixed roster."""
    return tuple(Person(name=name) for name in MEMBER_NAMES)
