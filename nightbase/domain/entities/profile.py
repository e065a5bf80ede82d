"""Profile entity — display data for a guest or a cast."""

from dataclasses import dataclass

from nightbase.domain.value_objects.enums import ProfileRole


@dataclass(frozen=True)
class Profile:
    id: str
    display_name: str | None
    role: ProfileRole
    avatar_url: str | None = None

    def is_guest(self) -> bool:
        return self.role == ProfileRole.GUEST
