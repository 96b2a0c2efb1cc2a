from typing import Dict, Iterable, List, Mapping, Optional

from ..errors import IndexOutOfRange, InvalidArgument, PreconditionViolation
from ..models import Competency, Profile

MIN_RATING = 1
MAX_RATING = 5


class ProfileStore:
    """Ordered competency profiles plus an optional selection."""

    def __init__(self):
        self._profiles: List[Profile] = []
        self._selected: Optional[int] = None

    def add_profile(self, profile: Profile) -> int:
        """Validate and append a profile. Returns its index."""
        self._profiles.append(validate_profile(profile.name, profile.competencies))
        return len(self._profiles) - 1

    def select_profile(self, index: Optional[int]) -> Optional[Profile]:
        if index is None:
            self._selected = None
            return None
        if not self._profiles:
            raise PreconditionViolation("No profiles exist yet; create one before selecting")
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._profiles):
            raise IndexOutOfRange(
                f"Profile index {index!r} out of range (0..{len(self._profiles) - 1})"
            )
        self._selected = index
        return self._profiles[index]

    @property
    def profiles(self) -> List[Profile]:
        return list(self._profiles)

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected

    @property
    def selected(self) -> Optional[Profile]:
        if self._selected is None:
            return None
        return self._profiles[self._selected]

    # ── Serialisation ──────────────────────────────────────────────────────

    def snapshot(self) -> dict:
        return {
            "profiles": [p.model_dump() for p in self._profiles],
            "selected": self._selected,
        }

    @classmethod
    def from_snapshot(cls, data: Mapping) -> "ProfileStore":
        store = cls()
        for raw in data.get("profiles", []):
            store.add_profile(Profile(name=raw.get("name", ""), competencies=raw.get("competencies", {})))
        store.select_profile(data.get("selected"))
        return store


def validate_profile(name: str, competencies: Mapping[str, int]) -> Profile:
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgument("Profile name must not be empty")
    ratings: Dict[str, int] = {}
    for competency, level in competencies.items():
        if isinstance(level, bool) or not isinstance(level, int) or not MIN_RATING <= level <= MAX_RATING:
            raise InvalidArgument(
                f"Rating for {competency!r} must be an integer in [{MIN_RATING}, {MAX_RATING}], got {level!r}"
            )
        ratings[competency] = level
    return Profile(name=name.strip(), competencies=ratings)


def create_draft_profile(competencies: Iterable[Competency]) -> Dict[str, int]:
    """Every known competency rated at the minimum, so no rating is ever missing."""
    return {c.name: MIN_RATING for c in competencies}


def require_known_competencies(competencies: Mapping[str, int], known: Iterable[str]):
    """Reject ratings for competencies the catalog does not define."""
    unknown = sorted(set(competencies) - set(known))
    if unknown:
        raise InvalidArgument(f"Unknown competencies: {unknown}")
